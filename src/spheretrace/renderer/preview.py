# renderer/preview.py
from typing import Optional

import numpy as np
import pygame


def show_image(image: np.ndarray, title: str = "spheretrace",
               max_frames: Optional[int] = None, verbose: bool = True) -> int:
    """
    Display a rendered frame in a pygame window until it is closed or
    Escape is pressed. max_frames bounds the loop for scripted runs.

    Returns the number of frames drawn.

    Raises:
        OSError: If no display is available to open the window
    """
    height, width = image.shape[:2]
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((width, height))
        except pygame.error as e:
            raise OSError(f"Cannot open preview window: {str(e)}") from e
        pygame.display.set_caption(title)

        # pygame surfaces are indexed [x, y]
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(image.swapaxes(0, 1)))
        clock = pygame.time.Clock()
        if verbose:
            print("Preview open, press Esc or close the window to exit")

        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            screen.blit(surface, (0, 0))
            pygame.display.flip()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
            clock.tick(30)
        return frames
    finally:
        pygame.quit()
