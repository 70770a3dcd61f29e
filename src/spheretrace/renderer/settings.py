# renderer/settings.py
from dataclasses import dataclass
from typing import Tuple

WIDTH = 1000
HEIGHT = 600
FOV = 90.0

HIT_COLOR = (255, 255, 255)
MISS_COLOR = (50, 50, 50)

SPHERE_POSITION = (0.0, 0.0, 3.0, 0.0)
SPHERE_RADIUS = 1.0

OUTPUT_PATH = "result.png"

BACKENDS = ("python", "numba")


@dataclass
class RenderSettings:
    """Everything the renderer needs to produce one frame."""
    width: int = WIDTH
    height: int = HEIGHT
    fov: float = FOV
    backend: str = "numba"
    hit_color: Tuple[int, int, int] = HIT_COLOR
    miss_color: Tuple[int, int, int] = MISS_COLOR
    output: str = OUTPUT_PATH
    verbose: bool = True
    sphere_position: Tuple[float, ...] = SPHERE_POSITION
    sphere_radius: float = SPHERE_RADIUS

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {self.width}x{self.height}")
        if not 0.0 < self.fov < 360.0:
            raise ValueError(f"Field of view must be in (0, 360) degrees, got {self.fov}")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{self.backend}', expected one of {BACKENDS}")
        for color in (self.hit_color, self.miss_color):
            if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
                raise ValueError(f"Colors must be three channels in [0, 255], got {color}")
