# renderer/raytracer.py
import time

import numpy as np

from spheretrace.camera.camera import PinholeCamera
from spheretrace.geometry.sphere import Sphere
from .kernels import compute_hit_mask
from .settings import RenderSettings


class Renderer:
    """
    Casts one ray per pixel and colors every pixel by hit or miss.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.camera = PinholeCamera(settings.width, settings.height, settings.fov)

    def hit_mask(self, sphere: Sphere) -> np.ndarray:
        """
        Returns a (height, width) boolean array, True where the pixel ray
        hits the sphere in front of the camera.
        """
        if self.settings.backend == "numba":
            return compute_hit_mask(
                self.width, self.height,
                self.camera.ray_scalar, self.camera.aspect_ratio,
                self.camera.origin.as_array(), sphere.position.as_array(),
                sphere.radius,
            )
        return self._hit_mask_python(sphere)

    def _hit_mask_python(self, sphere: Sphere) -> np.ndarray:
        mask = np.zeros((self.height, self.width), dtype=np.bool_)
        for py in range(self.height):
            for px in range(self.width):
                ray = self.camera.get_ray(px, py)
                mask[py, px] = sphere.hit(ray)
        return mask

    def render(self, sphere: Sphere) -> np.ndarray:
        """
        Renders the sphere into a (height, width, 3) uint8 RGB image.
        """
        start = time.perf_counter()
        if self.settings.verbose:
            print(f"Rendering {self.width}x{self.height} (fov {self.settings.fov}, backend: {self.settings.backend})")

        mask = self.hit_mask(sphere)
        image = np.empty((self.height, self.width, 3), dtype=np.uint8)
        image[...] = self.settings.miss_color
        image[mask] = self.settings.hit_color

        if self.settings.verbose:
            elapsed = time.perf_counter() - start
            print(f"Rendered {int(mask.sum())} hit pixels in {elapsed:.3f}s")
        return image
