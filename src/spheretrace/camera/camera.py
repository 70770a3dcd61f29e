# camera/camera.py
import math

from spheretrace.core.ray import Ray
from spheretrace.core.vector import Vector


class PinholeCamera:
    """
    Fixed pinhole camera at the origin looking down +z.
    """
    def __init__(self, width: int, height: int, fov: float):
        if width < 1 or height < 1:
            raise ValueError(f"Camera needs width and height >= 1, got {width}x{height}")
        self.width = width
        self.height = height
        self.fov = fov  # Field of view in degrees
        self.origin = Vector(0.0, 0.0, 0.0, 0.0)
        self.update_camera()

    def update_camera(self):
        """Recomputes the viewport scale and aspect ratio."""
        self.ray_scalar = math.cos((90.0 - self.fov / 2.0) * math.pi / 180.0)
        self.aspect_ratio = self.height / self.width

    def get_ray(self, px: float, py: float) -> Ray:
        """Generates the ray through pixel (px, py)."""
        direction = Vector(
            ((px / self.width) * 2.0 - 1.0) * self.ray_scalar,
            ((py / self.height) * 2.0 - 1.0) * self.aspect_ratio * self.ray_scalar,
            1.0,
            0.0
        )
        return Ray(self.origin, direction)
