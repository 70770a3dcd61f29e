# geometry/sphere.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from spheretrace.core.ray import Ray
from spheretrace.core.vector import Vector


@dataclass(frozen=True)
class Sphere:
    """
    Represents a sphere defined by its center position and radius.
    """
    position: Vector
    radius: float

    def intersect(self, ray: Ray) -> Optional[Tuple[float, float]]:
        """
        Solves |origin + t * direction - position|^2 = radius^2 for t.

        Returns (t1, t2) with t1 >= t2, or None when the ray misses. The ray
        direction must be nonzero, otherwise ZeroDivisionError is raised.
        """
        sphere_to_ray = ray.origin - self.position

        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b + sqrt_disc) / (2.0 * a)
        t2 = (-b - sqrt_disc) / (2.0 * a)
        return (t1, t2)

    def hit(self, ray: Ray) -> bool:
        """
        True when at least one intersection lies in front of the ray origin.
        """
        intersection = self.intersect(ray)
        if intersection is None:
            return False
        t1, t2 = intersection
        return t1 > 0.0 or t2 > 0.0
