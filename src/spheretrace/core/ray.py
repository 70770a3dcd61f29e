# core/ray.py
from dataclasses import dataclass

from spheretrace.core.vector import Vector


@dataclass(frozen=True)
class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not normalized.
    """
    origin: Vector
    direction: Vector

    def at(self, t: float) -> Vector:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t
