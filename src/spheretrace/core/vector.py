# core/vector.py
import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

# Absolute tolerance for float comparisons
EPSILON = 0.0001


def equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    return abs(a - b) < epsilon


@dataclass(frozen=True)
class Vector:
    """
    A homogeneous 4D vector (x, y, z, w). Points and directions share the
    type; directions conventionally carry w = 0.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def new(cls, components: Iterable[float]) -> "Vector":
        """
        Builds a vector from up to four scalars. Missing trailing components
        are zero; anything past the fourth is ignored.
        """
        values = [float(c) for c in components][:4]
        values += [0.0] * (4 - len(values))
        return cls(*values)

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y,
                      self.z + other.z, self.w + other.w)

    def sub(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y,
                      self.z - other.z, self.w - other.w)

    def negate(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z, -self.w)

    def scale(self, k: float) -> "Vector":
        return Vector(self.x * k, self.y * k, self.z * k, self.w * k)

    def dot(self, other: "Vector") -> float:
        # w takes part, so pure 3D directions need w = 0
        return (self.x * other.x + self.y * other.y +
                self.z * other.z + self.w * other.w)

    def cross(self, other: "Vector") -> "Vector":
        """
        3D cross product on (x, y, z). The result always has w = 0.
        """
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vector":
        """
        Returns the unit vector pointing the same way.
        The magnitude must be nonzero, otherwise ZeroDivisionError is raised.
        """
        m = self.magnitude()
        return Vector(self.x / m, self.y / m, self.z / m, self.w / m)

    def approx_equal(self, other: "Vector", epsilon: float = EPSILON) -> bool:
        return all(equal(a, b, epsilon)
                   for a, b in zip(self.as_tuple(), other.as_tuple()))

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def as_array(self) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=np.float64)

    # Operators map onto the named operations above
    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.sub(other)

    def __neg__(self) -> "Vector":
        return self.negate()

    def __mul__(self, other):
        # Vector * Vector is the dot product, Vector * scalar scales
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector":
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __xor__(self, other: "Vector") -> "Vector":
        return self.cross(other)

    def __str__(self) -> str:
        top = "┌────" + "────┬────" * 3 + "────┐"
        row = "│" + "│".join(f"{c:^8.2f}" for c in self.as_tuple()) + "│"
        bottom = "└────" + "────┴────" * 3 + "────┘"
        return "\n".join((top, row, bottom))
