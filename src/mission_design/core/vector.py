"""
Vector Module

Immutable 3-D vector used for positions, velocities and directions in the
body-centred inertial frame.
"""

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .constants import NORMALIZE_EPSILON


@dataclass(frozen=True)
class Vector3:
    """Three-component Cartesian vector"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> "Vector3":
        """
        Unit vector in the same direction

        Returns:
            Normalized vector, or the zero vector when the magnitude is
            below NORMALIZE_EPSILON
        """
        mag = self.magnitude()
        if mag < NORMALIZE_EPSILON:
            return Vector3()
        return self / mag

    def distance(self, other: "Vector3") -> float:
        return (self - other).magnitude()

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Vector3":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)


ZERO = Vector3(0.0, 0.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)
