"""Two- and three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tinyengine.constants import is_zero


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2:
        """Return a unit vector, or the zero vector if this one is (almost) zero."""
        length = self.length()
        if is_zero(length):
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def distance(self, other: Vector2) -> float:
        return self.sub(other).length()

    def to_vector3(self) -> Vector3:
        """Homogeneous coordinates: the point with z = 1."""
        return Vector3(self.x, self.y, 1.0)

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.sub(other)

    def __mul__(self, scalar: float) -> Vector2:
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Vector3:
    """A 3D vector, used mostly for homogeneous 2D coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Return a unit vector, or the zero vector if this one is (almost) zero."""
        length = self.length()
        if is_zero(length):
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def to_vector2(self) -> Vector2:
        """Divide by z; when z is zero the x and y are returned as they are."""
        if self.z == 0:
            return Vector2(self.x, self.y)
        return Vector2(self.x / self.z, self.y / self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return self.sub(other)

    def __mul__(self, scalar: float) -> Vector3:
        return self.scale(scalar)

    __rmul__ = __mul__