"""2D transform made of a position, a rotation and a scale."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from tinyengine.constants import EPSILON, degrees_to_rad, rad_to_degrees
from tinyengine.matrix import Matrix3x3
from tinyengine.vector import Vector2


@dataclass
class Transform:
    """Position, rotation (radians) and scale of an object in 2D."""

    position: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))

    def to_matrix(self) -> Matrix3x3:
        """Matrix applying scale, then rotation, then translation."""
        translation = Matrix3x3.translation(self.position.x, self.position.y)
        rotation = Matrix3x3.rotation(self.rotation)
        scale = Matrix3x3.scaling(self.scale.x, self.scale.y)
        return translation @ rotation @ scale

    def to_inverse_matrix(self) -> Matrix3x3:
        """Inverse of to_matrix; raises SingularMatrixError for a zero scale."""
        return self.to_matrix().inverse()

    def transform_point(self, point: Vector2) -> Vector2:
        return self.to_matrix().transform_point(point)

    def transform_vector(self, vector: Vector2) -> Vector2:
        return self.to_matrix().transform_vector(vector)

    def inverse_transform_point(self, point: Vector2) -> Vector2:
        return self.to_inverse_matrix().transform_point(point)

    def inverse_transform_vector(self, vector: Vector2) -> Vector2:
        return self.to_inverse_matrix().transform_vector(vector)

    def set_rotation_degrees(self, degrees: float) -> None:
        self.rotation = degrees_to_rad(degrees)

    def set_uniform_scale(self, scale: float) -> None:
        self.scale = Vector2(scale, scale)

    def translate(self, offset: Vector2) -> None:
        self.position = self.position.add(offset)

    def rotate(self, angle: float) -> None:
        self.rotation += angle

    def rotate_degrees(self, degrees: float) -> None:
        self.rotation += degrees_to_rad(degrees)

    def scale_by(self, scale: Vector2) -> None:
        self.scale = Vector2(self.scale.x * scale.x, self.scale.y * scale.y)

    def scale_by_uniform(self, scale: float) -> None:
        self.scale = Vector2(self.scale.x * scale, self.scale.y * scale)

    def rotation_degrees(self) -> float:
        return rad_to_degrees(self.rotation)

    def forward(self) -> Vector2:
        return Vector2(math.cos(self.rotation), math.sin(self.rotation))

    def right(self) -> Vector2:
        return Vector2(-math.sin(self.rotation), math.cos(self.rotation))

    def up(self) -> Vector2:
        return Vector2(math.sin(self.rotation), -math.cos(self.rotation))

    def combine(self, other: Transform) -> Transform:
        """Place ``other`` inside this transform, as a child in a parent."""
        return Transform(
            position=self.transform_point(other.position),
            rotation=self.rotation + other.rotation,
            scale=Vector2(self.scale.x * other.scale.x, self.scale.y * other.scale.y),
        )

    def equals(self, other: Transform) -> bool:
        """Compare with another transform within EPSILON."""
        return (
            self.position.distance(other.position) < EPSILON
            and abs(self.rotation - other.rotation) < EPSILON
            and abs(self.scale.x - other.scale.x) < EPSILON
            and abs(self.scale.y - other.scale.y) < EPSILON
        )

    def reset(self) -> None:
        self.position = Vector2(0.0, 0.0)
        self.rotation = 0.0
        self.scale = Vector2(1.0, 1.0)