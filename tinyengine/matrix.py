"""3x3 matrices for 2D affine transformations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from tinyengine.constants import EPSILON
from tinyengine.vector import Vector2, Vector3

Row = tuple[float, float, float]


class SingularMatrixError(ValueError):
    """Raised when a matrix with a (near) zero determinant is inverted."""


@dataclass(frozen=True)
class Matrix3x3:
    """An immutable 3x3 matrix stored as three rows."""

    rows: tuple[Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a 3x3 matrix needs three rows of three values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix3x3:
        return cls(tuple(tuple(row) for row in rows))  # type: ignore[arg-type]

    @classmethod
    def identity(cls) -> Matrix3x3:
        return cls(((1, 0, 0), (0, 1, 0), (0, 0, 1)))

    @classmethod
    def translation(cls, dx: float, dy: float) -> Matrix3x3:
        return cls(((1, 0, dx), (0, 1, dy), (0, 0, 1)))

    @classmethod
    def scaling(cls, sx: float, sy: float) -> Matrix3x3:
        return cls(((sx, 0, 0), (0, sy, 0), (0, 0, 1)))

    @classmethod
    def rotation(cls, angle: float) -> Matrix3x3:
        """Counter-clockwise rotation by ``angle`` radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return cls(((cos, -sin, 0), (sin, cos, 0), (0, 0, 1)))

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def multiply(self, other: Matrix3x3) -> Matrix3x3:
        columns = list(zip(*other.rows))
        return Matrix3x3(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )  # type: ignore[arg-type]
        )

    def __matmul__(self, other: Matrix3x3) -> Matrix3x3:
        return self.multiply(other)

    def multiply_vector(self, v: Vector3) -> Vector3:
        (a, b, c), (d, e, f), (g, h, i) = self.rows
        return Vector3(
            a * v.x + b * v.y + c * v.z,
            d * v.x + e * v.y + f * v.z,
            g * v.x + h * v.y + i * v.z,
        )

    def transform_point(self, point: Vector2) -> Vector2:
        """Transform a point, treated as a homogeneous coordinate with z = 1."""
        return self.multiply_vector(point.to_vector3()).to_vector2()

    def transform_vector(self, vector: Vector2) -> Vector2:
        """Transform a direction, treated as a homogeneous coordinate with z = 0."""
        result = self.multiply_vector(Vector3(vector.x, vector.y, 0.0))
        return Vector2(result.x, result.y)

    def determinant(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self.rows
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def inverse(self) -> Matrix3x3:
        """Return the inverse; raise SingularMatrixError if there is none."""
        det = self.determinant()
        if abs(det) < EPSILON:
            raise SingularMatrixError("cannot invert singular matrix")
        inv = 1.0 / det
        (a, b, c), (d, e, f), (g, h, i) = self.rows
        return Matrix3x3(
            (
                ((e * i - f * h) * inv, (c * h - b * i) * inv, (b * f - c * e) * inv),
                ((f * g - d * i) * inv, (a * i - c * g) * inv, (c * d - a * f) * inv),
                ((d * h - e * g) * inv, (b * g - a * h) * inv, (a * e - b * d) * inv),
            )
        )

    def transpose(self) -> Matrix3x3:
        return Matrix3x3(tuple(zip(*self.rows)))  # type: ignore[arg-type]

    def is_identity(self) -> bool:
        return self.equals(Matrix3x3.identity())

    def equals(self, other: Matrix3x3) -> bool:
        """Element-wise comparison within EPSILON."""
        return all(
            abs(a - b) <= EPSILON
            for row, other_row in zip(self.rows, other.rows)
            for a, b in zip(row, other_row)
        )