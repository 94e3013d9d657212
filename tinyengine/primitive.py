"""Drawable primitive shapes and their vertex data."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

DEFAULT_CIRCLE_SEGMENTS = 32
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_ALPHA = 1.0


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components from 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = DEFAULT_ALPHA

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        """An opaque colour."""
        return cls(r, g, b, DEFAULT_ALPHA)


class PrimitiveType(Enum):
    TRIANGLE = 0
    RECTANGLE = 1
    CIRCLE = 2
    LINE = 3


class Primitive(ABC):
    """A shape that can hand its vertices and indices to a renderer.

    Vertices are flat lists of x, y, z triples.
    """

    color: Color
    primitive_type: ClassVar[PrimitiveType]

    @abstractmethod
    def vertices(self) -> list[float]:
        """Flat list of x, y, z values, one triple per vertex."""

    @abstractmethod
    def indices(self) -> list[int]:
        """Vertex indices in drawing order."""


@dataclass
class Rectangle(Primitive):
    """An axis-aligned rectangle whose (x, y) is its top-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: Color

    primitive_type: ClassVar[PrimitiveType] = PrimitiveType.RECTANGLE

    def vertices(self) -> list[float]:
        left, top = self.x, self.y
        right, bottom = self.x + self.width, self.y + self.height
        return [
            left, bottom, 0.0,
            right, bottom, 0.0,
            right, top, 0.0,
            left, top, 0.0,
        ]

    def indices(self) -> list[int]:
        return [0, 1, 2, 2, 3, 0]


@dataclass
class Circle(Primitive):
    """A filled circle drawn as a fan of ``segments`` triangles."""

    x: float
    y: float
    radius: float
    color: Color
    segments: int = DEFAULT_CIRCLE_SEGMENTS

    primitive_type: ClassVar[PrimitiveType] = PrimitiveType.CIRCLE

    def __post_init__(self) -> None:
        if self.segments < 1:
            raise ValueError("a circle needs at least one segment")

    def vertices(self) -> list[float]:
        """Centre, then the rim points, with the first rim point repeated at the end."""
        result = [self.x, self.y, 0.0]
        for i in range(self.segments + 1):
            angle = 2.0 * math.pi * i / self.segments
            result.extend(
                (
                    self.x + self.radius * math.cos(angle),
                    self.y + self.radius * math.sin(angle),
                    0.0,
                )
            )
        return result

    def indices(self) -> list[int]:
        return [index for i in range(self.segments) for index in (0, i + 1, i + 2)]


@dataclass
class Line(Primitive):
    """A line segment from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    width: float = DEFAULT_LINE_WIDTH

    primitive_type: ClassVar[PrimitiveType] = PrimitiveType.LINE

    def vertices(self) -> list[float]:
        return [self.x1, self.y1, 0.0, self.x2, self.y2, 0.0]

    def indices(self) -> list[int]:
        return [0, 1]