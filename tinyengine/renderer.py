"""A headless renderer that keeps its size and records what it is asked to draw."""

from __future__ import annotations

from typing import Any

from tinyengine.interfaces import Renderer


class BaseRenderer(Renderer):
    """Renderer with a fixed size that records draw calls instead of rasterising them.

    Draw calls go into the current frame; ``clear`` empties it and
    ``present`` counts the frame as shown and keeps a copy of it.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._frame: list[tuple[Any, ...]] = []
        self._presented: tuple[tuple[Any, ...], ...] = ()
        self._frames_presented = 0

    @property
    def frame(self) -> tuple[tuple[Any, ...], ...]:
        """The draw calls recorded since the last clear."""
        return tuple(self._frame)

    @property
    def presented(self) -> tuple[tuple[Any, ...], ...]:
        """The draw calls of the most recently presented frame."""
        return self._presented

    @property
    def frames_presented(self) -> int:
        """How many frames have been presented."""
        return self._frames_presented

    def clear(self) -> None:
        self._frame.clear()

    def present(self) -> None:
        self._presented = tuple(self._frame)
        self._frames_presented += 1

    def draw_rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self._frame.append(("rectangle", x, y, width, height))

    def draw_primitive(self, primitive: Any) -> None:
        self._frame.append(("primitive", primitive))

    def draw_rectangle_color(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        red: float,
        green: float,
        blue: float,
        alpha: float,
    ) -> None:
        self._frame.append(
            ("rectangle_color", x, y, width, height, red, green, blue, alpha)
        )

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        red: float,
        green: float,
        blue: float,
        alpha: float,
    ) -> None:
        self._frame.append(("circle", x, y, radius, red, green, blue, alpha))

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        red: float,
        green: float,
        blue: float,
        alpha: float,
    ) -> None:
        self._frame.append(("line", x1, y1, x2, y2, red, green, blue, alpha))

    def size(self) -> tuple[int, int]:
        """The drawing area as (width, height)."""
        return self._width, self._height