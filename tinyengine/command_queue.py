"""A queue of deferred draw commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tinyengine.interfaces import Renderer


class CommandType(Enum):
    CLEAR = 0
    RECTANGLE = 1


@dataclass(frozen=True)
class RenderCommand:
    """One draw command and its parameters."""

    type: CommandType
    params: dict[str, Any] = field(default_factory=dict)


class CommandQueue:
    """Collects draw commands and replays them on a renderer in order."""

    def __init__(self) -> None:
        self._commands: list[RenderCommand] = []

    def add_clear_command(self) -> None:
        self._commands.append(RenderCommand(CommandType.CLEAR))

    def add_rectangle_command(self, x: float, y: float, width: float, height: float) -> None:
        self._commands.append(
            RenderCommand(
                CommandType.RECTANGLE,
                {"x": x, "y": y, "width": width, "height": height},
            )
        )

    def execute(self, renderer: Renderer) -> None:
        """Send every queued command to ``renderer``; the queue is left as it is."""
        for command in self._commands:
            if command.type is CommandType.CLEAR:
                renderer.clear()
            elif command.type is CommandType.RECTANGLE:
                params = command.params
                renderer.draw_rectangle(
                    params["x"], params["y"], params["width"], params["height"]
                )

    def clear(self) -> None:
        """Drop all queued commands."""
        self._commands.clear()

    @property
    def commands(self) -> list[RenderCommand]:
        """A copy of the queued commands."""
        return list(self._commands)

    def __len__(self) -> int:
        return len(self._commands)