"""Abstract interfaces implemented by engine components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Renderer(ABC):
    """Something that can clear the screen, draw shapes and present a frame."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen."""

    @abstractmethod
    def present(self) -> None:
        """Show what has been drawn."""

    @abstractmethod
    def draw_rectangle(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a rectangle."""

    @abstractmethod
    def draw_primitive(self, primitive: Any) -> None:
        """Draw a primitive shape."""

    @abstractmethod
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
        """Draw a coloured rectangle."""

    @abstractmethod
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
        """Draw a coloured circle."""

    @abstractmethod
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
        """Draw a coloured line."""


class GameObject(ABC):
    """The life cycle every game object goes through."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the object; raise on failure."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds."""

    @abstractmethod
    def render(self, renderer: Renderer | None) -> None:
        """Draw the object."""

    @abstractmethod
    def destroy(self) -> None:
        """Release what the object holds."""


class InputManager(ABC):
    """Keyboard and mouse state."""

    @abstractmethod
    def update(self) -> None:
        """Refresh the input state."""

    @abstractmethod
    def is_key_pressed(self, key: int) -> bool:
        """Whether ``key`` is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """The mouse position."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """Whether ``button`` is held down."""


class AudioManager(ABC):
    """Sound and music playback."""

    @abstractmethod
    def initialize(self) -> None:
        """Start the audio system; raise on failure."""

    @abstractmethod
    def play_sound(self, filename: str) -> None:
        """Play a sound effect."""

    @abstractmethod
    def play_music(self, filename: str) -> None:
        """Play background music."""

    @abstractmethod
    def stop_music(self) -> None:
        """Stop the music."""

    @abstractmethod
    def set_volume(self, volume: float) -> None:
        """Set the volume, from 0.0 to 1.0."""

    @abstractmethod
    def destroy(self) -> None:
        """Shut the audio system down."""