"""Frame timing for the game loop."""

from __future__ import annotations

import time

DEFAULT_TARGET_FPS = 60
DEFAULT_FRAME_TIME_SECONDS = 1.0 / DEFAULT_TARGET_FPS
DEFAULT_FRAME_TIME = 0.016  # seconds, roughly 60 frames per second


class GameLoop:
    """Measures time between frames and paces the loop to a target frame rate."""

    def __init__(self) -> None:
        self._last_time = time.perf_counter()
        self._target_fps = DEFAULT_TARGET_FPS
        self._frame_time = DEFAULT_FRAME_TIME_SECONDS

    def delta_time(self) -> float:
        """Seconds since the previous call (or since creation)."""
        now = time.perf_counter()
        delta = now - self._last_time
        self._last_time = now
        return delta

    @property
    def target_fps(self) -> int:
        return self._target_fps

    @target_fps.setter
    def target_fps(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("target frame rate must be positive")
        self._target_fps = fps
        self._frame_time = 1.0 / fps

    @property
    def target_frame_time(self) -> float:
        """Seconds per frame at the target frame rate."""
        return self._frame_time

    def sleep_for_frame_rate(self) -> None:
        """Sleep for one target frame time."""
        time.sleep(self._frame_time)