"""The engine that drives an application through its game loop."""

from __future__ import annotations

import time

from tinyengine.errors import EngineError
from tinyengine.game_loop import DEFAULT_FRAME_TIME
from tinyengine.interfaces import GameObject


class Engine:
    """Runs an application: initialise, then update and render each frame until stopped."""

    def __init__(
        self, title: str, width: int, height: int, application: GameObject | None = None
    ) -> None:
        self.title = title
        self.width = width
        self.height = height
        self.application = application
        self._running = False

    def run(self) -> None:
        """Run the game loop until stop() is called, then destroy the application."""
        application = self.application
        if application is None:
            raise EngineError("core", "application not set")

        try:
            application.initialize()
        except Exception as exc:
            raise EngineError("core", "application initialization", exc) from exc

        self._running = True
        last_time = time.perf_counter()
        while self._running:
            now = time.perf_counter()
            delta_time = now - last_time
            last_time = now

            application.update(delta_time)
            application.render(None)

            time.sleep(DEFAULT_FRAME_TIME)

        application.destroy()

    def stop(self) -> None:
        """Ask the loop to end after the current frame."""
        self._running = False

    @property
    def running(self) -> bool:
        return self._running