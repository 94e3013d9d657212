"""The default application run by the engine."""

from __future__ import annotations

import logging

from tinyengine.interfaces import GameObject, Renderer

logger = logging.getLogger(__name__)


class Application(GameObject):
    """A minimal application that tracks its lifecycle and draws nothing."""

    def __init__(self) -> None:
        self.initialized = False
        self.destroyed = False
        self.elapsed = 0.0
        self.updates = 0
        self.frames = 0

    def initialize(self) -> None:
        """Mark the application as started."""
        logger.info("Initializing application...")
        self.initialized = True
        self.destroyed = False

    def update(self, delta_time: float) -> None:
        """Advance the application's clock by ``delta_time`` seconds."""
        self.elapsed += delta_time
        self.updates += 1

    def render(self, renderer: Renderer | None) -> None:
        """Count a rendered frame; the default scene is empty."""
        self.frames += 1

    def destroy(self) -> None:
        """Mark the application as shut down."""
        logger.info("Shutting down application...")
        self.initialized = False
        self.destroyed = True