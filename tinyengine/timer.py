"""Wall-clock timer measuring seconds since a start point."""

from __future__ import annotations

import time


class Timer:
    """Measures elapsed time from creation or the last reset."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the start point."""
        return time.perf_counter() - self._start

    def reset(self) -> None:
        """Move the start point to now."""
        self._start = time.perf_counter()