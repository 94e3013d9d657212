"""Command that starts a short demonstration run of the engine."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Sequence

from tinyengine.application import Application
from tinyengine.engine import Engine
from tinyengine.timer import Timer

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 2.0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinyengine", description="Run a short TinyEngine demonstration."
    )
    parser.add_argument("--title", default="TinyEngine Demo", help="engine title")
    parser.add_argument("--width", type=int, default=800, help="window width")
    parser.add_argument("--height", type=int, default=600, help="window height")
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help="seconds to wait before finishing",
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Set up an engine with the default application, wait, and report the time."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    print("TinyEngine - a small educational game engine")

    engine = Engine(args.title, args.width, args.height)
    engine.application = Application()

    logger.info("Starting engine...")
    time.sleep(args.delay)

    timer = Timer()
    logger.info("Run started at: %.3f seconds", timer.elapsed())
    logger.info("TinyEngine run complete")
    return 0