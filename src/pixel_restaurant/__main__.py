from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import run_auto, run_gui, run_headless
from .config.settings import Settings
from .errors import RestaurantError
from .logging_config import configure_logging


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    configure_logging(level)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pixel-restaurant",
        description="Pixel Restaurant - help the waiter find the table",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N ticks (headless)")
    parser.add_argument("--tick-rate", type=float, default=0.0, help="Headless tick rate (Hz); 0 = unthrottled")
    parser.add_argument("--settings", type=Path, default=None, help="YAML file overriding default settings")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        settings = Settings.load(args.settings)
    except RestaurantError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.gui:
        return run_gui(settings, max_steps=args.max_steps)
    if args.headless:
        return run_headless(settings, max_steps=args.max_steps, tick_rate=args.tick_rate)
    return run_auto(settings, max_steps=args.max_steps, tick_rate=args.tick_rate)


if __name__ == "__main__":
    sys.exit(main())
