from __future__ import annotations

import logging
import os
from typing import Optional

from .config.settings import Settings
from .errors import RestaurantError
from .engine.loop import EngineConfig, GameEngine
from .game.events import GameEvent
from .game.session import SeatingSession
from .grid.layout import create_restaurant_grid, start_position, target_position
from .render.ascii import render_ascii

logger = logging.getLogger(__name__)

HEADLESS_ENV = "PIXEL_RESTAURANT_HEADLESS"

# Simulated seconds per tick when the headless loop runs unthrottled.
SIMULATED_DT = 1.0 / 30.0
HEADLESS_STEP_CAP = 10_000


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def build_session(settings: Settings) -> SeatingSession:
    size = settings.scene.size
    grid = create_restaurant_grid(size)
    return SeatingSession(grid, start_position(size), target_position(size), settings.timing)


def run_gui(settings: Optional[Settings] = None, max_steps: Optional[int] = None) -> int:
    """Open the Arcade window, or fall back to headless mode when Arcade is missing.

    Args:
        settings: Loaded settings; defaults are used when None.
        max_steps: Close the window after this many updates; None keeps it open.

    Returns:
        Process exit code (0 on success).
    """
    settings = settings or Settings.load()
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(settings, max_steps=max_steps)

    import arcade

    from .render.window import RestaurantWindow

    try:
        session = build_session(settings)
    except RestaurantError as exc:
        logger.error("Cannot build the dining room: %s", exc)
        return 2
    window = RestaurantWindow(session, settings, max_steps=max_steps)
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
    finally:
        try:
            window.close()
        except Exception:
            logger.debug("Window already closed")


def run_headless(
    settings: Optional[Settings] = None,
    max_steps: Optional[int] = None,
    tick_rate: float = 0.0,
) -> int:
    """Seat the guests once in a console loop, printing the room as text.

    Args:
        settings: Loaded settings; defaults are used when None.
        max_steps: Stop after N updates; bounded even when None.
        tick_rate: Target updates per second; 0 runs as fast as possible.
    """
    settings = settings or Settings.load()
    if max_steps is None:
        max_steps = HEADLESS_STEP_CAP
    dt = 1.0 / tick_rate if tick_rate > 0 else SIMULATED_DT

    print(f"{settings.window.title} (headless)")
    try:
        session = build_session(settings)
    except RestaurantError as exc:
        logger.error("Cannot build the dining room: %s", exc)
        return 2

    def _on_event(event: GameEvent, s: SeatingSession) -> None:
        if event is GameEvent.PATH_FOUND:
            print(f"{s.button_text} {len(s.route) - 1} steps")
            for line in render_ascii(s.grid, route=s.route):
                print(line)

    session.add_listener(_on_event)
    engine = GameEngine(session, EngineConfig(tick_rate=tick_rate, max_steps=max_steps, fixed_dt=dt))
    try:
        session.start()
        engine.run()
    except RestaurantError as exc:
        logger.error("Seating run failed: %s", exc)
        return 2
    except KeyboardInterrupt:
        engine.stop()
        print("Interrupted by user")
        return 130
    except Exception:
        logger.exception("Unhandled exception in headless loop")
        return 1

    for line in render_ascii(session.grid, characters=session.positions):
        print(line)
    print(session.status_message or f"Stopped with status {session.status.name}")
    print(f"Loop complete (steps={engine.step})")
    return 0


def run_auto(settings: Optional[Settings] = None, max_steps: Optional[int] = None, tick_rate: float = 0.0) -> int:
    """Run GUI if available and not explicitly overridden, else headless.

    Honors PIXEL_RESTAURANT_HEADLESS=1 to force headless.
    """
    if os.getenv(HEADLESS_ENV) == "1":
        return run_headless(settings, max_steps=max_steps, tick_rate=tick_rate)
    return run_gui(settings, max_steps=max_steps)
