from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..game.events import GameStatus
from ..game.session import SeatingSession

logger = logging.getLogger(__name__)

SETTLED = (GameStatus.FINISHED, GameStatus.NO_PATH)


@dataclass
class EngineConfig:
    """How the session is ticked.

    Attributes:
        tick_rate: Target updates per second for ``run()``; 0 means unthrottled.
        max_steps: Stop after this many updates.
        fixed_dt: Seconds fed to the session per update instead of wall-clock time.
        stop_when_settled: Stop once the guests are seated or no route exists.
            The window turns this off so "Play Again" keeps working.
    """

    tick_rate: float = 30.0
    max_steps: Optional[int] = None
    fixed_dt: Optional[float] = None
    stop_when_settled: bool = True


class GameEngine:
    """Feeds ``update(dt)`` to a SeatingSession and counts ticks.

    Used directly by the console runner and driven from ``on_update`` by the
    Arcade window.
    """

    def __init__(self, session: SeatingSession, config: Optional[EngineConfig] = None) -> None:
        self.session = session
        self.config = config or EngineConfig()
        self._running: bool = False
        self._step: int = 0
        self._last_time: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._step = 0
        self._last_time = time.perf_counter()
        logger.info("GameEngine started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.info("GameEngine stopped at step=%s with session %s", self._step, self.session.status.name)

    def update(self, dt: float) -> None:
        """Advance the session by ``dt`` seconds (or ``fixed_dt`` when set)."""
        if not self._running:
            logger.debug("update() called while not running; ignored")
            return
        if self.config.fixed_dt is not None:
            dt = self.config.fixed_dt
        self.session.update(dt)
        self._step += 1
        logger.debug("Tick #%d (dt=%.4f, status=%s)", self._step, dt, self.session.status.name)

        if self.config.stop_when_settled and self.session.status in SETTLED:
            self.stop()
        elif self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()

    def run(self) -> None:
        """Tick until stopped, sleeping between ticks to hold ``tick_rate``."""
        self.start()
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)

        while self._running:
            now = time.perf_counter()
            dt = 0.0 if self._last_time is None else now - self._last_time
            self._last_time = now

            self.update(dt)

            if target_dt > 0:
                remaining = target_dt - (time.perf_counter() - now)
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)
