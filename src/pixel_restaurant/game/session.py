from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..animation.procession import Procession
from ..config.settings import TimingSettings
from ..grid.grid import RestaurantGrid
from ..grid.position import Position
from ..pathfinding import Route, find_path
from .events import GameEvent, GameStatus

logger = logging.getLogger(__name__)

BUTTON_TEXT: Dict[GameStatus, str] = {
    GameStatus.IDLE: "Seat Guests",
    GameStatus.SHOWING_PATH: "Path Found!",
    GameStatus.MOVING: "On Our Way...",
    GameStatus.FINISHED: "Play Again",
    GameStatus.NO_PATH: "No Path! Try Again",
}

STATUS_MESSAGE: Dict[GameStatus, str] = {
    GameStatus.FINISHED: "Guests have been seated!",
    GameStatus.NO_PATH: "Could not find a path to the table!",
}

Listener = Callable[[GameEvent, "SeatingSession"], None]


class SeatingSession:
    """Holds one seating run: the route, its status and everyone's position.

    ``start()`` computes the route. ``update(dt)`` then shows the route for a
    moment and walks the waiter and guests along it. A procession is only
    created when a route exists.
    """

    def __init__(
        self,
        grid: RestaurantGrid,
        start: Position,
        end: Position,
        timing: Optional[TimingSettings] = None,
    ) -> None:
        self.grid = grid
        self.start_pos = start
        self.end_pos = end
        self.timing = timing or TimingSettings()
        self._listeners: List[Listener] = []
        self._status = GameStatus.IDLE
        self._route: Route = []
        self._procession: Optional[Procession] = None
        self._elapsed = 0.0
        self._positions: List[Position] = [start for _ in self.timing.follower_lags]

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to session events."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception as ex:  # listeners shouldn't break the session
                logger.exception("Listener errored on %s: %s", event, ex)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def route(self) -> Route:
        return list(self._route)

    @property
    def positions(self) -> List[Position]:
        """Waiter first, then guests in lag order."""
        return list(self._positions)

    @property
    def busy(self) -> bool:
        return self._status in (GameStatus.SHOWING_PATH, GameStatus.MOVING)

    @property
    def button_enabled(self) -> bool:
        return not self.busy

    @property
    def button_text(self) -> str:
        return BUTTON_TEXT[self._status]

    @property
    def status_message(self) -> Optional[str]:
        return STATUS_MESSAGE.get(self._status)

    def is_path_cell(self, pos: Position) -> bool:
        return self._status is GameStatus.SHOWING_PATH and pos in self._route

    def _reset_positions(self) -> None:
        self._positions = [self.start_pos for _ in self.timing.follower_lags]

    def start(self) -> bool:
        """Press the button. Returns False when ignored because a run is in progress."""
        if self.busy:
            logger.debug("start() ignored while %s", self._status.name)
            return False
        self._reset_positions()
        self._route = []
        self._procession = None
        self._elapsed = 0.0

        route = find_path(self.grid, self.start_pos, self.end_pos)
        if route is None:
            self._status = GameStatus.NO_PATH
            logger.info("No route from %s to %s", self.start_pos, self.end_pos)
            self._emit(GameEvent.NO_PATH)
            return True

        self._route = route
        self._status = GameStatus.SHOWING_PATH
        logger.info("Route found: %d steps from %s to %s", len(route) - 1, self.start_pos, self.end_pos)
        self._emit(GameEvent.PATH_FOUND)
        return True

    def update(self, dt: float) -> None:
        if self._status is GameStatus.SHOWING_PATH:
            self._elapsed += dt
            if self._elapsed >= self.timing.show_path_seconds:
                self._begin_moving()
        elif self._status is GameStatus.MOVING:
            self._elapsed += dt
            interval = self.timing.step_interval_seconds
            while self._status is GameStatus.MOVING and self._elapsed >= interval:
                self._elapsed -= interval
                self._tick()

    def _begin_moving(self) -> None:
        self._elapsed = 0.0
        self._procession = Procession(self._route, self.timing.follower_lags)
        self._status = GameStatus.MOVING
        logger.info("Procession started")
        self._emit(GameEvent.STARTED_MOVING)

    def _tick(self) -> None:
        assert self._procession is not None
        if self._procession.advance():
            self._positions = self._procession.positions
            self._emit(GameEvent.STEP)
        if self._procession.finished:
            self._status = GameStatus.FINISHED
            self._elapsed = 0.0
            logger.info("Guests seated at %s", self.end_pos)
            self._emit(GameEvent.FINISHED)
