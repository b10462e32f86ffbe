from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..errors import InvalidInputError
from ..grid.position import Position

logger = logging.getLogger(__name__)

DEFAULT_LAGS: Tuple[int, ...] = (0, 1, 2)


class Procession:
    """The waiter and guests walking one shared route.

    Each member replays the route ``lag`` steps behind the leader. Until a
    member's turn comes it waits on the first tile; once it reaches the last
    tile it stays there. Followers do not avoid each other.
    """

    def __init__(self, route: Sequence[Position], lags: Sequence[int] = DEFAULT_LAGS) -> None:
        if not route:
            raise InvalidInputError("Procession needs a non-empty route; skip it when no route was found")
        if not lags:
            raise InvalidInputError("Procession needs at least one member")
        if any(lag < 0 for lag in lags):
            raise InvalidInputError(f"Lags must be non-negative, got {list(lags)}")
        self._route: Tuple[Position, ...] = tuple(route)
        self._lags: Tuple[int, ...] = tuple(lags)
        self._step = 0

    @property
    def step(self) -> int:
        return self._step

    @property
    def route(self) -> Tuple[Position, ...]:
        return self._route

    @property
    def total_steps(self) -> int:
        """Steps until the last follower stands on the final tile."""
        return len(self._route) - 1 + max(self._lags)

    @property
    def finished(self) -> bool:
        return self._step >= self.total_steps

    def position_of(self, index: int) -> Position:
        idx = self._step - self._lags[index]
        idx = max(0, min(idx, len(self._route) - 1))
        return self._route[idx]

    @property
    def positions(self) -> List[Position]:
        return [self.position_of(i) for i in range(len(self._lags))]

    def advance(self) -> bool:
        """Move everyone one step along. Returns False once already finished."""
        if self.finished:
            return False
        self._step += 1
        logger.debug("Procession step %d/%d: %s", self._step, self.total_steps, self.positions)
        return True


def approach(current: Tuple[float, float], target: Tuple[float, float], max_delta: float) -> Tuple[float, float]:
    """Move ``current`` toward ``target`` by at most ``max_delta`` on each axis."""

    def _axis(cur: float, tgt: float) -> float:
        diff = tgt - cur
        if abs(diff) <= max_delta:
            return tgt
        return cur + max_delta if diff > 0 else cur - max_delta

    return _axis(current[0], target[0]), _axis(current[1], target[1])
