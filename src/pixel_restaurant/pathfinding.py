from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from .errors import InvalidInputError
from .grid.grid import RestaurantGrid
from .grid.position import Position

logger = logging.getLogger(__name__)

Route = List[Position]


def _validate(grid: RestaurantGrid, start: Position, end: Position) -> None:
    if grid.rows <= 0 or grid.cols <= 0:
        raise InvalidInputError("Cannot search an empty grid")
    for name, pos in (("start", start), ("end", end)):
        if not grid.in_bounds(pos):
            raise InvalidInputError(
                f"{name} {pos} out of bounds for grid {grid.rows}x{grid.cols}"
            )


def find_path(grid: RestaurantGrid, start: Position, end: Position) -> Optional[Route]:
    """Breadth-first search for the shortest walkable route on a grid.

    Uses 4-directional movement. Neighbours are expanded up, down, left, right,
    so equally short routes are always resolved the same way. The start tile is
    seeded directly and its own walkability is never checked.

    Returns:
        The route from ``start`` to ``end`` inclusive, or None when blocking
        tiles disconnect the two.

    Raises:
        InvalidInputError: if the grid is empty or either endpoint is out of
            bounds. Checked before any tile is read.
    """
    _validate(grid, start, end)

    frontier: Deque[Position] = deque([start])
    parents: Dict[Position, Optional[Position]] = {start: None}
    while frontier:
        current = frontier.popleft()
        if current == end:
            route = _backtrack(parents, end)
            logger.debug("Route %s -> %s found with %d steps", start, end, len(route) - 1)
            return route
        for nxt in grid.neighbors4(current):
            if nxt not in parents and grid.is_walkable(nxt):
                parents[nxt] = current
                frontier.append(nxt)

    logger.debug("No route %s -> %s (%d cells explored)", start, end, len(parents))
    return None


def _backtrack(parents: Dict[Position, Optional[Position]], end: Position) -> Route:
    route: Route = []
    node: Optional[Position] = end
    while node is not None:
        route.append(node)
        node = parents[node]
    route.reverse()
    return route


def is_valid_route(route: Sequence[Position]) -> bool:
    """True if the route is non-empty, 4-connected and never revisits a cell."""
    if not route:
        return False
    if len(set(route)) != len(route):
        return False
    return all(a.is_adjacent(b) for a, b in zip(route, route[1:]))
