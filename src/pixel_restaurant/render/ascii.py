from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from ..grid.grid import RestaurantGrid
from ..grid.position import Position

ROUTE_CHAR = "*"
WAITER_CHAR = "W"
GUEST_CHAR = "g"


def render_ascii(
    grid: RestaurantGrid,
    route: Optional[Iterable[Position]] = None,
    characters: Optional[Sequence[Position]] = None,
) -> List[str]:
    """Render the grid as text rows.

    Route cells are drawn as ``*``. ``characters`` lists the waiter first and
    then the guests; the waiter is drawn on top when they share a tile.
    """
    overlay: Dict[Position, str] = {}
    for pos in route or ():
        overlay[pos] = ROUTE_CHAR
    chars = list(characters or ())
    for pos in chars[1:]:
        overlay[pos] = GUEST_CHAR
    if chars:
        overlay[chars[0]] = WAITER_CHAR

    rows = [list(line) for line in grid.to_lines()]
    for pos, ch in overlay.items():
        if grid.in_bounds(pos):
            rows[pos.row][pos.col] = ch
    return ["".join(row) for row in rows]
