from __future__ import annotations

import logging
from typing import Tuple

from ..errors import InvalidInputError
from .grid import GridBuilder, RestaurantGrid
from .position import Position
from .tiles import TileKind

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 15
MIN_SIZE = 15

# Top-left corners of the 2x2 dining tables. The ninth slot of the 3x3
# arrangement is left free for the target table.
TABLE_CORNERS: Tuple[Tuple[int, int], ...] = (
    (2, 2), (2, 6), (2, 10),
    (6, 2), (6, 6), (6, 10),
    (10, 2), (10, 6),
)

# Other servers and spills.
OBSTACLE_CELLS: Tuple[Tuple[int, int], ...] = ((5, 5), (5, 6), (9, 8), (4, 12))

DOOR_CELL: Tuple[int, int] = (1, 0)


def create_restaurant_grid(size: int = DEFAULT_SIZE) -> RestaurantGrid:
    """Build the default dining room: walls, door, tables, spills and the target table."""
    if size < MIN_SIZE:
        raise InvalidInputError(f"Restaurant size must be at least {MIN_SIZE}, got {size}")

    builder = GridBuilder(size, size, default_tile=TileKind.FLOOR)
    builder.border(TileKind.OBSTACLE)
    builder.set(*DOOR_CELL, TileKind.DOOR)
    builder.fill_block(size - 3, size - 3, 2, 2, TileKind.TARGET_TABLE)
    for row, col in TABLE_CORNERS:
        builder.fill_block(row, col, 2, 2, TileKind.TABLE)
    for row, col in OBSTACLE_CELLS:
        builder.set(row, col, TileKind.OBSTACLE)

    grid = builder.build()
    logger.info("Created restaurant grid %dx%d", grid.rows, grid.cols)
    return grid


def start_position(size: int = DEFAULT_SIZE) -> Position:
    """Where the waiter greets the guests, just inside the door."""
    return Position(1, 1)


def target_position(size: int = DEFAULT_SIZE) -> Position:
    """The floor tile beside the target table."""
    return Position(size - 3, size - 4)
