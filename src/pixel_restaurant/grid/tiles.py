from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class TileKind(Enum):
    """Classification of a grid cell.

    Controls both walkability and how the cell is drawn.
    """

    FLOOR = 0
    TABLE = 1
    OBSTACLE = 2
    DOOR = 3
    TARGET_TABLE = 4


# Everything outside this set can be walked on, the target table included.
BLOCKING_TILES: FrozenSet[TileKind] = frozenset({TileKind.TABLE, TileKind.OBSTACLE})


def is_walkable_tile(tile: TileKind) -> bool:
    """Return True if the provided tile kind can be traversed.

    Args:
        tile: A TileKind enum member.

    Returns:
        bool: Whether characters may step onto the tile.
    """

    return tile not in BLOCKING_TILES
