from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..errors import InvalidInputError
from .position import DIRECTIONS, Position
from .tiles import TileKind, is_walkable_tile

logger = logging.getLogger(__name__)

DEFAULT_CHAR_MAPPING: Dict[str, TileKind] = {
    ".": TileKind.FLOOR,
    "T": TileKind.TABLE,
    "#": TileKind.OBSTACLE,
    "D": TileKind.DOOR,
    "X": TileKind.TARGET_TABLE,
}


class RestaurantGrid:
    """An immutable, bounds-checked 2D tile grid.

    Tiles are indexed ``tiles[row][col]``. All rows are stored as tuples so a
    grid handed to a search cannot be modified underneath it. Use
    :class:`GridBuilder` while authoring a layout and freeze it with
    :meth:`GridBuilder.build`.
    """

    __slots__ = ("_rows", "_cols", "_tiles")

    def __init__(self, tiles: Sequence[Sequence[TileKind]]) -> None:
        if len(tiles) == 0:
            raise InvalidInputError("RestaurantGrid needs at least one row")
        cols = len(tiles[0])
        if cols == 0:
            raise InvalidInputError("RestaurantGrid needs at least one column")
        for i, row in enumerate(tiles):
            if len(row) != cols:
                raise InvalidInputError(
                    f"All rows must have equal width; row 0 has {cols}, row {i} has {len(row)}"
                )
        self._rows = len(tiles)
        self._cols = cols
        self._tiles: Tuple[Tuple[TileKind, ...], ...] = tuple(tuple(row) for row in tiles)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position lies inside the grid. Never raises."""
        return 0 <= pos.row < self._rows and 0 <= pos.col < self._cols

    def tile(self, pos: Position) -> TileKind:
        """Return the tile at ``pos``.

        Raises InvalidInputError if out of bounds; negative indices are never
        wrapped around.
        """
        if not self.in_bounds(pos):
            raise InvalidInputError(f"Position {pos} out of bounds for grid {self._rows}x{self._cols}")
        return self._tiles[pos.row][pos.col]

    def is_walkable(self, pos: Position) -> bool:
        """Return True if ``pos`` is in-bounds and not a blocking tile."""
        if not self.in_bounds(pos):
            return False
        return is_walkable_tile(self._tiles[pos.row][pos.col])

    def neighbors4(self, pos: Position) -> Iterator[Position]:
        """Yield in-bounds neighbours in the order up, down, left, right."""
        for d_row, d_col in DIRECTIONS:
            nxt = pos.offset(d_row, d_col)
            if self.in_bounds(nxt):
                yield nxt

    def positions(self) -> Iterator[Tuple[Position, TileKind]]:
        for r, row in enumerate(self._tiles):
            for c, tile in enumerate(row):
                yield Position(r, c), tile

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, TileKind]] = None) -> "RestaurantGrid":
        """Create a grid from an ASCII representation.

        Args:
            lines: Each string is a row. All rows must have the same length.
            mapping: Optional mapping of characters to TileKind members.
                     Defaults: '.' floor, 'T' table, '#' obstacle, 'D' door,
                     'X' target table.
        """
        mapping = mapping or DEFAULT_CHAR_MAPPING
        tiles: List[List[TileKind]] = []
        for r, line in enumerate(lines):
            row: List[TileKind] = []
            for c, ch in enumerate(line):
                if ch not in mapping:
                    raise InvalidInputError(f"Unknown tile character {ch!r} at ({r}, {c})")
                row.append(mapping[ch])
            tiles.append(row)
        return cls(tiles)

    def to_lines(self, reverse_mapping: Optional[Dict[TileKind, str]] = None) -> List[str]:
        """Convert the grid to an ASCII representation (for debugging/testing)."""
        if reverse_mapping is None:
            reverse_mapping = {tile: ch for ch, tile in DEFAULT_CHAR_MAPPING.items()}
        return ["".join(reverse_mapping.get(tile, "?") for tile in row) for row in self._tiles]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RestaurantGrid):
            return NotImplemented
        return self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash(self._tiles)

    def __repr__(self) -> str:
        return f"RestaurantGrid(rows={self._rows}, cols={self._cols})"


class GridBuilder:
    """Mutable scratch grid used while placing furniture."""

    def __init__(self, rows: int, cols: int, default_tile: TileKind = TileKind.FLOOR) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidInputError("Grid dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self._tiles: List[List[TileKind]] = [[default_tile for _ in range(cols)] for _ in range(rows)]

    def set(self, row: int, col: int, tile: TileKind) -> None:
        if not isinstance(tile, TileKind):
            raise TypeError("tile must be a TileKind enum member")
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise InvalidInputError(f"Coordinates out of bounds: ({row}, {col}) for grid {self.rows}x{self.cols}")
        self._tiles[row][col] = tile

    def fill_block(self, row: int, col: int, height: int, width: int, tile: TileKind) -> None:
        for r in range(row, row + height):
            for c in range(col, col + width):
                self.set(r, c, tile)

    def border(self, tile: TileKind) -> None:
        for c in range(self.cols):
            self.set(0, c, tile)
            self.set(self.rows - 1, c, tile)
        for r in range(self.rows):
            self.set(r, 0, tile)
            self.set(r, self.cols - 1, tile)

    def build(self) -> RestaurantGrid:
        grid = RestaurantGrid(self._tiles)
        logger.debug("Built %r", grid)
        return grid
