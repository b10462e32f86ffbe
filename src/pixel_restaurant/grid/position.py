from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Position:
    """A (row, col) grid coordinate; row grows downwards, col to the right."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)

    def manhattan(self, other: "Position") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def is_adjacent(self, other: "Position") -> bool:
        return self.manhattan(other) == 1

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


# Expansion order: up, down, left, right. Only matters for which of several
# equally short routes is returned.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
