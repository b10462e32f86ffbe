from __future__ import annotations

from typing import Dict, Tuple

from ..grid.tiles import TileKind

RGB = Tuple[int, int, int]

BACKGROUND: RGB = (17, 24, 39)
GRID_FRAME: RGB = (75, 85, 99)
CELL_BORDER: RGB = (40, 40, 40)

TILE_COLORS: Dict[TileKind, RGB] = {
    TileKind.FLOOR: (107, 114, 128),
    TileKind.TABLE: (133, 77, 14),
    TileKind.OBSTACLE: (153, 27, 27),
    TileKind.DOOR: (21, 128, 61),
    TileKind.TARGET_TABLE: (126, 34, 206),
}

# Tables get a thicker, darker outline.
TILE_OUTLINES: Dict[TileKind, RGB] = {
    TileKind.TABLE: (113, 63, 18),
    TileKind.TARGET_TABLE: (88, 28, 135),
}

PATH_HIGHLIGHT: RGB = (96, 165, 250)

WAITER_COLOR: RGB = (59, 130, 246)
GUEST_COLOR: RGB = (250, 204, 21)
CHARACTER_OUTLINE: RGB = (0, 0, 0)

TITLE_COLOR: RGB = (253, 224, 71)
SUBTITLE_COLOR: RGB = (156, 163, 175)
BUTTON_COLOR: RGB = (22, 163, 74)
BUTTON_DISABLED_COLOR: RGB = (107, 114, 128)
SUCCESS_COLOR: RGB = (250, 204, 21)
FAILURE_COLOR: RGB = (239, 68, 68)


def tile_color(tile: TileKind, on_path: bool = False) -> RGB:
    if on_path:
        return PATH_HIGHLIGHT
    return TILE_COLORS[tile]
