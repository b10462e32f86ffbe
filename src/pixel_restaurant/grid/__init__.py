from .grid import DEFAULT_CHAR_MAPPING, GridBuilder, RestaurantGrid
from .layout import create_restaurant_grid, start_position, target_position
from .position import DIRECTIONS, Position
from .tiles import BLOCKING_TILES, TileKind, is_walkable_tile

__all__ = [
    "BLOCKING_TILES",
    "DEFAULT_CHAR_MAPPING",
    "DIRECTIONS",
    "GridBuilder",
    "Position",
    "RestaurantGrid",
    "TileKind",
    "create_restaurant_grid",
    "is_walkable_tile",
    "start_position",
    "target_position",
]
