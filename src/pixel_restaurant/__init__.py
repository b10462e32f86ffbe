"""
Pixel Restaurant package root.

A waiter leads two guests across a tile-grid dining room to their table.
The route comes from a breadth-first search in :mod:`pixel_restaurant.pathfinding`;
everything Arcade-specific stays in :mod:`pixel_restaurant.render.window`.
"""
from .errors import InvalidInputError, RestaurantError, SettingsError
from .grid import Position, RestaurantGrid, TileKind
from .pathfinding import Route, find_path, is_valid_route

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "Position",
    "RestaurantError",
    "RestaurantGrid",
    "Route",
    "SettingsError",
    "TileKind",
    "__version__",
    "find_path",
    "is_valid_route",
]
