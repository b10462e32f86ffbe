class RestaurantError(Exception):
    """Base error for Pixel Restaurant domain exceptions."""


class InvalidInputError(RestaurantError, ValueError):
    """Raised for empty grids, out-of-bounds coordinates or unusable routes."""


class SettingsError(RestaurantError):
    """Raised when a settings file cannot be read or contains unknown keys."""
