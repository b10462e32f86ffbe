"""Drawing helpers. The arcade window lives in :mod:`pixel_restaurant.render.window`
and is imported lazily so the headless runner works without a display."""
from .ascii import render_ascii

__all__ = ["render_ascii"]
