from .events import GameEvent, GameStatus
from .session import BUTTON_TEXT, STATUS_MESSAGE, SeatingSession

__all__ = ["BUTTON_TEXT", "GameEvent", "GameStatus", "STATUS_MESSAGE", "SeatingSession"]
