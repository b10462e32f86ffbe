from enum import Enum, auto


class GameStatus(Enum):
    IDLE = auto()
    SHOWING_PATH = auto()
    MOVING = auto()
    FINISHED = auto()
    NO_PATH = auto()


class GameEvent(Enum):
    """Events emitted by SeatingSession to notify UI or systems."""

    PATH_FOUND = auto()
    NO_PATH = auto()
    STARTED_MOVING = auto()
    STEP = auto()
    FINISHED = auto()
