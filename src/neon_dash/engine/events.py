from enum import Enum, auto


class SessionEvent(Enum):
    """Events emitted by SessionController to notify UI or other systems."""

    STARTED = auto()
    TICKED = auto()
    ENDED = auto()
    HIGH_SCORE = auto()
    ABANDONED = auto()
