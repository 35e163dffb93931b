from __future__ import annotations

from enum import Enum, auto


class InputAction(Enum):
    """Logical input actions produced by physical keys or touches.

    ACTION covers Space / Arrow Up / a tap; whether it starts a round or jumps
    depends on the session state. QUIT closes the window.
    """

    ACTION = auto()
    QUIT = auto()


class Command(Enum):
    """The two verbs the session controller understands."""

    START = auto()
    JUMP = auto()


__all__ = ["Command", "InputAction"]
