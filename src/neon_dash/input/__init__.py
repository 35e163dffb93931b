from .actions import Command, InputAction
from .mapping import InputMapper
from .router import InputRouter

__all__ = ["Command", "InputAction", "InputMapper", "InputRouter"]
