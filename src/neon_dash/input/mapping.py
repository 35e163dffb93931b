from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .actions import InputAction

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from physical key names to logical actions.

    Keys are strings normalized to uppercase, so any backend (Arcade, a test
    harness) only needs to hand over a key name.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate_key("space")   # -> InputAction.ACTION
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    @staticmethod
    def _normalize(key: str | int) -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str | int, action: InputAction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str | int], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def translate_key(self, key: str | int) -> Optional[InputAction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        return self._bindings.get(nk)

    @classmethod
    def default(cls) -> "InputMapper":
        """Space and Arrow Up act; Escape quits."""
        mapper = cls()
        mapper.bind_many(["SPACE", "UP"], InputAction.ACTION)
        mapper.bind_many(["ESCAPE", "ESC"], InputAction.QUIT)
        return mapper


__all__ = ["InputMapper"]
