from __future__ import annotations

import logging
from typing import Callable, Optional, Set

from ..engine.session import SessionController
from .actions import Command, InputAction
from .mapping import InputMapper

logger = logging.getLogger(__name__)


class InputRouter:
    """Turns raw key/touch events into START or JUMP commands.

    A key that is held down produces a single command until it is released,
    so OS key repeat never turns into extra jumps. Touches have no release
    signal and count once per press.
    """

    def __init__(
        self,
        session: SessionController,
        mapper: Optional[InputMapper] = None,
        on_quit: Optional[Callable[[], None]] = None,
    ) -> None:
        self.session = session
        self.mapper = mapper or InputMapper.default()
        self.on_quit = on_quit
        self._held: Set[str] = set()

    def key_press(self, key: str) -> Optional[Command]:
        action = self.mapper.translate_key(key)
        if action is None:
            logger.debug("Unhandled key: %s", key)
            return None
        name = key.strip().upper()
        if name in self._held:
            return None
        self._held.add(name)
        if action is InputAction.QUIT:
            self.session.abandon()
            if self.on_quit is not None:
                self.on_quit()
            return None
        return self._dispatch()

    def key_release(self, key: str) -> None:
        self._held.discard(key.strip().upper())

    def touch(self) -> Optional[Command]:
        return self._dispatch()

    def _dispatch(self) -> Command:
        if self.session.running:
            self.session.jump()
            return Command.JUMP
        self.session.start()
        return Command.START
