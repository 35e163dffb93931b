from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from ..errors import PersistenceError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class HighScoreStore(Protocol):
    """Key-value style persistence for the best score (in ticks)."""

    def load_high_score(self) -> Optional[int]: ...

    def save_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Process-local store; also records every write for inspection."""

    def __init__(self, initial: Optional[int] = None) -> None:
        self._value = initial
        self.writes: list[int] = []

    def load_high_score(self) -> Optional[int]:
        return self._value

    def save_high_score(self, score: int) -> None:
        self._value = int(score)
        self.writes.append(int(score))


class JsonHighScoreStore:
    """Filesystem-backed store writing a small JSON document atomically.

    A missing, unreadable or malformed file reads as "no high score". Write
    failures raise PersistenceError.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load_high_score(self) -> Optional[int]:
        if not self.path.exists():
            logger.info("No high score file at %s", self.path)
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:  # includes UnicodeDecodeError
            logger.warning("Failed to read high score (%s); treating as absent", exc)
            return None

        value = payload.get("high_score") if isinstance(payload, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Invalid high score entry %r in %s; treating as absent", value, self.path)
            return None
        return value

    def save_high_score(self, score: int) -> None:
        """Write the score atomically via a temporary file and os.replace."""
        payload = json.dumps({"version": SCHEMA_VERSION, "high_score": int(score)}, indent=2)
        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise PersistenceError(f"Could not write high score to {self.path}: {exc}") from exc
        logger.info("High score %d saved to %s", score, self.path)
