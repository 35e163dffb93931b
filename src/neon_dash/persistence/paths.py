from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import PlatformDirs

logger = logging.getLogger(__name__)

APP_NAME = "Neon Dash"

# Environment variable override (useful for tests and portable installs)
ENV_DATA_DIR = "NEON_DASH_DATA_DIR"

HIGH_SCORE_FILENAME = "highscore.json"


def data_dir(create: bool = True) -> Path:
    """Return the directory holding persistent game data.

    Uses the platform user data dir unless NEON_DASH_DATA_DIR is set.
    """
    override = os.getenv(ENV_DATA_DIR)
    if override:
        root = Path(override).expanduser().resolve()
    else:
        root = Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_data_dir)
    if create:
        root.mkdir(parents=True, exist_ok=True)
    return root


def high_score_path(create: bool = True) -> Path:
    path = data_dir(create=create) / HIGH_SCORE_FILENAME
    logger.debug("High score file: %s", path)
    return path
