import logging
import os

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(verbosity: int = 0) -> None:
    """Configure the root logger from a CLI verbosity count.

    0 -> WARNING, 1 -> INFO, 2+ -> DEBUG. Respects NEON_DASH_LOG_LEVEL if present.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    level_name = os.getenv("NEON_DASH_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
