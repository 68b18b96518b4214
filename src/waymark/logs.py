"""Logging setup for Waymark.

The terminal UI owns stdout and stderr, so log records go to a file when one
is configured and are discarded otherwise.
"""

import logging

from .config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(name: str) -> int:
    """Map a level name to a logging level, defaulting to WARNING."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def setup_logging(config: Config) -> None:
    """Configure the ``waymark`` logger from the application config."""
    logger = logging.getLogger("waymark")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(resolve_level(config.logging.level))
    logger.propagate = False

    log_path = config.get_log_path()
    if log_path is None:
        logger.addHandler(logging.NullHandler())
        return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
