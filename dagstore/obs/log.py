"""Logging setup for the ``dagstore`` logger hierarchy."""
from __future__ import annotations

import logging
from typing import Optional, Union

from dagstore.config import get_env

LOG_LEVEL_ENV = "DAGSTORE_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "dagstore-stream"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the ``dagstore`` logger and set its level.

    ``level`` falls back to ``DAGSTORE_LOG_LEVEL`` and then to ``WARNING``.
    Calling this repeatedly only adjusts the level.
    """

    if level is None:
        level = get_env(LOG_LEVEL_ENV, DEFAULT_LEVEL) or DEFAULT_LEVEL
    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("dagstore")
    logger.setLevel(level)
    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging"]
