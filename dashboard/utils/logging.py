from __future__ import annotations

import logging
from typing import Optional, Union

from dashboard.core.config import get_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = get_config().log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return a logger with a consistent formatter.

    The level defaults to ``DASHBOARD_LOG_LEVEL`` from the application config.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False
    return logger


def set_level(level: Optional[Union[int, str]] = None) -> None:
    """Apply ``level`` (default: the configured level) to every dashboard logger."""
    resolved = _resolve_level(level)
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and (name == "dashboard" or name.startswith("dashboard.")):
            logger.setLevel(resolved)
