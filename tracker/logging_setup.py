"""Logging configuration for the ``tracker`` package.

``configure_logging`` attaches a single ``StreamHandler`` to the package
logger and is meant to be called once by an entry point such as the
Streamlit app. ``get_logger`` hands out child loggers; until logging is
configured the package logger carries a ``NullHandler`` so library use
stays quiet.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "tracker"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def parse_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return default


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package logger exactly once.

    When ``level`` is None the ``TRACKER_LOG_LEVEL`` setting is used.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if level is None:
        from tracker.config import log_level

        level = log_level()

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop handlers installed by ``configure_logging`` (used by tests)."""
    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.addHandler(logging.NullHandler())
    _CONFIGURED = False
