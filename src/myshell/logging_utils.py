"""Diagnostic logging setup."""

import sys

from loguru import logger

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str = "WARNING") -> None:
    """Route loguru output to stderr at the given level, once per level."""
    global _CONFIGURED_LEVEL
    level = level.upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = level
