"""Loguru sink configuration.

Call ``setup_logger()`` once at program start; later calls are no-ops.
"""

from __future__ import annotations

import sys

from loguru import logger

_INITIALISED = False


def setup_logger(level: str = "INFO") -> None:
    """Replace loguru's default sink with a colorized stderr sink at *level*."""
    global _INITIALISED
    if _INITIALISED:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> {name}: {message}",
        colorize=True,
    )
    logger.debug("Logger initialised (level: {})", level)

    _INITIALISED = True
