"""Logging initialization using loguru."""

import sys

from loguru import logger


def init_logging(level: str = "INFO") -> None:
    """Route all log output to a single stderr sink at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function} - {message}",
        backtrace=False,
        diagnose=False,
    )
