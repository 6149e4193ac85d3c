"""
Logging setup for the tagwm command line.

Library code only calls `loguru.logger`; sinks are configured by whoever runs
the window manager.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "INFO"):
    """Replace loguru's default sink with a compact stderr sink."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    return logger
