"""Loguru sink setup for command-line use.

The library itself only emits records; applications decide where they go.
"""

import sys

from loguru import logger

from .config import LoggingConfig


def configure_logging(config: LoggingConfig) -> int:
    """Replace loguru's default sink with one on stderr.

    Args:
        config: Level and format for the sink.

    Returns:
        Handler id of the new sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=config.level, format=config.format)
