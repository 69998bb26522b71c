"""Logging setup for dirqd."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "DEBUG", sink=sys.stderr) -> int:
    """
    Replace loguru's default handler with the daemon's single sink.

    Args:
        level: Minimum level name (e.g. "INFO")
        sink: Destination; stderr keeps stdout free for the invoked commands

    Returns:
        Handler id of the added sink
    """
    logger.remove()
    return logger.add(sink, format=LOG_FORMAT, level=level)
