"""
Logging Setup
Routes loguru output to stderr so stdout only carries the result banner
"""

import sys
from loguru import logger


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(verbose: bool = False):
    """Replace default loguru sinks with a single stderr sink"""
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if verbose else "INFO"
    )
