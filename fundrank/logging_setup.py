"""
Logging setup
Routes loguru output to stderr at the configured level.
"""

import sys
from typing import Optional

from loguru import logger

from fundrank.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Replace the default loguru sink with one honouring LOG_LEVEL."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format="{time:HH:mm:ss} | {level:<7} | {extra} | {message}",
    )
