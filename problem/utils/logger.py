"""
Logging helpers.

Modules obtain their logger with get_logger(__name__); applications call
setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional

from problem.utils.config import get_log_level, normalize_log_level

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """
    Attach a stderr handler to the root logger.

    Calling it again only updates the level.

    Args:
        level: Level name such as "DEBUG". Defaults to PROBLEM_LOG_LEVEL. Unknown
            names fall back to "INFO".
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(normalize_log_level(level) if level else get_log_level())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        logging.Logger: The named logger.
    """
    return logging.getLogger(name)
