"""
Environment-driven settings.

Values are read on every call so that toggles set after import still apply.
"""

import logging
import os

BACKTRACE_ENV = "PROBLEM_BACKTRACE"
LOG_LEVEL_ENV = "PROBLEM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

_FALSY = {"", "0", "false", "no", "off"}


def get_backtrace_enabled() -> bool:
    """
    Check whether causes should capture a backtrace.

    Returns:
        bool: True if PROBLEM_BACKTRACE is set to anything but a falsy value
        ("", "0", "false", "no", "off"). An unset variable disables capture.
    """
    value = os.environ.get(BACKTRACE_ENV)
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


def normalize_log_level(name: str | None) -> str:
    """
    Upper-case a level name, falling back to "INFO" for unknown names.

    Args:
        name: Level name such as "debug". None or "" gives the default.

    Returns:
        str: A level name accepted by logging.
    """
    level = (name or "").strip().upper()
    # getLevelName maps known names to their numeric level
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def get_log_level() -> str:
    """
    Get the log level name used by setup_logging().

    Returns:
        str: Upper-cased level name from PROBLEM_LOG_LEVEL. Unset or unknown
        names give "INFO".
    """
    return normalize_log_level(os.environ.get(LOG_LEVEL_ENV))
