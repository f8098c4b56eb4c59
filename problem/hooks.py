"""
Process-wide termination reporting.

Without a hook, an uncaught Fatal ends the program with Python's usual
traceback. Installing one of the hooks below replaces sys.excepthook and
threading.excepthook so that an uncaught Fatal or Problem is reported as its
plain message instead. Any other exception keeps the default crash report.

Hooks are global state meant to be installed once near program start. The
last installed hook wins; installation is not synchronized, so do not install
from several threads at once.
"""

import sys
import threading
from typing import Callable

from problem.utils.exceptions import Fatal, Problem
from problem.utils.logger import get_logger

logger = get_logger(__name__)

Reporter = Callable[[str], None]


def _report_to_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _report_to_error_log(message: str) -> None:
    logger.error("%s", message)


def _install(report: Reporter) -> None:
    def _handle(exc_type, exc, tb) -> None:
        if isinstance(exc, (Fatal, Problem)):
            report(str(exc))
        else:
            sys.__excepthook__(exc_type, exc, tb)

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if isinstance(args.exc_value, (Fatal, Problem)):
            report(str(args.exc_value))
        else:
            threading.__excepthook__(args)

    sys.excepthook = _handle
    threading.excepthook = _thread_hook
    logger.debug("Installed termination hook reporting via %s", report.__name__)


def format_panic_to_stderr() -> None:
    """Report uncaught Fatal and Problem errors as their message on stderr."""
    _install(_report_to_stderr)


def format_panic_to_error_log() -> None:
    """Report uncaught Fatal and Problem errors with logger.error()."""
    _install(_report_to_error_log)
