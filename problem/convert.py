"""
Conversion of error-like values into Problem.

Anything with a str() rendering converts: exceptions, messages, arbitrary
objects. The rendering happens at conversion time and the source value is not
kept, so nothing about its type can be observed afterwards.
"""

from contextlib import ContextDecorator
from typing import Any, Optional, TypeVar

from problem.utils.exceptions import Problem

T = TypeVar("T")

UNKNOWN_ERROR = "<unknown error>"


def to_problem(value: Any) -> Problem:
    """
    Convert an error-like value to a Problem.

    Args:
        value: A Problem (returned as is), None (no error information), or any
            object rendered with str().

    Returns:
        Problem: The converted problem. Conversion never fails.
    """
    if isinstance(value, Problem):
        return value
    if value is None:
        return Problem.cause(UNKNOWN_ERROR)
    return Problem.cause(value)


def ok_or_problem(value: Optional[T], message: Any) -> T:
    """
    Return value, or raise a cause Problem with message if it is None.

    Raises:
        Problem: If value is None.
    """
    if value is None:
        raise Problem.cause(message)
    return value


class map_problem(ContextDecorator):
    """
    Re-raise any exception from the block or decorated function as a Problem.

    No context layer is added. Exceptions that are not Exception subclasses
    (Fatal, KeyboardInterrupt, SystemExit) propagate untouched.

    Example:
        with map_problem():
            data = path.read_bytes()
    """
    def __enter__(self) -> "map_problem":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        if isinstance(exc, Problem):
            return False
        raise to_problem(exc) from None
