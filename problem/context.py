"""
Attaching "what was being attempted" context to failures.

Every helper converts the failure with to_problem() and wraps it in one more
context layer, so repeated use builds a chain rendered outermost first:

    while loading config, while reading file got problem caused by: ...
"""

from contextlib import ContextDecorator
from typing import Any, Callable, TypeVar

from problem.convert import to_problem
from problem.utils.exceptions import Problem

T = TypeVar("T")


class problem_while(ContextDecorator):
    """
    Wrap failures of a block or decorated function in a context layer.

    Args:
        message: Description of the operation; rendered with str() only when
            a failure is wrapped.

    Raises:
        Problem: When the wrapped code raises an Exception.
    """
    def __init__(self, message: Any) -> None:
        self._message = message

    def _context_message(self) -> Any:
        return self._message

    def __enter__(self) -> "problem_while":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        raise to_problem(exc).while_context(self._context_message()) from None


class problem_while_with(problem_while):
    """
    Like problem_while, but the message is produced by calling message_fn.

    message_fn is only called when a failure is wrapped, so building an
    expensive message costs nothing on success.

    Args:
        message_fn: Zero-argument callable returning the context message.
    """
    def __init__(self, message_fn: Callable[[], Any]) -> None:
        super().__init__(None)
        self._message_fn = message_fn

    def _context_message(self) -> Any:
        return self._message_fn()


def in_context_of(message: Any, body: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Call body and add one context layer to whatever it raises.

    Args:
        message: Context message.
        body: Callable running a group of fallible operations.
        *args: Positional arguments for body.
        **kwargs: Keyword arguments for body.

    Returns:
        The return value of body, unchanged.

    Raises:
        Problem: If body raises an Exception.
    """
    with problem_while(message):
        return body(*args, **kwargs)


def in_context_of_with(
    message_fn: Callable[[], Any],
    body: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T:
    """Same as in_context_of, with the message built lazily by message_fn."""
    with problem_while_with(message_fn):
        return body(*args, **kwargs)


def wrap(problem: Any, message: Any) -> Problem:
    """Convert problem with to_problem() and add a context layer to it."""
    return to_problem(problem).while_context(message)
