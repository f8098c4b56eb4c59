"""
Turning failures into program termination.

For errors that are not bugs but still have to stop the program, such as a
missing config file in a command-line tool. Each helper raises Fatal with a
"Failed to ..." message; install a hook from problem.hooks to have that
message printed or logged instead of a traceback.
"""

from contextlib import ContextDecorator
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from problem.convert import to_problem
from problem.utils.exceptions import Fatal

T = TypeVar("T")


def abort(message: Any) -> None:
    """
    Terminate with message.

    Raises:
        Fatal: Always.
    """
    raise Fatal(str(message))


class failed_to(ContextDecorator):
    """
    Terminate if the block or decorated function raises an Exception.

    The failure is converted with to_problem() and reported as
    "Failed to {message} due to: {problem}".

    Args:
        message: What the program failed to do.

    Raises:
        Fatal: When the wrapped code raises an Exception.

    Example:
        with failed_to("load configuration"):
            config = load_config(path)
    """
    def __init__(self, message: Any) -> None:
        self._message = message

    def __enter__(self) -> "failed_to":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        raise Fatal(f"Failed to {self._message} due to: {to_problem(exc)}") from None


def or_failed_to(message: Any, body: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Call body and return its value, terminating if it raises.

    Raises:
        Fatal: If body raises an Exception.
    """
    with failed_to(message):
        return body(*args, **kwargs)


def expect_or_failed_to(value: Optional[T], message: Any) -> T:
    """
    Return value, terminating with "Failed to {message}" if it is None.

    Raises:
        Fatal: If value is None.
    """
    if value is None:
        abort(f"Failed to {message}")
    return value


class ProblemIter(Iterator[T]):
    """
    One-shot iterator over the values of a source that may fail mid-stream.

    The first Exception raised while pulling from the source terminates with
    "Failed to {message} due to: {problem}". Once the source is exhausted or
    has failed, the iterator stays exhausted and the source is not touched again.

    Args:
        source: Iterable whose iteration may raise.
        message: What the program failed to do.
    """
    def __init__(self, source: Iterable[T], message: Any) -> None:
        self._source: Optional[Iterator[T]] = iter(source)
        self._message = str(message)

    def __iter__(self) -> "ProblemIter[T]":
        return self

    def __next__(self) -> T:
        if self._source is None:
            raise StopIteration
        source = self._source
        try:
            return next(source)
        except StopIteration:
            self._source = None
            raise
        except Exception as e:
            self._source = None
            raise Fatal(f"Failed to {self._message} due to: {to_problem(e)}") from None
        except BaseException:
            self._source = None
            raise


def iter_or_failed_to(source: Iterable[T], message: Any) -> ProblemIter[T]:
    """Lazily yield the values of source, terminating on its first failure."""
    return ProblemIter(source, message)
