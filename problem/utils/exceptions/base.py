"""Problem: the one error value that is reported, aborted on or ignored, never matched on."""

import traceback
from typing import Any, Optional

from problem.utils.config import get_backtrace_enabled
from problem.utils.logger import get_logger

logger = get_logger(__name__)

BACKTRACE_SEPARATOR = "\n--- Cause\n"


def _capture_backtrace() -> Optional[str]:
    if not get_backtrace_enabled():
        return None
    # Drop the frames of Problem.cause and this helper
    stack = traceback.format_stack()[:-2]
    logger.debug("Captured backtrace of %d frames", len(stack))
    return "".join(stack).rstrip("\n")


class Problem(Exception):
    """
    Error that carries only human-readable text.

    A problem is either a cause (the rendered message of whatever went wrong)
    or a context layer describing what was being attempted, wrapping an inner
    problem. Problems are immutable: adding context returns a new problem.

    Args:
        message: Already rendered message of this layer.
        inner: Problem wrapped by this context layer, or None for a cause.
        backtrace: Optional call stack text captured when the cause was created.
    """
    def __init__(
        self,
        message: str,
        inner: "Problem | None" = None,
        backtrace: str | None = None,
    ) -> None:
        self._message = str(message)
        self._inner = inner
        self._backtrace = backtrace if inner is None else None
        # Only this layer; the full text is rendered on demand by __str__
        super().__init__(self._message)

    @classmethod
    def cause(cls, message: Any) -> "Problem":
        """
        Create a cause problem from anything that can be rendered with str().

        A backtrace is attached when PROBLEM_BACKTRACE is enabled.
        """
        return cls(str(message), backtrace=_capture_backtrace())

    def while_context(self, message: Any) -> "Problem":
        """Wrap this problem in a layer describing what was being attempted."""
        return Problem(str(message), inner=self)

    @property
    def message(self) -> str:
        return self._message

    @property
    def inner(self) -> Optional["Problem"]:
        return self._inner

    @property
    def backtrace(self) -> Optional[str]:
        return self._backtrace

    @property
    def is_cause(self) -> bool:
        return self._inner is None

    @property
    def depth(self) -> int:
        """Number of context layers above the cause."""
        depth = 0
        current = self
        while current._inner is not None:
            depth += 1
            current = current._inner
        return depth

    def _layers(self) -> list:
        layers = []
        current: Optional[Problem] = self
        while current is not None:
            layers.append(current)
            current = current._inner
        return layers

    def _chain(self) -> tuple:
        return tuple(layer._message for layer in self._layers())

    def _render(self) -> str:
        *contexts, cause = self._layers()
        text = cause._message
        if cause._backtrace:
            text = f"{text}{BACKTRACE_SEPARATOR}{cause._backtrace}"
        if not contexts:
            return text
        whiles = ", ".join(f"while {layer._message}" for layer in contexts)
        return f"{whiles} got problem caused by: {text}"

    def __str__(self) -> str:
        return self._render()

    def __repr__(self) -> str:
        return f"Problem({self._render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Problem):
            return NotImplemented
        return self._chain() == other._chain()

    def __hash__(self) -> int:
        return hash(self._chain())

    def __reduce__(self):
        cause = self._layers()[-1]
        return (_rebuild, (self._chain(), cause._backtrace))


def _rebuild(messages: tuple, backtrace: Optional[str]) -> Problem:
    *contexts, cause = messages
    problem = Problem(cause, backtrace=backtrace)
    for message in reversed(contexts):
        problem = Problem(message, inner=problem)
    return problem
