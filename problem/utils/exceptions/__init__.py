"""Problem exception types."""

from problem.utils.exceptions.base import Problem
from problem.utils.exceptions.fatal import Fatal

__all__ = [
    "Problem",
    "Fatal",
]
