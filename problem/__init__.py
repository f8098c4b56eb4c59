"""
problem: report errors as readable text instead of handling them.

    from problem import failed_to, format_panic_to_stderr, problem_while

    format_panic_to_stderr()

    with failed_to("load settings"):
        with problem_while("reading settings.toml"):
            data = open("settings.toml").read()

exits with:

    Failed to load settings due to: while reading settings.toml got problem
    caused by: [Errno 2] No such file or directory: 'settings.toml'
"""

from problem.context import (
    in_context_of,
    in_context_of_with,
    problem_while,
    problem_while_with,
    wrap,
)
from problem.convert import UNKNOWN_ERROR, map_problem, ok_or_problem, to_problem
from problem.failed_to import (
    ProblemIter,
    abort,
    expect_or_failed_to,
    failed_to,
    iter_or_failed_to,
    or_failed_to,
)
from problem.hooks import format_panic_to_error_log, format_panic_to_stderr
from problem.utils.exceptions import Fatal, Problem

__version__ = "0.1.0"

__all__ = [
    "Problem",
    "Fatal",
    "UNKNOWN_ERROR",
    "to_problem",
    "ok_or_problem",
    "map_problem",
    "problem_while",
    "problem_while_with",
    "in_context_of",
    "in_context_of_with",
    "wrap",
    "abort",
    "failed_to",
    "or_failed_to",
    "expect_or_failed_to",
    "iter_or_failed_to",
    "ProblemIter",
    "format_panic_to_stderr",
    "format_panic_to_error_log",
]
