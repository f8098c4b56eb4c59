#!/usr/bin/env python3

"""
example.py
----------
Example usage of problem - a small command that sums the numbers in a file.

Demonstrates:
1) Adding context to failures while reading and parsing
2) Terminating on the first unparsable line
3) Reporting the final message through the error log instead of a traceback

Usage:
    python examples/example.py numbers.txt
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from problem import (
    expect_or_failed_to,
    failed_to,
    format_panic_to_error_log,
    iter_or_failed_to,
    problem_while,
    problem_while_with,
)
from problem.utils.logger import setup_logging, get_logger

logger = get_logger(__name__)


def read_lines(path: Path) -> list:
    with problem_while_with(lambda: f"reading {path}"):
        raw = path.read_bytes()
    with problem_while("decoding file contents"):
        text = raw.decode("utf-8")
    return [line for line in text.splitlines() if line.strip()]


def parse(lines: list):
    for number, line in enumerate(lines, start=1):
        with problem_while(f"parsing line {number}"):
            yield int(line)


def main():
    """
    Sum the numbers listed one per line in the file given as first argument.
    """
    setup_logging()
    format_panic_to_error_log()

    path = Path(expect_or_failed_to(next(iter(sys.argv[1:]), None), "get input file argument"))

    with failed_to("load numbers"):
        lines = read_lines(path)

    total = sum(iter_or_failed_to(parse(lines), "sum numbers"))
    logger.info("Total: %d", total)


if __name__ == "__main__":
    main()
