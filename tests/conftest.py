import sys
import threading

import pytest

from problem.utils.config import BACKTRACE_ENV


@pytest.fixture(autouse=True)
def no_backtrace(monkeypatch):
    """Keep rendered messages free of backtraces unless a test enables them."""
    monkeypatch.delenv(BACKTRACE_ENV, raising=False)


@pytest.fixture
def restore_hooks(monkeypatch):
    """Undo termination hook installation after the test."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
