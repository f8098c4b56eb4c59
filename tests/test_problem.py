"""Problem value: chain structure, rendering, equality and backtraces."""

import pickle

import pytest

from problem import Problem
from problem.utils.exceptions.base import BACKTRACE_SEPARATOR


def test_cause_renders_message_verbatim():
    assert str(Problem.cause("boom!")) == "boom!"
    assert str(Problem.cause(42)) == "42"


def test_single_context():
    problem = Problem.cause("boom!").while_context("parsing input")

    assert str(problem) == "while parsing input got problem caused by: boom!"


def test_nested_contexts_render_outermost_first():
    problem = (
        Problem.cause("boom!")
        .while_context("parsing input")
        .while_context("processing input data")
        .while_context("processing object")
    )

    assert str(problem) == (
        "while processing object, while processing input data, "
        "while parsing input got problem caused by: boom!"
    )


def test_wrapping_returns_new_problem():
    cause = Problem.cause("boom!")
    wrapped = cause.while_context("loading")

    assert wrapped is not cause
    assert wrapped.inner is cause
    assert str(cause) == "boom!"


def test_chain_properties():
    cause = Problem.cause("boom!")
    problem = cause.while_context("A").while_context("B")

    assert cause.is_cause
    assert cause.inner is None
    assert cause.depth == 0
    assert not problem.is_cause
    assert problem.message == "B"
    assert problem.inner.message == "A"
    assert problem.depth == 2


def test_problem_is_immutable():
    problem = Problem.cause("boom!")

    with pytest.raises(AttributeError):
        problem.message = "other"
    with pytest.raises(AttributeError):
        problem.inner = Problem.cause("other")


def test_equality_and_hash_follow_chain_text():
    first = Problem.cause("boom!").while_context("A")
    second = Problem.cause("boom!").while_context("A")

    assert first == second
    assert hash(first) == hash(second)
    assert first != Problem.cause("boom!").while_context("B")
    assert first != Problem.cause("A")
    assert len({first, second}) == 1


def test_problem_is_an_exception():
    with pytest.raises(Problem) as excinfo:
        raise Problem.cause("boom!").while_context("A")

    assert str(excinfo.value) == "while A got problem caused by: boom!"
    assert excinfo.value.args == ("A",)


def test_repr_shows_rendered_text():
    assert repr(Problem.cause("boom!")) == "Problem('boom!')"


def test_pickle_keeps_chain():
    problem = Problem.cause("boom!").while_context("A").while_context("B")

    restored = pickle.loads(pickle.dumps(problem))

    assert restored == problem
    assert restored.depth == 2
    assert str(restored) == str(problem)


def test_no_backtrace_by_default():
    assert Problem.cause("boom!").backtrace is None


def test_backtrace_captured_when_enabled(monkeypatch):
    monkeypatch.setenv("PROBLEM_BACKTRACE", "1")

    cause = Problem.cause("boom!")

    assert cause.backtrace is not None
    assert "test_backtrace_captured_when_enabled" in cause.backtrace
    assert str(cause).startswith("boom!" + BACKTRACE_SEPARATOR)
    assert str(cause.while_context("A")).startswith(
        "while A got problem caused by: boom!" + BACKTRACE_SEPARATOR
    )


def test_backtrace_not_part_of_equality(monkeypatch):
    monkeypatch.setenv("PROBLEM_BACKTRACE", "yes")

    assert Problem.cause("boom!") == Problem("boom!")


@pytest.mark.parametrize("value", ["0", "false", "off", ""])
def test_backtrace_disabled_by_falsy_toggle(monkeypatch, value):
    monkeypatch.setenv("PROBLEM_BACKTRACE", value)

    assert Problem.cause("boom!").backtrace is None


def test_constructor_renders_message_with_str():
    assert str(Problem(42)) == "42"
    assert Problem(42).message == "42"
    assert str(Problem(404, inner=Problem.cause("boom!"))) == (
        "while 404 got problem caused by: boom!"
    )


def test_deep_chain_builds_and_renders():
    problem = Problem.cause("boom!")
    for number in range(5000):
        problem = problem.while_context(f"step {number}")

    text = str(problem)

    assert problem.depth == 5000
    assert text.startswith("while step 4999, while step 4998, ")
    assert text.endswith("while step 0 got problem caused by: boom!")
    assert problem == pickle.loads(pickle.dumps(problem))
    assert hash(problem) == hash(problem.inner.while_context("step 4999"))


def test_pickle_keeps_backtrace(monkeypatch):
    monkeypatch.setenv("PROBLEM_BACKTRACE", "1")
    problem = Problem.cause("boom!").while_context("A")

    restored = pickle.loads(pickle.dumps(problem))

    assert restored.inner.backtrace == problem.inner.backtrace
    assert str(restored) == str(problem)
