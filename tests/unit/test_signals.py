"""Tests for signal types and raising helpers."""

import sys

import pytest

from run_outcome.models.location import SourceLocation
from run_outcome.signals import (
    AssertionFailedError,
    CanceledError,
    IgnoredError,
    OutcomeSignal,
    UnexpectedError,
    cancel,
    fail,
    ignore,
)


def test_fail_raises_with_caller_location() -> None:
    """fail() records where it was called from."""
    line = sys._getframe().f_lineno + 2
    with pytest.raises(AssertionFailedError) as exc_info:
        fail("expected 1 but got 2")

    assert exc_info.value.message == "expected 1 but got 2"
    assert exc_info.value.location == SourceLocation(path=__file__, line=line)


def test_assertion_failed_is_an_assertion_error() -> None:
    """Plain ``except AssertionError`` handlers still see assertion failures."""
    error = AssertionFailedError("nope", SourceLocation(path="a.py", line=1))

    assert isinstance(error, AssertionError)
    assert isinstance(error, OutcomeSignal)
    assert str(error) == "nope"


def test_ignore_raises_with_reason_and_location() -> None:
    """ignore() carries an optional reason."""
    with pytest.raises(IgnoredError) as exc_info:
        ignore("flaky")

    assert exc_info.value.reason == "flaky"
    assert exc_info.value.location is not None
    assert exc_info.value.location.path == __file__


def test_cancel_without_reason() -> None:
    """cancel() works without a reason."""
    with pytest.raises(CanceledError) as exc_info:
        cancel()

    assert exc_info.value.reason is None
    assert str(exc_info.value) == ""


def test_unexpected_wrap_defaults_to_caller_location() -> None:
    """wrap() keeps the original error and records where it was wrapped."""
    reason = ZeroDivisionError("division by zero")

    line = sys._getframe().f_lineno + 1
    wrapped = UnexpectedError.wrap(reason)

    assert wrapped.reason is reason
    assert wrapped.location == SourceLocation(path=__file__, line=line)
    assert str(wrapped) == "division by zero"


def test_unexpected_wrap_keeps_explicit_location() -> None:
    """An explicit location wins over the caller's."""
    location = SourceLocation(path="runner.py", line=88)

    wrapped = UnexpectedError.wrap(ValueError(), location)

    assert wrapped.location is location
