"""Signals raised by test bodies to end a test with a specific outcome."""

from typing import NoReturn, Self

from run_outcome.formatting import error_message
from run_outcome.models.location import SourceLocation


class OutcomeSignal(Exception):
    """Base for the signals the classifier recognizes."""


class AssertionFailedError(OutcomeSignal, AssertionError):
    """Raised when an assertion does not hold."""

    def __init__(self, message: str, location: SourceLocation) -> None:
        self.message = message
        self.location = location
        super().__init__(message)


class UnexpectedError(OutcomeSignal):
    """Wraps an error caught by the framework at a known location."""

    def __init__(self, reason: BaseException, location: SourceLocation) -> None:
        self.reason = reason
        self.location = location
        super().__init__(error_message(reason))

    @classmethod
    def wrap(
        cls, reason: BaseException, location: SourceLocation | None = None
    ) -> Self:
        """Wrap ``reason``, defaulting the location to the caller's."""
        if location is None:
            location = SourceLocation.of_caller()
        return cls(reason, location)


class IgnoredError(OutcomeSignal):
    """Raised to skip a test."""

    def __init__(
        self, reason: str | None = None, location: SourceLocation | None = None
    ) -> None:
        self.reason = reason
        self.location = location
        super().__init__(reason or "")


class CanceledError(OutcomeSignal):
    """Raised to abort a test that already started."""

    def __init__(
        self, reason: str | None = None, location: SourceLocation | None = None
    ) -> None:
        self.reason = reason
        self.location = location
        super().__init__(reason or "")


def fail(message: str) -> NoReturn:
    """Fail the current test at the caller's location."""
    raise AssertionFailedError(message, SourceLocation.of_caller())


def ignore(reason: str | None = None) -> NoReturn:
    """Skip the current test at the caller's location."""
    raise IgnoredError(reason, SourceLocation.of_caller())


def cancel(reason: str | None = None) -> NoReturn:
    """Abort the current test at the caller's location."""
    raise CanceledError(reason, SourceLocation.of_caller())
