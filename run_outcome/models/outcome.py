"""Models for the outcome of a single test case."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal, Never, assert_never

from run_outcome.formatting import describe_error, location_suffix, render_stack
from run_outcome.models.location import SourceLocation
from run_outcome.styling import Styling

log = logging.getLogger(__name__)

Status = Literal["success", "ignored", "canceled", "failure", "unexpected"]

DEFAULT_STYLING = Styling.ansi()


class Outcome[T](ABC):
    """Terminal state of one test case.

    The set of variants is closed: Success, Ignored, Canceled, Failure and
    Unexpected. Only Success carries a value; the others are value-less and
    pass through ``transform``/``chain`` untouched, so a pipeline of steps
    stops at the first one that did not succeed.

    Source locations are informational: they are rendered but never take part
    in equality or hashing.
    """

    @property
    def status(self) -> Status:
        """Status keyword of this outcome's variant."""
        return status_of(self)  # type: ignore[arg-type]

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @abstractmethod
    def transform[U](self, f: Callable[[T], U]) -> "Outcome[U]":
        """Apply ``f`` to the success value.

        Exceptions raised by ``f`` become ``Unexpected``; this method itself
        never raises them.
        """

    @abstractmethod
    def chain[U](self, f: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        """Continue with the outcome produced by ``f`` from the success value.

        Exceptions raised by ``f`` become ``Unexpected``; this method itself
        never raises them.
        """

    @abstractmethod
    def format(self, name: str, styling: Styling | None = None) -> str:
        """Render this outcome as console lines for the test called ``name``."""


@dataclass(frozen=True, kw_only=True)
class Success[T](Outcome[T]):
    """The test body completed and produced a value."""

    value: T

    def transform[U](self, f: Callable[[T], U]) -> Outcome[U]:
        try:
            return Success(value=f(self.value))
        except Exception as ex:
            log.debug("transform step raised %s", type(ex).__name__, exc_info=ex)
            return Unexpected(cause=ex)

    def chain[U](self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        try:
            return f(self.value)
        except Exception as ex:
            log.debug("chain step raised %s", type(ex).__name__, exc_info=ex)
            return Unexpected(cause=ex)

    def format(self, name: str, styling: Styling | None = None) -> str:
        styling = DEFAULT_STYLING if styling is None else styling
        return styling.success(f"- {name}") + styling.eol


class Halted(Outcome[Never]):
    """Base for the value-less variants.

    Since there is no value to hand to a step, composition returns the same
    instance, which is a valid ``Outcome[U]`` for any ``U``.
    """

    def transform[U](self, f: Callable[[Never], U]) -> Outcome[U]:
        return self

    def chain[U](self, f: Callable[[Never], Outcome[U]]) -> Outcome[U]:
        return self


def _format_skipped(
    name: str,
    marker: str,
    reason: str | None,
    location: SourceLocation | None,
    styling: Styling | None,
) -> str:
    styling = DEFAULT_STYLING if styling is None else styling
    text = styling.warn(f"- {name} !!! {marker} !!!") + styling.eol
    if reason is not None:
        text += styling.warn(f"  {reason}{location_suffix(location)}") + styling.eol
    return text


@dataclass(frozen=True, kw_only=True)
class Ignored(Halted):
    """The test was explicitly skipped before it ran."""

    reason: str | None = None
    location: SourceLocation | None = field(default=None, compare=False)

    def format(self, name: str, styling: Styling | None = None) -> str:
        return _format_skipped(name, "IGNORED", self.reason, self.location, styling)


@dataclass(frozen=True, kw_only=True)
class Canceled(Halted):
    """The test was explicitly aborted while running."""

    reason: str | None = None
    location: SourceLocation | None = field(default=None, compare=False)

    def format(self, name: str, styling: Styling | None = None) -> str:
        return _format_skipped(name, "CANCELED", self.reason, self.location, styling)


@dataclass(frozen=True, kw_only=True)
class Failure(Halted):
    """An assertion did not hold."""

    message: str
    cause: BaseException | None = None
    location: SourceLocation | None = field(default=None, compare=False)

    def format(self, name: str, styling: Styling | None = None) -> str:
        styling = DEFAULT_STYLING if styling is None else styling
        return (
            styling.fail(f"- {name} *** FAILED ***")
            + styling.eol
            + styling.fail(f"  {self.message}{location_suffix(self.location)}")
            + styling.eol
        )


@dataclass(frozen=True, kw_only=True)
class Unexpected(Halted):
    """An unanticipated error was raised by the test or by a composed step."""

    cause: BaseException
    location: SourceLocation | None = field(default=None, compare=False)

    def format(self, name: str, styling: Styling | None = None) -> str:
        styling = DEFAULT_STYLING if styling is None else styling
        return (
            styling.fail(f"- {name} *** FAILED ***")
            + styling.eol
            + styling.fail("  " + describe_error(self.cause, self.location))
            + styling.eol
            + render_stack(self.cause, styling)
        )


def status_of(
    outcome: Success[Any] | Ignored | Canceled | Failure | Unexpected,
) -> Status:
    """Map an outcome to its status keyword.

    Raises:
        AssertionError: If ``outcome`` is not one of the five known variants.

    """
    match outcome:
        case Success():
            return "success"
        case Ignored():
            return "ignored"
        case Canceled():
            return "canceled"
        case Failure():
            return "failure"
        case Unexpected():
            return "unexpected"
        case _:
            assert_never(outcome)
