"""Translate raised errors into test outcomes."""

import logging
from collections.abc import Awaitable, Callable
from typing import Never

from run_outcome.models.outcome import (
    Canceled,
    Failure,
    Ignored,
    Outcome,
    Success,
    Unexpected,
)
from run_outcome.signals import (
    AssertionFailedError,
    CanceledError,
    IgnoredError,
    UnexpectedError,
)

log = logging.getLogger(__name__)


def classify(err: BaseException) -> Outcome[Never]:
    """Map a raised error to the outcome it stands for.

    Recognized signals are matched in a fixed order, so a subclass of several
    signal types lands on the first one listed below:

    1. ``AssertionFailedError`` -> ``Failure``
    2. ``UnexpectedError`` -> ``Unexpected`` of the wrapped reason
    3. ``IgnoredError`` -> ``Ignored``
    4. ``CanceledError`` -> ``Canceled``

    Anything else becomes ``Unexpected`` with no location.
    """
    outcome: Outcome[Never]
    match err:
        case AssertionFailedError():
            outcome = Failure(message=err.message, cause=err, location=err.location)
        case UnexpectedError():
            outcome = Unexpected(cause=err.reason, location=err.location)
        case IgnoredError():
            outcome = Ignored(reason=err.reason, location=err.location)
        case CanceledError():
            outcome = Canceled(reason=err.reason, location=err.location)
        case _:
            outcome = Unexpected(cause=err)

    log.debug("Classified %s as %s", type(err).__name__, outcome.status)
    return outcome


def capture[T](body: Callable[[], T]) -> Outcome[T]:
    """Run a test body and return its outcome."""
    try:
        return Success(value=body())
    except Exception as ex:
        return classify(ex)


async def capture_async[T](body: Callable[[], Awaitable[T]]) -> Outcome[T]:
    """Await a coroutine test body and return its outcome."""
    try:
        return Success(value=await body())
    except Exception as ex:
        return classify(ex)
