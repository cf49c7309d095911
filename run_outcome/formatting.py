"""Text helpers shared by the outcome renderers."""

import traceback
from collections.abc import Sequence

from run_outcome.models.location import SourceLocation
from run_outcome.styling import Styling

MAX_STACK_FRAMES = 20
FRAME_INDENT = "    "
TRUNCATION_MARKER = "..."


def location_suffix(location: SourceLocation | None) -> str:
    """Render `` (path:line)``, or nothing when the location is unknown."""
    if location is None:
        return ""
    return f" ({location})"


def error_message(error: BaseException) -> str:
    """Return ``str(error)``, tolerating a broken ``__str__``."""
    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__} object>"


def describe_error(
    error: BaseException, location: SourceLocation | None = None
) -> str:
    """Short class name, optional message, optional location suffix.

    Examples:
        ``ValueError: boom (tests/test_x.py:12)``
        ``KeyError``

    """
    description = type(error).__name__
    if message := error_message(error):
        description = f"{description}: {message}"
    return description + location_suffix(location)


def stack_frames(error: BaseException) -> Sequence[str]:
    """Frames of the error's traceback, most recent call first.

    An error that was never raised has no traceback and yields no frames.
    Source files are not read; only names and line numbers are rendered.
    """
    frames = [
        f'File "{frame.f_code.co_filename}", line {lineno}, '
        f"in {frame.f_code.co_name}"
        for frame, lineno in traceback.walk_tb(error.__traceback__)
    ]
    return frames[::-1]


def render_stack(error: BaseException, styling: Styling) -> str:
    """Render up to MAX_STACK_FRAMES frames, one styled line each.

    More frames than that are replaced by a single truncation line. With no
    frames at all the block is a bare line terminator.
    """
    frames = stack_frames(error)
    if not frames:
        return styling.eol

    lines = [
        styling.fail(FRAME_INDENT + frame) + styling.eol
        for frame in frames[:MAX_STACK_FRAMES]
    ]
    if len(frames) > MAX_STACK_FRAMES:
        lines.append(styling.fail(FRAME_INDENT + TRUNCATION_MARKER) + styling.eol)
    return "".join(lines)
