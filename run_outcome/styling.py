"""Console styling configuration used when rendering outcomes."""

import os
from collections.abc import Mapping
from typing import Self, TextIO

from pydantic import Field

from run_outcome.models.base import Model

GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"


class Styling(Model):
    """Prefixes applied to rendered lines, plus the line terminator.

    Each style is a plain prefix: the text following it is not reset, so a
    rendered line reads ``<code><text><eol>``.
    """

    success_code: str = Field(default=GREEN, description="Prefix for passing tests")
    warn_code: str = Field(default=YELLOW, description="Prefix for ignored/canceled")
    fail_code: str = Field(default=RED, description="Prefix for failures")
    eol: str = Field(default=os.linesep, min_length=1, description="Line terminator")

    @classmethod
    def ansi(cls, eol: str = os.linesep) -> Self:
        """Styling with ANSI color codes."""
        return cls(eol=eol)

    @classmethod
    def plain(cls, eol: str = os.linesep) -> Self:
        """Styling without any color codes."""
        return cls(success_code="", warn_code="", fail_code="", eol=eol)

    @classmethod
    def for_stream(
        cls, stream: TextIO, env: Mapping[str, str] | None = None
    ) -> Self:
        """Pick colored or plain styling for the given output stream.

        ``FORCE_COLOR`` wins over ``NO_COLOR``; otherwise color is used only
        when the stream is attached to a terminal.
        """
        env = os.environ if env is None else env

        if env.get("FORCE_COLOR"):
            return cls.ansi()
        if env.get("NO_COLOR"):
            return cls.plain()

        isatty = getattr(stream, "isatty", None)
        if isatty is not None and isatty():
            return cls.ansi()
        return cls.plain()

    def success(self, text: str) -> str:
        return self.success_code + text

    def warn(self, text: str) -> str:
        return self.warn_code + text

    def fail(self, text: str) -> str:
        return self.fail_code + text
