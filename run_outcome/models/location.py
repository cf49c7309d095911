"""Source positions attached to signals and outcomes."""

import sys
from typing import Self

from pydantic import Field

from run_outcome.models.base import Model


class SourceLocation(Model):
    """Position in a source file, used for display only."""

    path: str = Field(..., description="Source file path as reported to the user")
    line: int = Field(..., ge=1, description="1-based line number")

    @classmethod
    def of_caller(cls, depth: int = 1) -> Self:
        """Capture the location of a calling frame.

        Args:
            depth: How many frames above the caller of ``of_caller`` to look.
                With the default, a helper calling ``of_caller()`` gets the
                location of its own caller.

        """
        frame = sys._getframe(depth + 1)
        return cls(path=frame.f_code.co_filename, line=frame.f_lineno or 1)

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"
