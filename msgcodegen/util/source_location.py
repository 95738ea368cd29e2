# SPDX-License-Identifier: MIT
"""Source locations for error reporting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """A position in an input table.

    Attributes:
        path: The table file, or None when parsing text with no file.
        line: 1-based line number, or None for whole-file problems.
    """

    path: Path | str | None
    line: int | None = None

    def __str__(self) -> str:
        where = str(self.path) if self.path is not None else "<table>"
        if self.line is not None:
            return f"{where}:{self.line}"
        return where
