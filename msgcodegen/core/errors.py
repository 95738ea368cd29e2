# SPDX-License-Identifier: MIT
"""Custom exceptions for msgcodegen.

All msgcodegen exceptions inherit from MsgCodegenError, which includes
optional source location information for better error messages.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from msgcodegen.util.source_location import SourceLocation


class MsgCodegenError(Exception):
    """Base class for all msgcodegen exceptions.

    Attributes:
        message: The error message.
        location: Optional source location where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ParseError(MsgCodegenError):
    """Error while parsing a mapping table.

    A parse error aborts the whole table; no records are returned.
    """


class InvalidCodeError(ParseError):
    """The code field is not a non-negative integer.

    Attributes:
        token: The offending code field.
    """

    def __init__(
        self,
        token: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.token = token
        super().__init__(f"invalid message code: {token!r}", location)


class MalformedLineError(ParseError):
    """A line does not have exactly three fields.

    Attributes:
        line_text: The offending line.
        field_count: How many fields the line split into.
    """

    def __init__(
        self,
        line_text: str,
        field_count: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.line_text = line_text
        self.field_count = field_count
        super().__init__(
            f"expected 3 fields (code,name,proto), got {field_count}: {line_text!r}",
            location,
        )


class GenerateError(MsgCodegenError):
    """Error while generating a module from one table.

    Attributes:
        path: The input table the generation was for.
    """

    def __init__(
        self,
        message: str,
        path: Path | str,
        location: SourceLocation | None = None,
    ) -> None:
        self.path = Path(path)
        super().__init__(message, location)

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return f"{self.path}: {self.message}"


class TableReadError(GenerateError):
    """The input table could not be read."""

    def __init__(self, path: Path | str, reason: OSError) -> None:
        self.reason = reason
        super().__init__(f"cannot read table: {reason.strerror or reason}", path)


class TableParseError(GenerateError):
    """The input table could not be parsed.

    Attributes:
        error: The underlying ParseError.
    """

    def __init__(self, path: Path | str, error: ParseError) -> None:
        self.error = error
        super().__init__(error.message, path, error.location)


class ModuleWriteError(GenerateError):
    """The generated module could not be written.

    Attributes:
        output: The module path that was being written.
    """

    def __init__(self, path: Path | str, output: Path | str, reason: OSError) -> None:
        self.output = Path(output)
        self.reason = reason
        super().__init__(
            f"cannot write {self.output}: {reason.strerror or reason}", path
        )


def format_error(error: BaseException) -> str:
    """Return the one-line message shown to users for an error."""
    if isinstance(error, MsgCodegenError):
        return str(error)
    return f"{type(error).__name__}: {error}"
