# SPDX-License-Identifier: MIT
"""Message code tables.

A table maps message codes to message names and the protocol module
that decodes them. One record per line, three comma-separated fields,
no header and no quoting:

    0,RpbErrorResp,riak
    1,RpbPingReq,riak

The proto field names a protobuf module; the generated decoder
reference appends PB_SUFFIX to it ("riak" -> "riak_pb").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from msgcodegen.core.errors import InvalidCodeError, MalformedLineError
from msgcodegen.util.source_location import SourceLocation

PB_SUFFIX = "_pb"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_CODE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Record:
    """One row of a message code table.

    Attributes:
        code: Numeric message code.
        name: Message name, used verbatim.
        module_ref: Module that decodes this message.
    """

    code: int
    name: str
    module_ref: str


def parse_table(text: str, source: Path | str | None = None) -> list[Record]:
    """Parse table text into records, preserving input order.

    Empty lines are ignored. Empty fields are dropped before the fields
    are counted, so "1,,Foo,bar" is read as "1,Foo,bar".

    Args:
        text: The table contents.
        source: Path of the table, used only in error locations.

    Returns:
        Records in the order their lines appear.

    Raises:
        MalformedLineError: A line does not have exactly three fields.
        InvalidCodeError: A code field is not a non-negative integer.
    """
    records: list[Record] = []
    for lineno, line in enumerate(_LINE_BREAK.split(text), start=1):
        if not line:
            continue
        fields = [f for f in line.split(",") if f]
        if len(fields) != 3:
            raise MalformedLineError(
                line, len(fields), SourceLocation(source, lineno)
            )
        code, name, proto = fields
        if not _CODE.fullmatch(code):
            raise InvalidCodeError(code, SourceLocation(source, lineno))
        records.append(Record(int(code), name, proto + PB_SUFFIX))
    return records


def load_table(path: Path | str) -> list[Record]:
    """Read and parse a table file.

    Tables are read as Latin-1, so any byte sequence decodes.

    Raises:
        OSError: The file could not be read.
        ParseError: The contents are not a valid table.
    """
    path = Path(path)
    return parse_table(path.read_text(encoding="latin-1"), path)
