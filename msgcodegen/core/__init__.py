# SPDX-License-Identifier: MIT
"""Core table model and errors for msgcodegen."""

from msgcodegen.core.errors import (
    GenerateError,
    InvalidCodeError,
    MalformedLineError,
    ModuleWriteError,
    MsgCodegenError,
    ParseError,
    TableParseError,
    TableReadError,
)
from msgcodegen.core.table import PB_SUFFIX, Record, load_table, parse_table

__all__ = [
    "PB_SUFFIX",
    "GenerateError",
    "InvalidCodeError",
    "MalformedLineError",
    "ModuleWriteError",
    "MsgCodegenError",
    "ParseError",
    "Record",
    "TableParseError",
    "TableReadError",
    "load_table",
    "parse_table",
]
