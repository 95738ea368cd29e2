# SPDX-License-Identifier: MIT
"""
msgcodegen: generate message code mapping modules from CSV tables.

Each table row maps a numeric message code to a message name and the
protobuf module that decodes it. msgcodegen turns a table into a Python
module with msg_type(), msg_code() and decoder_for() lookups, and is
meant to run as a build step before the generated code is used.
"""

from __future__ import annotations

import os

from msgcodegen.core.errors import GenerateError, MsgCodegenError, ParseError
from msgcodegen.core.table import Record, load_table, parse_table
from msgcodegen.generators.msgcodes import MsgCodeGenerator
from msgcodegen.runner import clean, find_tables, generate_all

__version__ = "0.1.0"

ENV_PREFIX = "MSGCODEGEN_"


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a setting from the environment.

    Settings are read from MSGCODEGEN_<NAME> variables, for example:
        MSGCODEGEN_SOURCE_DIR=proto msgcodegen

    Args:
        name: Setting name, without the MSGCODEGEN_ prefix.
        default: Value if the variable is unset or empty.

    Returns:
        The variable value, or default if not set.
    """
    return os.environ.get(ENV_PREFIX + name.upper()) or default


__all__ = [
    "GenerateError",
    "MsgCodeGenerator",
    "MsgCodegenError",
    "ParseError",
    "Record",
    "__version__",
    "clean",
    "find_tables",
    "generate_all",
    "get_var",
    "load_table",
    "parse_table",
]
