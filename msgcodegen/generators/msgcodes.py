# SPDX-License-Identifier: MIT
"""Message code mapping generator.

Generates a Python module from a message code table. The module
exposes three lookups:

    msg_type(code)     -> message name, or None for unknown codes
    msg_code(name)     -> message code
    decoder_for(code)  -> name of the module that decodes the message

Each lookup is a match statement with one case per table row in
table order, so when a code or name repeats the first row wins.
msg_code and decoder_for raise KeyError for values not in the table.

Example output:
    # This module contains message code mappings generated from
    # src/riak_pb_messages.csv. DO NOT EDIT OR COMMIT THIS FILE!
    'Message code mappings for riak_pb_messages.'

    from __future__ import annotations

    __all__ = ["msg_type", "msg_code", "decoder_for"]


    def msg_type(code: int) -> str | None:
        match code:
            case 0:
                return 'RpbErrorResp'
            case _:
                return None
    ...

Usage:
    generator = MsgCodeGenerator()
    generator.generate(Path("src/riak_pb_messages.csv"),
                       Path("src/riak_pb_messages.py"))
"""

from __future__ import annotations

import io
import logging
import os
import re
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from msgcodegen.core.errors import (
    ModuleWriteError,
    ParseError,
    TableParseError,
    TableReadError,
)
from msgcodegen.core.table import Record, load_table
from msgcodegen.generators.generator import BaseGenerator

logger = logging.getLogger(__name__)

EXPORTS = ("msg_type", "msg_code", "decoder_for")

_LINE_BREAKS = re.compile(r"[\r\n]+")


class MsgCodeGenerator(BaseGenerator):
    """Generator for message code mapping modules."""

    input_suffix = ".csv"
    output_suffix = ".py"

    def __init__(self) -> None:
        super().__init__("msgcodes")

    def generate(self, input_path: Path, output_path: Path) -> None:
        """Generate the mapping module for one table.

        The module is written to a temporary file next to output_path
        and moved into place, so output_path is either fully replaced
        or left as it was.

        Args:
            input_path: The table to read.
            output_path: The module to write.

        Raises:
            TableReadError: The table could not be read.
            TableParseError: The table is malformed.
            ModuleWriteError: The module could not be written.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        try:
            records = load_table(input_path)
        except ParseError as e:
            raise TableParseError(input_path, e) from e
        except OSError as e:
            raise TableReadError(input_path, e) from e

        logger.debug("Read %d records from %s", len(records), input_path)
        text = self.render(self.module_name(input_path), records, input_path)

        try:
            self._write_atomic(output_path, text)
        except OSError as e:
            raise ModuleWriteError(input_path, output_path, e) from e

        logger.info("Generated %s", output_path)

    def render(
        self,
        module_name: str,
        records: Sequence[Record],
        source: Path | str,
    ) -> str:
        """Render the mapping module source.

        Args:
            module_name: Name of the generated module.
            records: Table rows, in the order their clauses are emitted.
            source: The table path named in the header comment.

        Returns:
            The module source text.
        """
        f = io.StringIO()
        self._write_header(f, module_name, source)
        self._write_msg_type(f, records)
        self._write_msg_code(f, records)
        self._write_decoder_for(f, records)
        return f.getvalue()

    def _write_header(self, f: TextIO, module_name: str, source: Path | str) -> None:
        """Write the do-not-edit comment, docstring and exports."""
        # A line break in the path would end the comment
        source_text = _LINE_BREAKS.sub(" ", str(source))
        f.write("# This module contains message code mappings generated from\n")
        f.write(f"# {source_text}. DO NOT EDIT OR COMMIT THIS FILE!\n")
        docstring = repr(f"Message code mappings for {module_name}.")
        f.write(f"{docstring}\n")
        f.write("\n")
        f.write("from __future__ import annotations\n")
        f.write("\n")
        exports = ", ".join(f'"{name}"' for name in EXPORTS)
        f.write(f"__all__ = [{exports}]\n")

    def _write_msg_type(self, f: TextIO, records: Sequence[Record]) -> None:
        """Write msg_type: code -> name, None for unknown codes."""
        f.write("\n\n")
        f.write("def msg_type(code: int) -> str | None:\n")
        f.write("    match code:\n")
        for record in records:
            self._write_case(f, repr(record.code), repr(record.name))
        f.write("        case _:\n")
        f.write("            return None\n")

    def _write_msg_code(self, f: TextIO, records: Sequence[Record]) -> None:
        """Write msg_code: name -> code."""
        f.write("\n\n")
        f.write("def msg_code(name: str) -> int:\n")
        f.write("    match name:\n")
        for record in records:
            self._write_case(f, repr(record.name), repr(record.code))
        f.write("        case _:\n")
        f.write("            raise KeyError(name)\n")

    def _write_decoder_for(self, f: TextIO, records: Sequence[Record]) -> None:
        """Write decoder_for: code -> decoder module name."""
        f.write("\n\n")
        f.write("def decoder_for(code: int) -> str:\n")
        f.write("    match code:\n")
        for record in records:
            self._write_case(f, repr(record.code), repr(record.module_ref))
        f.write("        case _:\n")
        f.write("            raise KeyError(code)\n")

    @staticmethod
    def _write_case(f: TextIO, pattern: str, result: str) -> None:
        f.write(f"        case {pattern}:\n")
        f.write(f"            return {result}\n")

    @staticmethod
    def _write_atomic(output_path: Path, text: str) -> None:
        """Write text to output_path via a temporary file and os.replace."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        try:
            try:
                tmp = os.fdopen(fd, "w", encoding="utf-8", newline="\n")
            except BaseException:
                os.close(fd)
                raise
            with tmp:
                tmp.write(text)
            # mkstemp creates the file 0600
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, output_path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
