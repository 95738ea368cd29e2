# SPDX-License-Identifier: MIT
"""Run a generator over a directory of tables.

This is the build-step side of msgcodegen: find the tables, work out
which generated modules are out of date, and generate those.

Example:
    report = generate_all(Path("src"), Path("src"))
    for path in report.generated:
        print(f"Generated {path}")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from msgcodegen.core.errors import GenerateError
from msgcodegen.generators.generator import BaseGenerator
from msgcodegen.generators.msgcodes import MsgCodeGenerator
from msgcodegen.node import is_stale

logger = logging.getLogger(__name__)


@dataclass
class GenerateReport:
    """Outcome of a generate_all run.

    Attributes:
        generated: Modules that were written.
        skipped: Modules that were already up to date.
        failed: Tables that failed, with the error for each.
    """

    generated: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, GenerateError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def find_tables(directory: Path | str, suffix: str = ".csv") -> list[Path]:
    """Find table files under directory, sorted by path.

    Args:
        directory: Directory to search recursively.
        suffix: Table file suffix.

    Returns:
        Matching files, or an empty list if directory does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.rglob(f"*{suffix}") if p.is_file())


def output_for(
    table: Path | str,
    output_dir: Path | str,
    generator: BaseGenerator | None = None,
) -> Path:
    """Path of the module generated from table."""
    if generator is None:
        generator = MsgCodeGenerator()
    return generator.output_path(table, output_dir)


def generate_all(
    source_dir: Path | str,
    output_dir: Path | str | None = None,
    *,
    force: bool = False,
    keep_going: bool = False,
    generator: BaseGenerator | None = None,
) -> GenerateReport:
    """Generate a module for every stale table in source_dir.

    Args:
        source_dir: Directory holding the tables.
        output_dir: Directory for generated modules (default: source_dir).
        force: Regenerate even if the module is up to date.
        keep_going: Record failures and continue with the next table
            instead of raising.
        generator: Generator to use (default: MsgCodeGenerator).

    Returns:
        What was generated, skipped and, with keep_going, what failed.

    Raises:
        GenerateError: A table failed and keep_going is False.
    """
    if generator is None:
        generator = MsgCodeGenerator()
    if output_dir is None:
        output_dir = source_dir

    report = GenerateReport()
    for table in find_tables(source_dir, generator.input_suffix):
        output = output_for(table, output_dir, generator)
        if not force and not is_stale(table, output):
            logger.debug("Up to date: %s", output)
            report.skipped.append(output)
            continue
        try:
            generator.generate(table, output)
        except GenerateError as e:
            if not keep_going:
                raise
            logger.error("%s", e)
            report.failed.append((table, e))
            continue
        report.generated.append(output)
    return report


def clean(
    source_dir: Path | str,
    output_dir: Path | str | None = None,
    *,
    generator: BaseGenerator | None = None,
) -> list[Path]:
    """Delete the modules generated from the tables in source_dir.

    Modules that do not exist are ignored. Other deletion failures
    are logged and skipped.

    Returns:
        The modules that were removed.
    """
    if generator is None:
        generator = MsgCodeGenerator()
    if output_dir is None:
        output_dir = source_dir

    removed: list[Path] = []
    for table in find_tables(source_dir, generator.input_suffix):
        output = output_for(table, output_dir, generator)
        try:
            output.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.error("Failed to delete %s: %s", output, e)
            continue
        logger.info("Removed %s", output)
        removed.append(output)
    return removed
