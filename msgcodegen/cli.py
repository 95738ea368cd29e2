# SPDX-License-Identifier: MIT
"""Command-line interface for msgcodegen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from msgcodegen import get_var
from msgcodegen.core.errors import GenerateError, format_error
from msgcodegen.node import is_stale
from msgcodegen.runner import clean, find_tables, generate_all, output_for

# Set up logging
logger = logging.getLogger("msgcodegen")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def resolve_dirs(args: argparse.Namespace) -> tuple[Path, Path]:
    """Source and output directories from args, then environment, then defaults."""
    source_dir = Path(args.source_dir or get_var("SOURCE_DIR", "src"))
    output_dir = args.output_dir or get_var("OUTPUT_DIR")
    return source_dir, Path(output_dir) if output_dir else source_dir


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate modules for out-of-date tables.

    This is what runs when you just type 'msgcodegen' with no subcommand.
    """
    setup_logging(args.verbose, args.debug)

    source_dir, output_dir = resolve_dirs(args)
    if not source_dir.is_dir():
        logger.error("Source directory not found: %s", source_dir)
        return 1

    try:
        report = generate_all(
            source_dir,
            output_dir,
            force=getattr(args, "force", False),
            keep_going=getattr(args, "keep_going", False),
        )
    except GenerateError as e:
        logger.error("%s", format_error(e))
        return 1

    logger.info(
        "%d generated, %d up to date, %d failed",
        len(report.generated),
        len(report.skipped),
        len(report.failed),
    )
    return 0 if report.ok else 1


def cmd_clean(args: argparse.Namespace) -> int:
    """Remove generated modules."""
    setup_logging(args.verbose, args.debug)

    source_dir, output_dir = resolve_dirs(args)
    removed = clean(source_dir, output_dir)
    logger.info("Removed %d generated modules", len(removed))
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List tables, their generated modules and whether they are up to date."""
    setup_logging(args.verbose, args.debug)

    source_dir, output_dir = resolve_dirs(args)
    for table in find_tables(source_dir):
        output = output_for(table, output_dir)
        state = "out-of-date" if is_stale(table, output) else "up-to-date"
        print(f"{table} -> {output} ({state})")
    return 0


def add_common_args(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    """Add common arguments to a parser.

    Subcommand parsers pass suppress=True so that options left unset there
    keep the value given before the subcommand.
    """
    extra = {"default": argparse.SUPPRESS} if suppress else {}
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output", **extra
    )
    parser.add_argument("--debug", action="store_true", help="Debug output", **extra)
    parser.add_argument(
        "-s",
        "--source-dir",
        help="Directory searched for *.csv tables "
        "(default: $MSGCODEGEN_SOURCE_DIR or src)",
        **extra,
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Directory for generated modules "
        "(default: $MSGCODEGEN_OUTPUT_DIR or the source directory)",
        **extra,
    )


def add_generate_args(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    """Add arguments for the generate command."""
    extra = {"default": argparse.SUPPRESS} if suppress else {}
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Regenerate modules even if they are up to date",
        **extra,
    )
    parser.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        help="Continue with other tables after a failure",
        **extra,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the msgcodegen CLI."""
    parser = argparse.ArgumentParser(
        prog="msgcodegen",
        description="Generate message code mapping modules from CSV tables.",
        epilog="Run 'msgcodegen <command> --help' for command-specific help.",
    )
    from msgcodegen import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Default command args (for 'msgcodegen' with no subcommand)
    add_common_args(parser)
    add_generate_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # msgcodegen generate
    gen_parser = subparsers.add_parser(
        "generate", help="Generate modules for out-of-date tables"
    )
    add_common_args(gen_parser, suppress=True)
    add_generate_args(gen_parser, suppress=True)
    gen_parser.set_defaults(func=cmd_generate)

    # msgcodegen clean
    clean_parser = subparsers.add_parser("clean", help="Remove generated modules")
    add_common_args(clean_parser, suppress=True)
    clean_parser.set_defaults(func=cmd_clean)

    # msgcodegen list
    list_parser = subparsers.add_parser(
        "list", help="List tables and the state of their modules"
    )
    add_common_args(list_parser, suppress=True)
    list_parser.set_defaults(func=cmd_list)

    args = parser.parse_args(argv)

    if args.command is None:
        return cmd_generate(args)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
