# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI harness for building and querying the documentation table."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from cmdoc.lookup import DocumentationLookup
from cmdoc.model import DocumentationRecord
from cmdoc.reader import DEFAULT_EXTENSION, SourceTreeError
from cmdoc.table_builder import SourceError, TableBuilder
from cmdoc.table_io import TableFormatError, read_table, table_payload, write_table

logger = logging.getLogger(__name__)

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "key": 2,
    "synopsis": 5,
    "example": 5,
}

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_USAGE = 2


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="cmdoc")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_cmd = subparsers.add_parser("build")
    build_cmd.add_argument(
        "--path",
        required=True,
        action="append",
        help="Documentation directory; repeat to combine several.",
    )
    build_cmd.add_argument(
        "--extension",
        default=DEFAULT_EXTENSION,
        help="Suffix of documentation source files.",
    )
    build_cmd.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Gitignore-style pattern to skip; may be repeated.",
    )
    build_cmd.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker threads processing files.",
    )
    build_cmd.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    build_cmd.add_argument(
        "--output",
        required=False,
        help="Optional output file path for the JSON table artifact.",
    )

    lookup_cmd = subparsers.add_parser("lookup")
    lookup_cmd.add_argument(
        "--table", required=True, help="JSON table artifact written by build."
    )
    lookup_cmd.add_argument("--name", required=True, help="Entity name to resolve.")
    lookup_cmd.add_argument(
        "--single-line",
        action="store_true",
        help="Render the synopsis only, flattened to one line.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return EXIT_USAGE
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.command == "build":
        return _run_build(args=args, stdout=stdout, stderr=stderr)
    if args.command == "lookup":
        return _run_lookup(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return EXIT_USAGE


def _run_build(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run build command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    roots = [Path(path) for path in args.path]
    try:
        builder = TableBuilder(
            extension=args.extension,
            ignore_patterns=args.exclude,
            max_workers=args.workers,
        )
        result = builder.build(roots)
    except (SourceTreeError, ValueError) as exc:
        logger.warning(f"Table build rejected (paths={args.path} error={exc})")
        stderr.write(f"{exc}\n")
        return EXIT_USAGE

    _write_errors(errors=result.errors, stderr=stderr)
    if args.output:
        try:
            write_table(
                records=result.records,
                output_path=Path(args.output),
                errors=result.errors,
            )
        except OSError as exc:
            logger.warning(
                f"Failed to write table artifact (output_path={args.output} error={exc})"
            )
            stderr.write(f"Failed to write table artifact: {args.output}\n")
            return EXIT_USAGE

    if args.format == "json":
        _write_json(records=result.records, errors=result.errors, stdout=stdout)
    else:
        _write_table(records=result.records, stdout=stdout)
    return EXIT_OK


def _run_lookup(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run lookup command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    table_path = Path(args.table)
    try:
        table = read_table(table_path)
    except (OSError, TableFormatError) as exc:
        logger.warning(f"Failed to load table artifact (path={table_path} error={exc})")
        stderr.write(f"Failed to load table artifact: {table_path}\n")
        return EXIT_USAGE

    rendered = DocumentationLookup(table).lookup(
        args.name, multiline_capable=not args.single_line
    )
    if rendered is None:
        suggestions = table.suggest(args.name)
        if suggestions:
            stderr.write(f"No documentation for {args.name}; did you mean: ")
            stderr.write(", ".join(suggestions) + "\n")
        return EXIT_NO_RESULT

    stdout.write(rendered + "\n")
    return EXIT_OK


def _write_errors(errors: list[SourceError], stderr: TextIO) -> None:
    """Write source errors to stderr.

    Args:
        errors: Files skipped during the build.
        stderr: Standard error stream.
    """
    for error in errors:
        stderr.write(f"source_error: {error}\n")


def _write_json(
    records: list[DocumentationRecord], errors: list[SourceError], stdout: TextIO
) -> None:
    """Write records and errors in JSON format.

    Args:
        records: Built records.
        errors: Recoverable source errors.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(table_payload(records=records, errors=errors), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_table(records: list[DocumentationRecord], stdout: TextIO) -> None:
    """Write records as a Rich table.

    Args:
        records: Built records.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    table = Table(show_header=True, show_lines=True, expand=True)
    table.add_column("key", ratio=TABLE_COLUMN_RATIOS["key"], overflow="fold")
    table.add_column(
        "synopsis", ratio=TABLE_COLUMN_RATIOS["synopsis"], overflow="fold"
    )
    table.add_column("example", ratio=TABLE_COLUMN_RATIOS["example"], overflow="fold")
    for record in records:
        table.add_row(
            Text(record.key), Text(record.synopsis or ""), Text(record.example or "")
        )
    console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
