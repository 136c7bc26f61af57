"""jsoncompare CLI.

Entry point for the ``jsoncompare`` command-line tool.

Usage:
    jsoncompare <file1> <file2> [filteredFieldsFile] [--format xlsx|json|text]
                [--output-dir DIR] [--sheet-name NAME] [--missing-text TEXT]
                [--log-level LEVEL]

file1 is the baseline (ComparedValue column), file2 the comparison (Value
column). The spreadsheet is named after file2's base name.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, NoReturn

from .core.json_diff import json_diff
from .core.types import MISSING, DifferenceRecord
from .errors import ExportError, InputError
from .export import ExportOptions, output_path_for, write_workbook
from .loader import read_filter_file, read_json_file
from .version import JSONCOMPARE_VERSION

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def get_logging_level(level_str: str) -> int:
    """Map a level name to its logging constant, WARNING if unknown."""
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.WARNING)


def _configure_logging(level_str: str) -> None:
    logging.basicConfig(
        level=get_logging_level(level_str),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Text / JSON formatters
# ---------------------------------------------------------------------------


def _compact(value: Any, missing_text: str) -> str:
    if value is MISSING:
        return missing_text
    text = json.dumps(value, ensure_ascii=False)
    if len(text) > 40:
        text = text[:37] + "..."
    return text


def _format_text(records: List[DifferenceRecord], missing_text: str) -> str:
    if not records:
        return "No differences."
    lines = [f"{len(records)} difference(s):"]
    for record in records:
        old = _compact(record.compared_value, missing_text)
        new = _compact(record.value, missing_text)
        lines.append(f"  {record.field or '<root>'}: {old} -> {new}")
    return "\n".join(lines)


def _format_json(records: List[DifferenceRecord], missing_text: str) -> str:
    def default(value: Any) -> Any:
        if value is MISSING:
            return missing_text
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )

    return json.dumps(
        [r.to_dict() for r in records], indent=2, ensure_ascii=False, default=default
    )


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1 rather than argparse's 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _cmd_compare(args: argparse.Namespace) -> None:
    try:
        options = ExportOptions(
            sheet_name=args.sheet_name, missing_text=args.missing_text
        )
    except ValueError as e:
        _fail(str(e))

    try:
        left = read_json_file(args.file1)
        right = read_json_file(args.file2)
        filters = []
        if args.filtered_fields:
            filters = read_filter_file(args.filtered_fields)
    except InputError as e:
        _fail(str(e))

    records = json_diff(left, right, filters)
    logger.info(
        "Compared %s against %s: %d difference(s)", args.file1, args.file2, len(records)
    )

    if args.format == "json":
        print(_format_json(records, options.missing_text))
        return
    if args.format == "text":
        print(_format_text(records, options.missing_text))
        return

    out = output_path_for(args.file2, args.output_dir, options.extension)
    try:
        write_workbook(records, out, options)
    except ExportError as e:
        _fail(str(e))
    print(f"Excel file generated: {out}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    parser = _ArgumentParser(
        prog="jsoncompare",
        description="Compare two JSON documents and export the differences",
    )
    parser.add_argument("file1", help="Baseline JSON document")
    parser.add_argument("file2", help="JSON document compared against the baseline")
    parser.add_argument(
        "filtered_fields",
        nargs="?",
        metavar="filteredFieldsFile",
        help="File with one path substring per line; matching paths are skipped",
    )
    parser.add_argument(
        "--format",
        choices=["xlsx", "json", "text"],
        default="xlsx",
        help="Output format (default: xlsx)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the spreadsheet (default: current directory)",
    )
    parser.add_argument(
        "--sheet-name",
        default="Differences",
        help="Worksheet title (default: Differences)",
    )
    parser.add_argument(
        "--missing-text",
        default="<missing>",
        help="Cell text for an absent key or index (default: <missing>)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {JSONCOMPARE_VERSION}"
    )

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    _cmd_compare(args)


if __name__ == "__main__":
    main()
