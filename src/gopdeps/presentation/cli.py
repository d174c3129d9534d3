"""gopdeps command line.

Scans a Go / Go+ module tree and prints its canonical import set.

Exit codes:
    0  every file parsed
    1  usage error, module not found, or --fail-fast abort
    2  scan completed but some files failed to parse
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gopdeps.application.reporters import ConsoleConfig, ConsoleReporter, JsonReporter, PlainTextReporter
from gopdeps.application.services.scanner import scan_module
from gopdeps.domain.exceptions.base import GopDepsError
from gopdeps.domain.model.configuration import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS, ScanConfig
from gopdeps.domain.model.module import Module
from gopdeps.domain.ports.reporter import ReporterProtocol
from gopdeps.infrastructure.logging_config import LEVEL_NAMES, resolve_log_level, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FILE_FAILURES = 2


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gopdeps",
        description="List the canonical package imports of a Go / Go+ module.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gopdeps .                          # Imports of the module in the current directory
  gopdeps . --group-by-kind          # Split into standard / module / external
  gopdeps ./cmd -f json -o deps.json # JSON output to file
  gopdeps . --module example.com/app # Skip go.mod lookup
  gopdeps . --ext .gop --no-tests    # Only Go+ files, no _test files
        """,
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory to scan (default: current directory)",
    )

    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "console"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--module",
        type=str,
        default=None,
        help="Module path to resolve relative imports against (default: read from gop.mod/go.mod)",
    )

    parser.add_argument(
        "--ext",
        nargs="+",
        default=None,
        help="File extensions to scan (default: .go .gop)",
    )

    parser.add_argument(
        "--exclude-dir",
        nargs="+",
        default=None,
        help="Additional directory names to skip",
    )

    parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Only scan files directly inside root",
    )

    parser.add_argument(
        "--no-tests",
        action="store_true",
        help="Skip *_test files",
    )

    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first file that fails to parse",
    )

    parser.add_argument(
        "--group-by-kind",
        action="store_true",
        help="Group text output into standard, module and external imports",
    )

    parser.add_argument(
        "--log-level",
        choices=LEVEL_NAMES,
        type=str.upper,
        default=None,
        help="Log level (default: $GOPDEPS_LOG_LEVEL or WARNING)",
    )

    return parser.parse_args(args)


def build_config(parsed: argparse.Namespace) -> ScanConfig:
    """ScanConfig from parsed arguments.

    Raises:
        ValueError: If an option value is invalid
    """
    extensions = DEFAULT_EXTENSIONS
    if parsed.ext:
        extensions = frozenset(ext if ext.startswith(".") else f".{ext}" for ext in parsed.ext)

    exclude_dirs = DEFAULT_EXCLUDE_DIRS
    if parsed.exclude_dir:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS | frozenset(parsed.exclude_dir)

    return ScanConfig(
        extensions=extensions,
        exclude_dirs=exclude_dirs,
        include_tests=not parsed.no_tests,
        recursive=not parsed.no_recursive,
        fail_fast=parsed.fail_fast,
    )


def build_reporter(parsed: argparse.Namespace) -> ReporterProtocol:
    """Reporter for the requested output format."""
    if parsed.format == "json":
        return JsonReporter()
    if parsed.format == "console":
        to_terminal = parsed.output is None and sys.stdout.isatty()
        return ConsoleReporter(ConsoleConfig(force_terminal=to_terminal))
    return PlainTextReporter(group_by_kind=parsed.group_by_kind)


def main(args: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parsed = parse_args(args)
    setup_logging(resolve_log_level(parsed.log_level))

    root = Path(parsed.root)
    if not root.is_dir():
        print(f"Error: '{parsed.root}' is not a directory", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = build_config(parsed)
        module = Module(path=parsed.module, dir=root) if parsed.module else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        result = scan_module(root, config, module=module)
    except GopDepsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    output = build_reporter(parsed).report(result)

    if parsed.output:
        output_path = Path(parsed.output)
        try:
            output_path.write_text(f"{output}\n" if output else "", encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.info("output written to %s", output_path)
    elif output:
        print(output)

    if not result.passed:
        print(f"{len(result.failures)} file(s) failed to parse", file=sys.stderr)
        return EXIT_FILE_FAILURES
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
