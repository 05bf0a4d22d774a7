"""resxlint command-line interface.

Validates every resource group found under the given paths and prints one
build-log line per diagnostic to stderr, as soon as it is reported.

Exit Codes:
    0: No errors (warnings allowed)
    1: At least one error
    2: No .resx files found

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from resxlint.diagnostics import Diagnostic, DiagnosticFormatter, OutputFormat, Severity
from resxlint.enums import Policy
from resxlint.validation import validate_project

__all__ = ["main"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


class _PrintingSink:
    """Prints each diagnostic to stderr when it is reported."""

    __slots__ = ("_error_count", "formatter", "warning_count")

    def __init__(self, formatter: DiagnosticFormatter) -> None:
        self.formatter = formatter
        self._error_count = 0
        self.warning_count = 0

    @property
    def error_count(self) -> int:
        return self._error_count

    def error(self, file: str | None, diagnostic: Diagnostic) -> None:
        self._error_count += 1
        self._print(replace(diagnostic, file=file, severity=Severity.ERROR))

    def warning(self, file: str | None, diagnostic: Diagnostic) -> None:
        self.warning_count += 1
        self._print(replace(diagnostic, file=file, severity=Severity.WARNING))

    def _print(self, diagnostic: Diagnostic) -> None:
        print(self.formatter.format(diagnostic), file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resxlint",
        description="Validate parameterized and localized .resx resources.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate every resource group in a project:
  resxlint src/MyApp/Resources

  # Report undeclared parameters as warnings while migrating:
  resxlint --lenient Strings.resx Strings.de.resx

  # Machine-readable output:
  resxlint --format json src/
""",
    )
    parser.add_argument("paths", nargs="+", type=Path, help=".resx files or directories")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Downgrade undeclared parameters and satellite mismatches to warnings",
    )
    parser.add_argument(
        "--format",
        choices=[str(f) for f in OutputFormat],
        default=str(OutputFormat.MSBUILD),
        help="Diagnostic output format (default: msbuild)",
    )
    parser.add_argument(
        "--max-message-length",
        type=int,
        metavar="N",
        help="Truncate diagnostic messages longer than N characters",
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="Log progress (-vv for debug)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run resxlint.

    Args:
        argv: Arguments without the program name; None reads sys.argv

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=_LOG_LEVELS[min(args.verbose, len(_LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    policy = Policy.LENIENT if args.lenient else Policy.STRICT
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))
    if args.max_message_length is not None:
        formatter = replace(formatter, sanitize=True, max_content_length=args.max_message_length)
    sink = _PrintingSink(formatter)

    results = validate_project(args.paths, policy=policy, sink=sink)
    if not results:
        print("resxlint: no .resx files found", file=sys.stderr)
        return 2

    logger.debug("Validated %d resource group(s)", len(results))
    print(
        f"resxlint completed with {sink.error_count} errors and {sink.warning_count} warnings.",
        file=sys.stderr,
    )
    return 1 if sink.error_count else 0


if __name__ == "__main__":
    sys.exit(main())
