"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    MSBUILD = "msbuild"  # Build-log line understood by IDE error lists (default)
    SIMPLE = "simple"  # Single-line format without location
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (msbuild, simple, json)
        sanitize: Truncate messages to prevent dumping whole resource values
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.format_items_missing("greeting")
        >>> print(formatter.format(replace(diagnostic, file="Strings.resx")))
        Strings.resx(1,1): error RSX4004: greeting: no format items are used ...

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        RSX4004: greeting: no format items are used ...
    """

    output_format: OutputFormat = OutputFormat.MSBUILD
    sanitize: bool = False
    max_content_length: int = 200

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.MSBUILD:
                return self._format_msbuild(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_msbuild(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as a build-log line.

        Example output:
            Strings.resx(1,1): error RSX2001: greeting: bad parameter declaration: int_i
        """
        location = f"{diagnostic.file}(1,1): " if diagnostic.file else ""
        message = self._maybe_sanitize(str(diagnostic))
        return f"{location}{diagnostic.severity} {diagnostic.code.label}: {message}"

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            RSX2001: greeting: bad parameter declaration: int_i
        """
        return f"{diagnostic.code.label}: {self._maybe_sanitize(str(diagnostic))}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "BAD_PARAMETER_DECLARATION", "code_value": 2001, ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": str(diagnostic.severity),
        }

        if diagnostic.file:
            data["file"] = diagnostic.file

        if diagnostic.resource:
            data["resource"] = diagnostic.resource

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
