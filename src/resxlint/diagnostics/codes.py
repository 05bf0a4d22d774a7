"""Diagnostic codes and data structures.

Defines error codes, severities, and the diagnostic record passed to sinks.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Severity",
]


class Severity(StrEnum):
    """Diagnostic severity.

    Inherits from ``StrEnum`` so that formatted output and JSON receive plain
    strings ("error", "warning") rather than an enum repr.
    """

    ERROR = "error"
    WARNING = "warning"


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Structural errors (malformed container or entry)
        2000-2999: Comment grammar errors (bad parameter declarations)
        3000-3999: Placeholder syntax errors (malformed {...} sequences)
        4000-4999: Consistency errors (index ranges, specifiers, variants,
                   cross-file mismatches)
        5000-5999: Policy diagnostics (error or warning depending on policy,
                   meaningless specifiers, orphan translations)
    """

    # Structural errors (1000-1999)
    ROOT_ELEMENT_INVALID = 1001
    RESOURCE_NAME_MISSING = 1002
    RESOURCE_VALUE_MISSING = 1003
    RESOURCE_VALUE_DUPLICATED = 1004
    RESOURCE_COMMENT_DUPLICATED = 1005
    UNEXPECTED_NODE = 1006
    INCLUDE_VALUE_CORRUPTED = 1007
    RESOURCE_NAME_DUPLICATED = 1008
    FILE_UNREADABLE = 1009

    # Comment grammar errors (2000-2999)
    BAD_PARAMETER_DECLARATION = 2001
    EMPTY_PARAMETER_DECLARATION = 2002

    # Placeholder syntax errors (3000-3999)
    INVALID_FORMAT_ITEM = 3001

    # Consistency errors (4000-4999)
    VALUE_NOT_IN_VARIANTS = 4001
    PLACEHOLDER_COUNT_MISMATCH = 4002
    PLACEHOLDER_NOT_USED = 4003
    FORMAT_ITEMS_MISSING = 4004
    INVALID_FORMAT_SPECIFIER = 4005
    SATELLITE_VALUE_NOT_IN_VARIANTS = 4006
    SATELLITE_TYPE_MISMATCH = 4007

    # Policy diagnostics (5000-5999)
    PARAMETERS_DECLARATION_MISSING = 5001
    SATELLITE_PLACEHOLDER_MISMATCH = 5002
    SPECIFIER_ON_TEXT = 5003
    SATELLITE_ORPHAN_RESOURCE = 5004

    @property
    def label(self) -> str:
        """Short code used in build-log output: RSX4001."""
        return f"RSX{self.value}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description (without file or resource prefix)
        resource: Name of the resource entry (or XML node) the diagnostic is about
        severity: Error or warning; sinks may override via the channel used
        file: File the diagnostic is attributed to, filled in by the sink
        hint: Suggestion for fixing the problem
    """

    code: DiagnosticCode
    message: str
    resource: str | None = None
    severity: Severity = Severity.ERROR
    file: str | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable description prefixed with the resource name."""
        if self.resource:
            return f"{self.resource}: {self.message}"
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a build-log line.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            Strings.resx(1,1): error RSX4001: greeting: provided value 'b' ...

        Returns:
            Formatted diagnostic line
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
