"""Diagnostic sinks and the unified validation result.

Diagnostics flow outward through two channels, error and warning, owned by
the caller. Accumulation is threaded explicitly: every validation pass
receives a sink (or creates a fresh DiagnosticCollector) instead of touching
module-level counters, so independent resource groups can be validated in
parallel and merged afterward.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol

from .codes import Diagnostic, Severity

__all__ = [
    "CallbackSink",
    "DiagnosticCollector",
    "DiagnosticSink",
    "ValidationResult",
]


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable snapshot of the diagnostics produced by a validation pass.

    Attributes:
        errors: Error diagnostics in report order
        warnings: Warning diagnostics in report order

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[Diagnostic, ...] = ()
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Check if validation passed. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Errors followed by warnings."""
        return self.errors + self.warnings

    @staticmethod
    def valid() -> ValidationResult:
        """Create a result with no errors or warnings."""
        return ValidationResult()

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results, keeping the order within each.

        Args:
            other: Result appended after this one

        Returns:
            New ValidationResult with both sets of diagnostics
        """
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def for_file(self, file: str) -> ValidationResult:
        """Restrict the result to diagnostics attributed to one file."""
        return ValidationResult(
            errors=tuple(d for d in self.errors if d.file == file),
            warnings=tuple(d for d in self.warnings if d.file == file),
        )


# ============================================================================
# SINKS
# ============================================================================


class DiagnosticSink(Protocol):
    """Destination for diagnostics produced by validators.

    The channel decides the severity: a diagnostic sent through warning()
    is a warning even if its template defaults to error, which is how
    policy-gated diagnostics are downgraded.
    """

    @property
    def error_count(self) -> int:
        """Number of errors received so far."""
        ...

    def error(self, file: str | None, diagnostic: Diagnostic) -> None:
        """Report an error attributed to `file`."""
        ...

    def warning(self, file: str | None, diagnostic: Diagnostic) -> None:
        """Report a warning attributed to `file`."""
        ...


class DiagnosticCollector:
    """Accumulating sink; one instance per resource group.

    Not thread-safe: create one per group and merge the results.

    Example:
        >>> sink = DiagnosticCollector()
        >>> sink.error("Strings.resx", ErrorTemplate.resource_name_missing())
        >>> sink.result().error_count
        1
    """

    __slots__ = ("_errors", "_warnings")

    def __init__(self) -> None:
        """Initialize an empty collector."""
        self._errors: list[Diagnostic] = []
        self._warnings: list[Diagnostic] = []

    @property
    def error_count(self) -> int:
        """Number of errors received so far."""
        return len(self._errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings received so far."""
        return len(self._warnings)

    def error(self, file: str | None, diagnostic: Diagnostic) -> None:
        """Record an error."""
        self._errors.append(replace(diagnostic, file=file, severity=Severity.ERROR))

    def warning(self, file: str | None, diagnostic: Diagnostic) -> None:
        """Record a warning."""
        self._warnings.append(replace(diagnostic, file=file, severity=Severity.WARNING))

    def result(self) -> ValidationResult:
        """Snapshot the accumulated diagnostics."""
        return ValidationResult(errors=tuple(self._errors), warnings=tuple(self._warnings))


class CallbackSink:
    """Adapter forwarding diagnostics to two caller-owned callables.

    Each callable receives the file and the diagnostic text
    ("<resource>: <message>"), matching a build task's error/warning logger.

    Attributes:
        on_error: Called as on_error(file, message)
        on_warning: Called as on_warning(file, message)
    """

    __slots__ = ("_error_count", "on_error", "on_warning", "warning_count")

    def __init__(
        self,
        on_error: Callable[[str | None, str], None],
        on_warning: Callable[[str | None, str], None],
    ) -> None:
        """Initialize CallbackSink.

        Args:
            on_error: Error callback
            on_warning: Warning callback
        """
        self.on_error = on_error
        self.on_warning = on_warning
        self._error_count = 0
        self.warning_count = 0

    @property
    def error_count(self) -> int:
        """Number of errors forwarded so far."""
        return self._error_count

    def error(self, file: str | None, diagnostic: Diagnostic) -> None:
        """Forward an error."""
        self._error_count += 1
        self.on_error(file, str(diagnostic))

    def warning(self, file: str | None, diagnostic: Diagnostic) -> None:
        """Forward a warning."""
        self.warning_count += 1
        self.on_warning(file, str(diagnostic))
