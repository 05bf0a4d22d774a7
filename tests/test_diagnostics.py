"""Tests for diagnostic records, sinks and formatting.

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import replace

import pytest

from resxlint.diagnostics import (
    CallbackSink,
    Diagnostic,
    DiagnosticCode,
    DiagnosticCollector,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    ResxError,
    ResxFormatError,
    Severity,
    ValidationResult,
)

# ============================================================================
# CODES AND RECORDS
# ============================================================================


class TestDiagnosticCode:
    """Numeric code ranges and labels."""

    def test_label(self) -> None:
        """Labels combine the prefix and the number."""
        assert DiagnosticCode.VALUE_NOT_IN_VARIANTS.label == "RSX4001"

    def test_codes_are_unique(self) -> None:
        """No two codes share a number."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.ROOT_ELEMENT_INVALID, 1000),
            (DiagnosticCode.BAD_PARAMETER_DECLARATION, 2000),
            (DiagnosticCode.INVALID_FORMAT_ITEM, 3000),
            (DiagnosticCode.SATELLITE_TYPE_MISMATCH, 4000),
            (DiagnosticCode.SATELLITE_ORPHAN_RESOURCE, 5000),
        ],
    )
    def test_category_ranges(self, code: DiagnosticCode, low: int) -> None:
        """Each category owns one thousand."""
        assert low <= code.value < low + 1000


class TestDiagnostic:
    """String form of a diagnostic."""

    def test_str_with_resource(self) -> None:
        """The resource name prefixes the message."""
        diagnostic = ErrorTemplate.bad_parameter_declaration("greeting", "int_i")

        assert str(diagnostic) == "greeting: bad parameter declaration: int_i"

    def test_str_without_resource(self) -> None:
        """Without a resource only the message is shown."""
        assert str(Diagnostic(DiagnosticCode.FILE_UNREADABLE, "boom")) == "boom"

    def test_template_severities(self) -> None:
        """Warning templates default to warning severity."""
        assert ErrorTemplate.unexpected_node("a", "x").severity == Severity.WARNING
        assert ErrorTemplate.resource_value_missing("a").severity == Severity.ERROR

    def test_format_error(self) -> None:
        """format_error renders a build-log line."""
        diagnostic = replace(ErrorTemplate.format_items_missing("greeting"), file="Strings.resx")

        assert diagnostic.format_error().startswith(
            "Strings.resx(1,1): error RSX4004: greeting: no format items"
        )


# ============================================================================
# SINKS AND RESULTS
# ============================================================================


class TestDiagnosticCollector:
    """The accumulating sink."""

    def test_channel_sets_severity_and_file(self, collector: DiagnosticCollector) -> None:
        """An error template sent as a warning becomes a warning."""
        collector.warning("Strings.resx", ErrorTemplate.parameters_declaration_missing("a"))

        result = collector.result()
        [warning] = result.warnings
        assert warning.severity == Severity.WARNING
        assert warning.file == "Strings.resx"
        assert result.is_valid
        assert collector.warning_count == 1

    def test_order_preserved(self, collector: DiagnosticCollector) -> None:
        """Diagnostics keep the order they were reported in."""
        collector.error("S.resx", ErrorTemplate.resource_value_missing("first"))
        collector.error("S.resx", ErrorTemplate.resource_value_missing("second"))

        assert [d.resource for d in collector.result().errors] == ["first", "second"]
        assert collector.error_count == 2


class TestCallbackSink:
    """Forwarding to caller-owned callables."""

    def test_forwards_text_and_counts(self) -> None:
        """Callables receive the file and the diagnostic text."""
        received: list[tuple[str, str | None, str]] = []
        sink = CallbackSink(
            lambda file, message: received.append(("error", file, message)),
            lambda file, message: received.append(("warning", file, message)),
        )

        sink.error("S.resx", ErrorTemplate.include_value_corrupted("logo"))
        sink.warning(None, ErrorTemplate.unexpected_node("a", "extra"))

        assert received == [
            ("error", "S.resx", "logo: Structure of the value node is corrupted"),
            ("warning", None, "a: Unexpected node: extra"),
        ]
        assert sink.error_count == 1
        assert sink.warning_count == 1


class TestValidationResult:
    """Immutable result snapshots."""

    def test_valid(self) -> None:
        """The empty result is valid."""
        result = ValidationResult.valid()

        assert result.is_valid
        assert result.diagnostics == ()

    def test_merge_and_for_file(self) -> None:
        """Results merge in order and can be filtered by file."""
        first = DiagnosticCollector()
        first.error("A.resx", ErrorTemplate.resource_name_missing())
        second = DiagnosticCollector()
        second.error("B.resx", ErrorTemplate.resource_name_missing())
        second.warning("A.resx", ErrorTemplate.unexpected_node("x", "y"))

        merged = first.result().merge(second.result())

        assert [d.file for d in merged.errors] == ["A.resx", "B.resx"]
        only_a = merged.for_file("A.resx")
        assert only_a.error_count == 1
        assert only_a.warning_count == 1
        assert not only_a.is_valid


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Output formats."""

    DIAGNOSTIC = replace(
        ErrorTemplate.value_not_in_variants("a", "b", "(c, d)"), file="Strings.resx"
    )

    def test_msbuild(self) -> None:
        """Build-log lines carry file, severity and label."""
        assert DiagnosticFormatter().format(self.DIAGNOSTIC) == (
            "Strings.resx(1,1): error RSX4001: a: provided value 'b' is not in the "
            "list of allowed options: (c, d)"
        )

    def test_msbuild_without_file(self) -> None:
        """No location prefix without a file."""
        diagnostic = replace(self.DIAGNOSTIC, file=None, severity=Severity.WARNING)

        assert DiagnosticFormatter().format(diagnostic).startswith("warning RSX4001: a: ")

    def test_simple(self) -> None:
        """Simple output is the label and the text."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self.DIAGNOSTIC).startswith("RSX4001: a: provided value")

    def test_json(self) -> None:
        """JSON output is one object per diagnostic."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(self.DIAGNOSTIC))

        assert data["code"] == "VALUE_NOT_IN_VARIANTS"
        assert data["code_value"] == 4001
        assert data["severity"] == "error"
        assert data["file"] == "Strings.resx"
        assert data["resource"] == "a"
        assert "hint" not in data

    def test_sanitize(self) -> None:
        """Long messages are truncated when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(self.DIAGNOSTIC) == "RSX4001: a: provide..."


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Exceptions for unreadable input."""

    def test_error_from_diagnostic(self) -> None:
        """A diagnostic can be attached to an exception."""
        diagnostic = ErrorTemplate.file_unreadable("S.resx", "bad")
        error = ResxError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == "S.resx: Unable to read resource file: bad"

    def test_format_error_is_resx_error(self) -> None:
        """ResxFormatError keeps its path."""
        error = ResxFormatError("no element found", path="S.resx")

        assert isinstance(error, ResxError)
        assert error.path == "S.resx"
        assert error.diagnostic is None
