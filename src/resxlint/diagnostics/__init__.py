"""Diagnostic system for resource validation.

Provides structured diagnostics with codes, severities and hints, the sink
protocol validators report through, and output formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, Severity
from .errors import ResxError, ResxFormatError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import CallbackSink, DiagnosticCollector, DiagnosticSink, ValidationResult

__all__ = [
    "CallbackSink",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DiagnosticFormatter",
    "DiagnosticSink",
    "ErrorTemplate",
    "OutputFormat",
    "ResxError",
    "ResxFormatError",
    "Severity",
    "ValidationResult",
]
