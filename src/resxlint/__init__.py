"""resxlint - validation of parameterized, localized .resx resources.

Checks that every resource value is consistent with the parameter
declaration in its comment, that format specifiers suit the declared
parameter types, and that every translation agrees with the
neutral-language file.

Public API:
    validate_group - Validate a base file and its satellites from entries
    validate_files - Read and validate one resource group from disk
    validate_project - Discover and validate every group under some paths
    parse_comment - Resolve the mode a resource comment declares
    scan_placeholders - Parse the format items of a value
    check_specifier - Validate a format specifier for a parameter type
    read_resx / parse_resx - Read .resx entries

Data model:
    ResxEntry - One <data> entry as read from a file
    ResourceItem - Validated base entry (what a wrapper emitter consumes)
    Parameter, Suppressed, Enumeration, Parameterized, Plain - Comment modes

Submodules:
    resxlint.diagnostics - Codes, templates, sinks, results, formatting
    resxlint.syntax - Comment grammar and placeholder scanner
    resxlint.validation - Specifiers, entries, satellites, group pass
    resxlint.loading - Resx reader and group discovery
"""

from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticCollector,
    DiagnosticSink,
    ResxError,
    ResxFormatError,
    ValidationResult,
)
from .enums import Policy, SpecifierCheck, TypeCategory
from .loading import parse_resx, read_resx
from .model import (
    CommentMode,
    Enumeration,
    Parameter,
    Parameterized,
    Plain,
    ResourceItem,
    ResxEntry,
    Suppressed,
)
from .syntax import parse_comment, scan_placeholders
from .validation import (
    GroupResult,
    check_specifier,
    classify_type,
    validate_files,
    validate_group,
    validate_project,
    verify_satellite,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("resxlint")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CommentMode",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DiagnosticSink",
    "Enumeration",
    "GroupResult",
    "Parameter",
    "Parameterized",
    "Plain",
    "Policy",
    "ResourceItem",
    "ResxEntry",
    "ResxError",
    "ResxFormatError",
    "SpecifierCheck",
    "Suppressed",
    "TypeCategory",
    "ValidationResult",
    "__version__",
    "check_specifier",
    "classify_type",
    "parse_comment",
    "parse_resx",
    "read_resx",
    "scan_placeholders",
    "validate_files",
    "validate_group",
    "validate_project",
    "verify_satellite",
]
