"""Resource validation package.

Specifier grammars, base-entry validation, satellite verification and the
per-group pass that ties them together.

Python 3.13+.
"""

from .entry import (
    check_format_specifiers,
    parse_include_value,
    validate_entry,
    validate_include_entry,
    validate_string_entry,
)
from .resource import GroupResult, validate_files, validate_group, validate_project
from .satellite import verify_satellite
from .specifiers import check_specifier, classify_type, normalize_type_name

__all__ = [
    "GroupResult",
    "check_format_specifiers",
    "check_specifier",
    "classify_type",
    "normalize_type_name",
    "parse_include_value",
    "validate_entry",
    "validate_files",
    "validate_group",
    "validate_include_entry",
    "validate_project",
    "validate_string_entry",
    "verify_satellite",
]
