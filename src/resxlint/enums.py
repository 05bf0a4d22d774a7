"""Enumerations for resxlint type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Policy(StrEnum):
    """How strictly undeclared parameters and satellite mismatches are reported.

    StrEnum provides automatic string conversion: str(Policy.STRICT) == "strict"
    """

    STRICT = "strict"
    """Undeclared parameters and satellite count mismatches are errors."""

    LENIENT = "lenient"
    """Same conditions are downgraded to warnings (incremental migration)."""


class CommentModeKind(StrEnum):
    """Discriminator of the comment-declared mode of a resource entry.

    StrEnum provides automatic string conversion: str(CommentModeKind.PLAIN) == "plain"
    """

    SUPPRESSED = "suppressed"
    """Comment starts with '-': no structural checks."""

    ENUMERATION = "enumeration"
    """Comment starts with '!(a, b, c)': value is one of a closed set."""

    PARAMETERIZED = "parameterized"
    """Comment starts with '{int i, string s}': value is a format string."""

    PLAIN = "plain"
    """No structural declaration in the comment."""


class TypeCategory(StrEnum):
    """Formatting category of a declared parameter type.

    StrEnum provides automatic string conversion: str(TypeCategory.GUID) == "guid"
    """

    TEXT = "text"
    """string / System.String: specifiers are meaningless."""

    DATE_TIME = "date_time"
    """DateTime: standard and custom date/time patterns."""

    DATE_TIME_OFFSET = "date_time_offset"
    """DateTimeOffset: date/time patterns without the universal 'U' format."""

    NUMERIC = "numeric"
    """Integral and real number types, BigInteger."""

    GUID = "guid"
    """Guid: one of the N, D, B, P, X layouts."""

    DURATION = "duration"
    """TimeSpan: constant, general and custom duration patterns."""

    ENUM_LIKE = "enum_like"
    """Any other type: assumed to be an enumeration."""


class SpecifierCheck(StrEnum):
    """Outcome of validating one format specifier against a parameter type."""

    VALID = "valid"
    INVALID = "invalid"
    VALID_WITH_WARNING = "valid_with_warning"


__all__ = [
    "CommentModeKind",
    "Policy",
    "SpecifierCheck",
    "TypeCategory",
]
