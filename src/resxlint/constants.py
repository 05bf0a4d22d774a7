"""Shared constants for resxlint.

Centralized limits and format-letter tables used by the placeholder
scanner and the specifier validator. Placing them here avoids circular
imports between the syntax and validation packages.

Constants are grouped by domain:
- Format item limits: bounds on placeholder indexes and alignment widths
- Specifier limits: repetition bounds of custom date/time and duration patterns
- Standard format letters: accepted single-letter specifiers per type category
- Emission: wrapper comment extraction

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Format item limits
    "MAX_FORMAT_INDEX",
    # Specifier limits
    "MAX_NUMERIC_PRECISION",
    "MAX_FRACTION_DIGITS",
    "MAX_DURATION_DAY_DIGITS",
    "MAX_DURATION_CLOCK_DIGITS",
    # Standard format letters
    "DATE_TIME_STANDARD_FORMATS",
    "DATE_TIME_OFFSET_STANDARD_FORMATS",
    "NUMERIC_STANDARD_FORMATS",
    "GUID_FORMATS",
    "DURATION_STANDARD_FORMATS",
    "ENUM_FORMATS",
    # Emission
    "STRING_TYPE",
    "SUMMARY_MAX_LINES",
]

# ============================================================================
# FORMAT ITEM LIMITS
# ============================================================================

# Exclusive upper bound for placeholder indexes and alignment widths.
# Composite formatting rejects a digit run once it reaches this value.
MAX_FORMAT_INDEX: int = 1_000_000

# ============================================================================
# SPECIFIER LIMITS
# ============================================================================

# Largest precision accepted after a standard numeric format letter ("D999999999").
MAX_NUMERIC_PRECISION: int = 999_999_999

# Longest run of "f" or "F" in a custom date/time or duration pattern.
MAX_FRACTION_DIGITS: int = 7

# Longest run of "d" in a custom duration pattern.
MAX_DURATION_DAY_DIGITS: int = 8

# Longest run of "h", "m" or "s" in a custom duration pattern.
MAX_DURATION_CLOCK_DIGITS: int = 2

# ============================================================================
# STANDARD FORMAT LETTERS
# ============================================================================

DATE_TIME_STANDARD_FORMATS: frozenset[str] = frozenset("dDfFgGmMoOrRstTuUyY")

# "U" (universal full date/time) has no meaning for an offset-aware value.
DATE_TIME_OFFSET_STANDARD_FORMATS: frozenset[str] = DATE_TIME_STANDARD_FORMATS - {"U"}

# Standard numeric letters valid for the integral sample value.
NUMERIC_STANDARD_FORMATS: frozenset[str] = frozenset("bBcCdDeEfFgGnNpPxX")

GUID_FORMATS: frozenset[str] = frozenset("nNdDbBpPxX")

DURATION_STANDARD_FORMATS: frozenset[str] = frozenset("ctTgG")

ENUM_FORMATS: frozenset[str] = frozenset("GgFfDdXx")

# ============================================================================
# EMISSION
# ============================================================================

# Declared type of every non-include resource entry.
STRING_TYPE: str = "string"

# Number of value lines copied into a wrapper's documentation comment.
SUMMARY_MAX_LINES: int = 3
