"""Format specifier validation.

Decides whether the text after ':' in a format item would format a value of
the declared parameter type. Each type category has a small hand-written
grammar; no platform formatter is invoked, so the answer depends only on
(type, specifier).

Type names are matched after stripping a trailing '?' and all whitespace.
Bare names ("int"), CLR names ("Int32") and namespace-qualified names
("System.Int32") resolve through one table. Unknown types are assumed to be
enumerations.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from resxlint.constants import (
    DATE_TIME_OFFSET_STANDARD_FORMATS,
    DATE_TIME_STANDARD_FORMATS,
    DURATION_STANDARD_FORMATS,
    ENUM_FORMATS,
    GUID_FORMATS,
    MAX_DURATION_CLOCK_DIGITS,
    MAX_DURATION_DAY_DIGITS,
    MAX_FRACTION_DIGITS,
    MAX_NUMERIC_PRECISION,
    NUMERIC_STANDARD_FORMATS,
)
from resxlint.enums import SpecifierCheck, TypeCategory

__all__ = [
    "check_specifier",
    "classify_type",
    "normalize_type_name",
]

# ============================================================================
# TYPE CLASSIFICATION
# ============================================================================

_NUMERIC_TYPES: tuple[str, ...] = (
    "byte", "sbyte", "short", "ushort", "int", "uint", "long", "ulong",
    "float", "double", "decimal",
    "Byte", "SByte", "Int16", "UInt16", "Int32", "UInt32", "Int64", "UInt64",
    "Single", "Double", "Decimal",
    "BigInteger", "Numerics.BigInteger",
)  # fmt: skip

_TYPE_CATEGORIES: dict[str, TypeCategory] = {
    "string": TypeCategory.TEXT,
    "String": TypeCategory.TEXT,
    "DateTime": TypeCategory.DATE_TIME,
    "DateTimeOffset": TypeCategory.DATE_TIME_OFFSET,
    "Guid": TypeCategory.GUID,
    "TimeSpan": TypeCategory.DURATION,
    **dict.fromkeys(_NUMERIC_TYPES, TypeCategory.NUMERIC),
}

_SYSTEM_PREFIX = "System."

_WHITESPACE: re.Pattern[str] = re.compile(r"\s+")


def normalize_type_name(type_name: str) -> str:
    """Remove whitespace and a trailing nullable marker.

    Example:
        >>> normalize_type_name(" System . Int32 ? ")
        'System.Int32'
    """
    return _WHITESPACE.sub("", type_name).removesuffix("?")


def classify_type(type_name: str) -> TypeCategory:
    """Resolve the formatting category of a declared parameter type.

    Args:
        type_name: Type as written in the comment ("int", "System.DateTime?")

    Returns:
        TypeCategory; ENUM_LIKE for any type not in the built-in table

    Example:
        >>> classify_type("System.Int64")
        <TypeCategory.NUMERIC: 'numeric'>
        >>> classify_type("MyEnum")
        <TypeCategory.ENUM_LIKE: 'enum_like'>
    """
    name = normalize_type_name(type_name)
    category = _TYPE_CATEGORIES.get(name)
    if category is None and name.startswith(_SYSTEM_PREFIX):
        qualified = name.removeprefix(_SYSTEM_PREFIX)
        # Keyword aliases are never namespace-qualified ("System.int").
        if qualified[:1].isupper():
            category = _TYPE_CATEGORIES.get(qualified)
    return category if category is not None else TypeCategory.ENUM_LIKE


# ============================================================================
# CUSTOM PATTERN HELPERS
# ============================================================================


def _run_length(pattern: str, pos: int) -> int:
    """Length of the run of identical characters starting at pos."""
    end = pos
    while end < len(pattern) and pattern[end] == pattern[pos]:
        end += 1
    return end - pos


def _skip_quoted(pattern: str, pos: int) -> int | None:
    """Skip a quoted literal starting at the quote character at pos.

    Backslash escapes the next character inside the literal.

    Returns:
        Position after the closing quote, or None if the literal never closes
    """
    quote = pattern[pos]
    pos += 1
    while pos < len(pattern):
        char = pattern[pos]
        if char == "\\":
            pos += 2
            continue
        if char == quote:
            return pos + 1
        pos += 1
    return None


# ============================================================================
# PER-CATEGORY GRAMMARS
# ============================================================================


def _check_date_time_pattern(pattern: str, standard: frozenset[str]) -> bool:
    if len(pattern) == 1:
        return pattern in standard

    pos = 0
    while pos < len(pattern):
        char = pattern[pos]
        match char:
            case "f" | "F":
                run = _run_length(pattern, pos)
                if run > MAX_FRACTION_DIGITS:
                    return False
                pos += run
            case "'" | '"':
                end = _skip_quoted(pattern, pos)
                if end is None:
                    return False
                pos = end
            case "%":
                if pos + 1 >= len(pattern) or pattern[pos + 1] == "%":
                    return False
                pos += 1
            case "\\":
                if pos + 1 >= len(pattern):
                    return False
                pos += 2
            case _:
                # Pattern letters and literal characters alike.
                pos += 1
    return True


# Standard numeric format: one letter and an optional precision.
_STANDARD_NUMERIC: re.Pattern[str] = re.compile(r"(?P<letter>[A-Za-z])(?P<precision>[0-9]*)")


def _check_numeric(specifier: str) -> bool:
    standard = _STANDARD_NUMERIC.fullmatch(specifier)
    if standard is None:
        # Custom numeric patterns accept any text.
        return True
    if standard.group("letter") not in NUMERIC_STANDARD_FORMATS:
        return False
    precision = standard.group("precision")
    return not precision or int(precision) <= MAX_NUMERIC_PRECISION


_DURATION_LIMITS: dict[str, int] = {
    "d": MAX_DURATION_DAY_DIGITS,
    "h": MAX_DURATION_CLOCK_DIGITS,
    "m": MAX_DURATION_CLOCK_DIGITS,
    "s": MAX_DURATION_CLOCK_DIGITS,
    "f": MAX_FRACTION_DIGITS,
    "F": MAX_FRACTION_DIGITS,
}


def _check_duration(specifier: str) -> bool:
    if len(specifier) == 1:
        return specifier in DURATION_STANDARD_FORMATS

    pos = 0
    while pos < len(specifier):
        char = specifier[pos]
        if char in _DURATION_LIMITS:
            run = _run_length(specifier, pos)
            if run > _DURATION_LIMITS[char]:
                return False
            pos += run
        elif char in "'\"":
            end = _skip_quoted(specifier, pos)
            if end is None:
                return False
            pos = end
        elif char == "%":
            # "%" marks the next token as a one-character custom pattern.
            if pos + 1 >= len(specifier) or specifier[pos + 1] not in _DURATION_LIMITS:
                return False
            pos += 1
        elif char == "\\":
            if pos + 1 >= len(specifier):
                return False
            pos += 2
        else:
            # Durations have no unquoted literal characters.
            return False
    return True


def check_specifier(type_name: str, specifier: str) -> SpecifierCheck:
    """Validate a format specifier for a declared parameter type.

    Args:
        type_name: Declared parameter type
        specifier: Text after ':' in a format item (never empty)

    Returns:
        VALID or INVALID; VALID_WITH_WARNING for text parameters, where a
        specifier is accepted but has no effect

    Example:
        >>> check_specifier("DateTime", "dd MMMM yyyy")
        <SpecifierCheck.VALID: 'valid'>
        >>> check_specifier("Guid", "k")
        <SpecifierCheck.INVALID: 'invalid'>
        >>> check_specifier("string", "x")
        <SpecifierCheck.VALID_WITH_WARNING: 'valid_with_warning'>
    """
    if not specifier:
        return SpecifierCheck.INVALID

    match classify_type(type_name):
        case TypeCategory.TEXT:
            return SpecifierCheck.VALID_WITH_WARNING
        case TypeCategory.DATE_TIME:
            valid = _check_date_time_pattern(specifier, DATE_TIME_STANDARD_FORMATS)
        case TypeCategory.DATE_TIME_OFFSET:
            valid = _check_date_time_pattern(specifier, DATE_TIME_OFFSET_STANDARD_FORMATS)
        case TypeCategory.NUMERIC:
            valid = _check_numeric(specifier)
        case TypeCategory.GUID:
            valid = specifier in GUID_FORMATS
        case TypeCategory.DURATION:
            valid = _check_duration(specifier)
        case TypeCategory.ENUM_LIKE:
            valid = specifier in ENUM_FORMATS

    return SpecifierCheck.VALID if valid else SpecifierCheck.INVALID
