"""Placeholder scanner for composite format strings.

Parses the `{index[,alignment][:specifier]}` format items of a resource
value into a map from placeholder index to the specifiers used with it.
The scanner is independent of comments: it only answers "which indexes does
this value use, and with which specifiers".

Grammar (one left-to-right pass, no backtracking):

    value      := ( literal | "{{" | "}}" | item )*
    item       := "{" index spaces ( "," spaces "-"? width spaces )? ( ":" specifier )? "}"
    index      := digit+            (value < 1,000,000; no sign, no leading space)
    width      := digit+            (same bound)
    specifier  := [^{}]+            (ends at the first "}"; a raw "{" is rejected)

A "}" that does not close an item and is not doubled is an error. The first
malformed item stops the scan and is reported as a ScanError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from resxlint.constants import MAX_FORMAT_INDEX
from resxlint.syntax.cursor import Cursor, ParseResult

__all__ = [
    "PlaceholderMap",
    "ScanError",
    "ScanResult",
    "scan_placeholders",
]

# ASCII digits only; str.isdigit() accepts superscripts and other scripts.
_ASCII_DIGITS: str = "0123456789"

type PlaceholderMap = Mapping[int, frozenset[str] | None]


@dataclass(frozen=True, slots=True)
class ScanError:
    """First malformed sequence found in a value.

    Attributes:
        message: What the scanner expected
        position: Character offset where scanning stopped (0-indexed)
    """

    message: str
    position: int


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scanning one value.

    Attributes:
        placeholders: Index -> None (used without a specifier) or the set of
            every specifier text used with that index. Indexes collected
            before an error are kept for diagnostics.
        specifier_uses: Distinct (index, specifier) pairs in the order they
            first appear in the value
        error: First malformed sequence, None if the value is well-formed
    """

    placeholders: PlaceholderMap
    specifier_uses: tuple[tuple[int, str], ...] = ()
    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        """True if the whole value scanned without error."""
        return self.error is None

    @property
    def indexes(self) -> tuple[int, ...]:
        """Distinct placeholder indexes in ascending order."""
        return tuple(sorted(self.placeholders))

    @property
    def count(self) -> int:
        """Number of distinct placeholder indexes."""
        return len(self.placeholders)

    def first_missing(self, expected: int) -> int | None:
        """Smallest index in 0..expected-1 the value does not use.

        Example:
            >>> scan_placeholders("{2}{0}").first_missing(2)
            1
        """
        for index in range(expected):
            if index not in self.placeholders:
                return index
        return None

    def first_out_of_range(self, expected: int) -> int | None:
        """Smallest used index that is >= expected.

        Example:
            >>> scan_placeholders("{2}{0}{1}").first_out_of_range(2)
            2
        """
        for index in self.indexes:
            if index >= expected:
                return index
        return None

    def matches(self, expected: tuple[int, ...]) -> bool:
        """True if the distinct indexes are exactly `expected` (ascending).

        Example:
            >>> scan_placeholders("a{1}b{0}").matches((0, 1))
            True
        """
        return self.indexes == expected


@dataclass(frozen=True, slots=True)
class _FormatItem:
    """One parsed `{...}` item."""

    index: int
    specifier: str | None


def _read_number(cursor: Cursor) -> ParseResult[int] | None:
    """Read a digit run bounded below MAX_FORMAT_INDEX.

    Returns:
        ParseResult with the number, or None if there are no digits or the
        value reaches the bound.
    """
    value = 0
    start = cursor.pos
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS and value < MAX_FORMAT_INDEX:
        value = value * 10 + ord(cursor.current) - ord("0")
        cursor = cursor.advance()
    if cursor.pos == start or value >= MAX_FORMAT_INDEX:
        return None
    return ParseResult(value, cursor)


def _parse_item(cursor: Cursor) -> ParseResult[_FormatItem] | ScanError:
    """Parse a format item; `cursor` is just past the opening brace."""
    index = _read_number(cursor)
    if index is None:
        return ScanError(f"expected placeholder index below {MAX_FORMAT_INDEX}", cursor.pos)
    cursor = index.cursor.skip_spaces()

    after_comma = cursor.expect(",")
    if after_comma is not None:
        cursor = after_comma.skip_spaces()
        cursor = cursor.expect("-") or cursor
        width = _read_number(cursor)
        if width is None:
            return ScanError(f"expected alignment width below {MAX_FORMAT_INDEX}", cursor.pos)
        cursor = width.cursor.skip_spaces()

    specifier: str | None = None
    after_colon = cursor.expect(":")
    if after_colon is not None:
        cursor = after_colon
        while not cursor.is_eof and cursor.current != "}":
            if cursor.current == "{":
                return ScanError("unescaped '{' inside format specifier", cursor.pos)
            cursor = cursor.advance()
        if cursor.is_eof:
            return ScanError("format item is not closed with '}'", cursor.pos)
        specifier = after_colon.slice_to(cursor.pos)
        if not specifier:
            return ScanError("format specifier after ':' is empty", cursor.pos)

    closed = cursor.expect("}")
    if closed is None:
        return ScanError("expected '}' to close format item", cursor.pos)
    return ParseResult(_FormatItem(index.value, specifier), closed)


def scan_placeholders(value: str) -> ScanResult:
    """Scan a resource value for composite format items.

    Args:
        value: Raw resource value

    Returns:
        ScanResult with the placeholder map, and the first error if the
        value is malformed

    Example:
        >>> result = scan_placeholders("Found {0} items in {1:F2} seconds")
        >>> dict(result.placeholders)
        {0: None, 1: frozenset({'F2'})}
        >>> scan_placeholders("}").ok
        False
    """
    found: dict[int, set[str] | None] = {}
    uses: dict[tuple[int, str], None] = {}

    def _result(error: ScanError | None = None) -> ScanResult:
        placeholders = {
            index: None if specifiers is None else frozenset(specifiers)
            for index, specifiers in found.items()
        }
        return ScanResult(placeholders, tuple(uses), error)

    cursor = Cursor(value, 0)
    while not cursor.is_eof:
        match cursor.current:
            case "}":
                if cursor.peek(1) != "}":
                    return _result(ScanError("unexpected '}' (escape as '}}')", cursor.pos))
                cursor = cursor.advance(2)
            case "{" if cursor.peek(1) == "{":
                cursor = cursor.advance(2)
            case "{":
                parsed = _parse_item(cursor.advance())
                if isinstance(parsed, ScanError):
                    return _result(parsed)
                item = parsed.value
                if item.specifier is None:
                    found.setdefault(item.index, None)
                else:
                    specifiers = found.get(item.index)
                    if specifiers is None:
                        specifiers = found[item.index] = set()
                    specifiers.add(item.specifier)
                    uses.setdefault((item.index, item.specifier), None)
                cursor = parsed.cursor
            case _:
                cursor = cursor.advance()
    return _result()
