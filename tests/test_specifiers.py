"""Tests for type classification and format specifier grammars.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from resxlint.enums import SpecifierCheck, TypeCategory
from resxlint.validation import check_specifier, classify_type, normalize_type_name

VALID = SpecifierCheck.VALID
INVALID = SpecifierCheck.INVALID


class TestClassifyType:
    """Declared type names resolve to a formatting category."""

    @pytest.mark.parametrize(
        ("type_name", "category"),
        [
            ("string", TypeCategory.TEXT),
            ("String", TypeCategory.TEXT),
            ("System.String", TypeCategory.TEXT),
            ("int", TypeCategory.NUMERIC),
            ("int?", TypeCategory.NUMERIC),
            ("Int32", TypeCategory.NUMERIC),
            ("System.Int32", TypeCategory.NUMERIC),
            (" System . Double ", TypeCategory.NUMERIC),
            ("decimal", TypeCategory.NUMERIC),
            ("BigInteger", TypeCategory.NUMERIC),
            ("System.Numerics.BigInteger", TypeCategory.NUMERIC),
            ("DateTime", TypeCategory.DATE_TIME),
            ("System.DateTime?", TypeCategory.DATE_TIME),
            ("DateTimeOffset", TypeCategory.DATE_TIME_OFFSET),
            ("Guid", TypeCategory.GUID),
            ("TimeSpan", TypeCategory.DURATION),
            ("MyEnum", TypeCategory.ENUM_LIKE),
            ("System.int", TypeCategory.ENUM_LIKE),
            ("MyApp.Level", TypeCategory.ENUM_LIKE),
        ],
    )
    def test_classify(self, type_name: str, category: TypeCategory) -> None:
        """Bare, CLR and namespace-qualified names share one table."""
        assert classify_type(type_name) is category

    def test_normalize_type_name(self) -> None:
        """Whitespace and the nullable marker are removed."""
        assert normalize_type_name("System . Guid ?") == "System.Guid"


class TestDateTimeSpecifiers:
    """Standard and custom date/time patterns."""

    @pytest.mark.parametrize(
        ("type_name", "specifier", "expected"),
        [
            ("DateTime", "dd MMMM yyyy", VALID),
            ("DateTime", "d", VALID),
            ("DateTime", "U", VALID),
            ("DateTime", "k", INVALID),
            ("DateTimeOffset", "O", VALID),
            ("DateTimeOffset", "U", INVALID),
            ("DateTime", "HH:mm:ss.fffffff", VALID),
            ("DateTime", "ss.ffffffff", INVALID),
            ("DateTime", "yyyy 'year'", VALID),
            ("DateTime", "yyyy 'year", INVALID),
            ("DateTime", "'it\\'s' yyyy", VALID),
            ("DateTime", "%d", VALID),
            ("DateTime", "%%", INVALID),
            ("DateTime", "yyyy\\", INVALID),
            ("DateTime", "yyyy\\y", VALID),
        ],
    )
    def test_date_time(self, type_name: str, specifier: str, expected: SpecifierCheck) -> None:
        """Single characters are standard formats, longer text is a pattern."""
        assert check_specifier(type_name, specifier) is expected


class TestNumericSpecifiers:
    """Standard letters with precision, custom patterns."""

    @pytest.mark.parametrize(
        ("specifier", "expected"),
        [
            ("d", VALID),
            ("g", VALID),
            ("f", VALID),
            ("N2", VALID),
            ("x8", VALID),
            ("C", VALID),
            ("D999999999", VALID),
            ("D1000000000", INVALID),
            ("k", INVALID),
            ("R", INVALID),
            ("0.00", VALID),
            ("#,##0", VALID),
            ("00%", VALID),
        ],
    )
    def test_numeric(self, specifier: str, expected: SpecifierCheck) -> None:
        """A letter plus digits is standard; anything else is custom."""
        assert check_specifier("int", specifier) is expected

    def test_qualified_type_uses_same_rules(self) -> None:
        """System.Decimal behaves like decimal."""
        assert check_specifier("System.Decimal", "N2") is VALID
        assert check_specifier("System.Decimal", "k") is INVALID


class TestGuidSpecifiers:
    """Guid accepts one of N, D, B, P, X."""

    @pytest.mark.parametrize(
        ("specifier", "expected"),
        [("d", VALID), ("P", VALID), ("n", VALID), ("k", INVALID), ("DD", INVALID)],
    )
    def test_guid(self, specifier: str, expected: SpecifierCheck) -> None:
        """Only single layout letters are accepted."""
        assert check_specifier("Guid", specifier) is expected


class TestDurationSpecifiers:
    """TimeSpan standard and custom patterns."""

    @pytest.mark.parametrize(
        ("specifier", "expected"),
        [
            ("g", VALID),
            ("c", VALID),
            ("%m' min.'", VALID),
            ("hh\\:mm\\:ss", VALID),
            ("dddddddd", VALID),
            ("ddddddddd", INVALID),
            ("hhh", INVALID),
            ("fffffff", VALID),
            ("z", INVALID),
            ("hh:mm", INVALID),
            ("'unclosed", INVALID),
            ("%", INVALID),
            ("%x", INVALID),
        ],
    )
    def test_duration(self, specifier: str, expected: SpecifierCheck) -> None:
        """Durations have no unquoted literal characters."""
        assert check_specifier("TimeSpan", specifier) is expected


class TestOtherSpecifiers:
    """Text and enumeration parameters."""

    def test_text_warns(self) -> None:
        """Any specifier on a string parameter is accepted with a warning."""
        assert check_specifier("string", "x") is SpecifierCheck.VALID_WITH_WARNING
        assert check_specifier("System.String", "N2") is SpecifierCheck.VALID_WITH_WARNING

    @pytest.mark.parametrize(
        ("specifier", "expected"),
        [("x", VALID), ("G", VALID), ("f", VALID), ("d", VALID), ("s", INVALID), ("GG", INVALID)],
    )
    def test_enum_like(self, specifier: str, expected: SpecifierCheck) -> None:
        """Unknown types accept the enumeration format letters."""
        assert check_specifier("MyEnum", specifier) is expected

    def test_empty_specifier_is_invalid(self) -> None:
        """The scanner never yields an empty specifier; the validator rejects it."""
        assert check_specifier("int", "") is INVALID


class TestSpecifierProperties:
    """Property-based tests for the specifier validator."""

    @given(
        type_name=st.sampled_from(
            ["int", "DateTime", "DateTimeOffset", "Guid", "TimeSpan", "string", "MyEnum"]
        ),
        specifier=st.text(min_size=1, max_size=20),
    )
    def test_total_and_deterministic(self, type_name: str, specifier: str) -> None:
        """Every (type, specifier) pair gets the same answer every time."""
        first = check_specifier(type_name, specifier)
        event(f"{type_name}={first}")

        assert first is check_specifier(type_name, specifier)

    @given(specifier=st.text(min_size=1, max_size=20))
    def test_nullable_marker_does_not_matter(self, specifier: str) -> None:
        """T and T? validate identically."""
        assert check_specifier("DateTime?", specifier) is check_specifier("DateTime", specifier)
