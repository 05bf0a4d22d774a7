"""Resource entry model.

Input entries, the comment-declared mode union, and the resolved
ResourceItem handed to wrapper emitters. All types are frozen: a
ResourceItem's mode is decided once, when the base file is validated,
and stays read-only for the rest of the pass.

Includes type guards as static methods (eliminates isinstance chains
at call sites).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeIs

from resxlint.constants import STRING_TYPE, SUMMARY_MAX_LINES
from resxlint.enums import CommentModeKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input
    "ResxEntry",
    # Comment modes
    "Parameter",
    "Suppressed",
    "Enumeration",
    "Parameterized",
    "Plain",
    "CommentMode",
    # Resolved items
    "ResourceItem",
]

# ============================================================================
# INPUT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ResxEntry:
    """One <data> entry as yielded by the reading collaborator.

    Attributes:
        name: Resource name (unique key within a file)
        value: Raw value text
        comment: Comment text, None when the entry has no <comment>
        type: Type tag of an include entry, None for plain strings
    """

    name: str
    value: str
    comment: str | None = None
    type: str | None = None

    @property
    def is_include(self) -> bool:
        """True if the entry references an external file (has a type tag)."""
        return self.type is not None


# ============================================================================
# COMMENT MODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Parameter:
    """Declared formatting parameter: `{int count}` -> Parameter("int", "count").

    Order is significant: the parameter at position i binds placeholder {i}.
    """

    type: str
    name: str


@dataclass(frozen=True, slots=True)
class Suppressed:
    """Comment starts with '-': no structural checks ever run on the entry."""

    kind = CommentModeKind.SUPPRESSED

    @staticmethod
    def guard(mode: object) -> TypeIs[Suppressed]:
        """Type guard for Suppressed."""
        return isinstance(mode, Suppressed)


@dataclass(frozen=True, slots=True)
class Enumeration:
    """Comment starts with '!(a, b, c)'.

    The base value and every satellite value must be one of `variants`.
    The list is only ever taken from the base file.
    """

    variants: tuple[str, ...]

    kind = CommentModeKind.ENUMERATION

    @staticmethod
    def guard(mode: object) -> TypeIs[Enumeration]:
        """Type guard for Enumeration."""
        return isinstance(mode, Enumeration)

    def allows(self, value: str) -> bool:
        """Check whether a (trimmed) value is one of the declared variants."""
        return value.strip() in self.variants

    def describe(self) -> str:
        """Render the variant list the way it appears in diagnostics: (a, b, c)."""
        return "(" + ", ".join(self.variants) + ")"


@dataclass(frozen=True, slots=True)
class Parameterized:
    """Comment starts with '{type name, ...}': value is a format string.

    The value must contain exactly the placeholder indexes 0..len(parameters)-1.
    """

    parameters: tuple[Parameter, ...]

    kind = CommentModeKind.PARAMETERIZED

    @staticmethod
    def guard(mode: object) -> TypeIs[Parameterized]:
        """Type guard for Parameterized."""
        return isinstance(mode, Parameterized)


@dataclass(frozen=True, slots=True)
class Plain:
    """No comment-declared structure; the comment is a human note."""

    kind = CommentModeKind.PLAIN

    @staticmethod
    def guard(mode: object) -> TypeIs[Plain]:
        """Type guard for Plain."""
        return isinstance(mode, Plain)


type CommentMode = Suppressed | Enumeration | Parameterized | Plain


# ============================================================================
# RESOLVED ITEMS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ResourceItem:
    """A validated base-file entry.

    Created once per name while scanning the base file. Satellite files
    never create ResourceItems; they are checked against these.

    Attributes:
        name: Resource name
        value: Raw value (for include entries: a description of the file)
        type: "string", or the type tag of an include entry
        mode: Comment-declared mode, fixed at construction
        placeholder_indexes: Distinct placeholder indexes of the base value,
            ascending (empty for suppressed and enumeration entries)
    """

    name: str
    value: str
    type: str = STRING_TYPE
    mode: CommentMode = Plain()
    placeholder_indexes: tuple[int, ...] = ()

    @property
    def is_string(self) -> bool:
        """True for text resources, False for include entries."""
        return self.type == STRING_TYPE

    @property
    def is_function(self) -> bool:
        """True if the emitter should generate a formatting function."""
        return Parameterized.guard(self.mode) and len(self.mode.parameters) > 0

    @property
    def is_enumeration(self) -> bool:
        """True if the entry declares a non-empty closed set of values."""
        return Enumeration.guard(self.mode) and len(self.mode.variants) > 0

    @property
    def suppress_validation(self) -> bool:
        """True if the comment opted the entry out of structural checks."""
        return Suppressed.guard(self.mode)

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """Declared parameters, empty unless the mode is Parameterized."""
        if Parameterized.guard(self.mode):
            return self.mode.parameters
        return ()

    @property
    def variants(self) -> tuple[str, ...]:
        """Declared variants, empty unless the mode is Enumeration."""
        if Enumeration.guard(self.mode):
            return self.mode.variants
        return ()

    @property
    def placeholder_count(self) -> int:
        """Number of distinct placeholder indexes in the base value."""
        return len(self.placeholder_indexes)

    @property
    def expected_placeholder_indexes(self) -> tuple[int, ...]:
        """Index set every translation of this entry must use.

        0..n-1 for n declared parameters. Without a declaration, the indexes
        found in the base value, which need not be contiguous.
        """
        if Parameterized.guard(self.mode):
            return tuple(range(len(self.mode.parameters)))
        return self.placeholder_indexes

    @property
    def expected_placeholder_count(self) -> int:
        """Placeholder count every translation of this entry must match."""
        return len(self.expected_placeholder_indexes)

    def summary(self) -> str:
        """Value text as it should appear in a wrapper's doc comment.

        First line trimmed, followed by up to two more non-empty lines.

        Example:
            >>> ResourceItem("a", "first\\nsecond\\nthird\\nfourth").summary()
            'first\\nsecond\\nthird'
        """
        lines = self.value.replace("\r", "\n").split("\n")
        kept = [lines[0].strip()]
        kept.extend(
            line.strip() for line in lines[1:SUMMARY_MAX_LINES] if line.strip()
        )
        return "\n".join(kept)

    def parameters_declaration(self) -> str:
        """Parameter list for a wrapper signature: "int i, string name"."""
        return ", ".join(f"{p.type} {p.name}" for p in self.parameters)

    def parameters_invocation(self) -> str:
        """Argument list for a wrapper body: "i, name"."""
        return ", ".join(p.name for p in self.parameters)
