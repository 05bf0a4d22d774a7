"""Parameter declaration grammar for resource comments.

The comment of a base-file entry declares how the entry's value must be
shaped. Rules are tried in priority order and the first match wins:

    1. "-..."                   Suppressed: no structural checks
    2. "!(a, b, c) note"        Enumeration: value is one of a, b, c
    3. "{int i, string s} note" Parameterized: value is a format string
    4. anything else            Plain: the comment is a human note

Leading whitespace is ignored by every rule. Text after the closing ")" or
"}" is a free-form note. An unclosed "!(" or "{" is not a declaration.

Thread Safety:
    parse_comment() is a pure function with no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from resxlint.diagnostics import Diagnostic, ErrorTemplate
from resxlint.model import (
    CommentMode,
    Enumeration,
    Parameter,
    Parameterized,
    Plain,
    Suppressed,
)

__all__ = [
    "parse_comment",
    "parse_parameter",
]

_SUPPRESS: re.Pattern[str] = re.compile(r"^\s*-", re.DOTALL)

# The list ends at the first ")".
_VARIANT_LIST: re.Pattern[str] = re.compile(r"^\s*!\((?P<list>.*?)\)", re.DOTALL)

# The declaration ends at the first "}".
_PARAMETER_LIST: re.Pattern[str] = re.compile(r"^\s*\{(?P<body>[^}]*)\}", re.DOTALL)

# Identifier: letter, "_" or "@" first; letters, digits or "_" after.
_IDENTIFIER = r"(?:@|[^\W\d])\w*"

# a.b.c.d a, int i, string text, System.Int32 index, MyType? value
_PARAMETER_DECLARATION: re.Pattern[str] = re.compile(
    rf"^\s*(?P<type>{_IDENTIFIER}(?:\s*\.\s*{_IDENTIFIER})*\s*\??)\s+(?P<name>{_IDENTIFIER})\s*$"
)

_WHITESPACE: re.Pattern[str] = re.compile(r"\s+")


def parse_parameter(text: str) -> Parameter | None:
    """Parse one `<dotted-type>[?] <identifier>` declaration.

    Whitespace around dots and before "?" is removed from the type.

    Example:
        >>> parse_parameter("System . Int32 ? count")
        Parameter(type='System.Int32?', name='count')
        >>> parse_parameter("int_i") is None
        True
    """
    match = _PARAMETER_DECLARATION.match(text)
    if match is None:
        return None
    return Parameter(_WHITESPACE.sub("", match.group("type")), match.group("name"))


def _parse_variants(listing: str) -> Enumeration:
    variants = (item.strip() for item in listing.split(","))
    return Enumeration(tuple(v for v in variants if v))


def _parse_parameters(name: str, comment: str, body: str) -> Parameterized | Diagnostic:
    if not body.strip():
        return ErrorTemplate.empty_parameter_declaration(name, comment.strip())
    parameters: list[Parameter] = []
    for declaration in body.split(","):
        parameter = parse_parameter(declaration)
        if parameter is None:
            return ErrorTemplate.bad_parameter_declaration(name, declaration.strip())
        parameters.append(parameter)
    return Parameterized(tuple(parameters))


def parse_comment(name: str, comment: str | None) -> CommentMode | Diagnostic:
    """Resolve the mode a comment declares for a resource entry.

    Args:
        name: Resource name, used in diagnostics
        comment: Comment text, None or blank for no comment

    Returns:
        The declared CommentMode, or a Diagnostic describing why the
        parameter declaration is invalid. No partial parameter list is
        ever returned.

    Example:
        >>> parse_comment("a", "{int i, int j} note")
        Parameterized(parameters=(Parameter(type='int', name='i'), Parameter(type='int', name='j')))
        >>> parse_comment("a", "!(Active, Inactive)")
        Enumeration(variants=('Active', 'Inactive'))
        >>> parse_comment("a", "-{int i}")
        Suppressed()
        >>> parse_comment("a", "just a note")
        Plain()
    """
    if comment is None or not comment.strip():
        return Plain()

    if _SUPPRESS.match(comment):
        return Suppressed()

    if (match := _VARIANT_LIST.match(comment)) is not None:
        return _parse_variants(match.group("list"))

    if (match := _PARAMETER_LIST.match(comment)) is not None:
        return _parse_parameters(name, comment, match.group("body"))

    return Plain()
