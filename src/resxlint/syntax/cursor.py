"""Immutable cursor over a resource value.

The placeholder scanner walks values left to right with a frozen Cursor;
every step returns a new cursor, so a scan can never loop in place and a
saved cursor marks where a format item started.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position inside a resource value.

    Example:
        >>> start = Cursor("{0}", 0)
        >>> start.advance().current
        '0'
        >>> start.current
        '{'
        >>> Cursor("{0}", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: If the value is exhausted
        """
        if self.is_eof:
            msg = f"End of value reached at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character `offset` positions ahead, None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Move forward, stopping at the end of the value."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Text between this cursor and `end_pos`.

            >>> item = Cursor("{0:N2}", 3)
            >>> item.slice_to(5)
            'N2'
        """
        return self.source[self.pos : end_pos]

    def skip_spaces(self) -> "Cursor":
        """Skip U+0020 only.

        Format items allow spaces, and no other whitespace, around the index
        and the alignment.

        Example:
            >>> Cursor("0  ,5", 1).skip_spaces().current
            ','
        """
        cursor = self
        while not cursor.is_eof and cursor.current == " ":
            cursor = cursor.advance()
        return cursor

    def expect(self, char: str) -> "Cursor | None":
        """Consume `char` if it is next; None on mismatch or at the end."""
        if self.peek() == char:
            return self.advance()
        return None


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Value read by a scanning step and the cursor after it.

    Example:
        >>> result = ParseResult(42, Cursor("42}", 2))
        >>> result.value, result.cursor.current
        (42, '}')
    """

    value: T
    cursor: Cursor
