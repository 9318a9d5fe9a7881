"""
Scanning Cursor
===============

A Cursor is an index into the source text together with the Position of
the character at that index. Cursors are immutable: every helper here
takes a cursor and returns a new one, so sub-scanners never share mutable
state. All cursors of one scan share the same source string; moving a
cursor never copies the remaining input.

Position tracking rules:
- ``advance`` moves along the current line only (column += n).
- ``advance_lines`` consumes newline characters (row += n, column = 0).
- ``take_while`` is built on ``advance`` and is only ever given
  horizontal predicates, so it never crosses a line either.
"""

from dataclasses import dataclass, field
from typing import Callable

from smith.lexer.classifier import is_space
from smith.lexer.position import Position, Span


@dataclass(frozen=True)
class Cursor:
    """
    Read position within the source text.

    Attributes:
        source: The complete source text
        pos: Position of ``source[index]`` in the source
        index: Offset of the next unconsumed character
    """
    source: str = field(repr=False)
    pos: Position
    index: int = 0

    @classmethod
    def start(cls, code: str) -> "Cursor":
        """Create a cursor at the beginning of ``code``."""
        return cls(code, Position.origin())

    @property
    def code(self) -> str:
        """The unconsumed remainder of the source (a copy)."""
        return self.source[self.index:]

    @property
    def at_end(self) -> bool:
        """Check if the input is exhausted."""
        return self.index >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character ``offset`` places ahead without consuming it.

        Returns empty string if past end of input.
        """
        i = self.index + offset
        if i >= len(self.source):
            return ""
        return self.source[i]


def advance(cursor: Cursor, n: int) -> Cursor:
    """
    Consume ``n`` characters from the current line.

    Raises:
        ValueError: If the consumed characters include a newline
    """
    end = min(cursor.index + n, len(cursor.source))
    if cursor.source.find("\n", cursor.index, end) != -1:
        raise ValueError("advance() cannot cross a newline; use advance_lines()")
    return Cursor(
        source=cursor.source,
        pos=Position(cursor.pos.row, cursor.pos.col + end - cursor.index),
        index=end,
    )


def advance_lines(cursor: Cursor, n: int) -> Cursor:
    """
    Consume ``n`` newline characters.

    The row increases by ``n`` and the column resets to 0.

    Raises:
        ValueError: If the next ``n`` characters are not all newlines
    """
    end = cursor.index + n
    if end > len(cursor.source) or cursor.source.count("\n", cursor.index, end) != n:
        found = cursor.source[cursor.index:end]
        raise ValueError(f"expected {n} newline(s), found {found!r}")
    return Cursor(
        source=cursor.source,
        pos=Position(cursor.pos.row + n, 0),
        index=end,
    )


def take_while(
    cursor: Cursor,
    predicate: Callable[[str], bool],
) -> tuple[str, Span, Cursor]:
    """
    Consume the longest prefix whose characters all satisfy ``predicate``.

    The run may be empty, in which case the span is zero-width at the
    cursor position.

    Returns:
        (consumed text, span of the text, advanced cursor)
    """
    source = cursor.source
    i = cursor.index
    while i < len(source) and predicate(source[i]):
        i += 1
    next_cursor = advance(cursor, i - cursor.index)
    return source[cursor.index:i], Span(cursor.pos, next_cursor.pos), next_cursor


def trim(cursor: Cursor) -> Cursor:
    """Skip leading horizontal whitespace."""
    _, _, next_cursor = take_while(cursor, is_space)
    return next_cursor
