"""
Source Positions and Spans
==========================

Positions are zero-based (row, column) pairs counted in characters since
the start of the line. A Span is the half-open range [begin, end) a token
covers; zero-width spans (begin == end) are legal and are produced for
INDENT tokens on lines without leading spaces.

Both types are frozen, so a token's location can be shared freely.
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, order=True)
class Position:
    """
    A zero-based (row, col) location in source text.

    Ordering is lexicographic on (row, col), which is what span
    monotonicity checks rely on.

    Attributes:
        row: Line index, starting at 0
        col: Column index within the line, starting at 0
    """
    row: int
    col: int

    def __repr__(self) -> str:
        return f"{self.row}:{self.col}"

    @classmethod
    def origin(cls) -> "Position":
        """Return the position of the first character of any input."""
        return cls(0, 0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def from_sequence(cls, value: Sequence[int]) -> "Position":
        """Build a Position from a ``[row, col]`` pair."""
        row, col = value
        return cls(int(row), int(col))


@dataclass(frozen=True)
class Span:
    """
    Half-open source range covered by a token.

    Attributes:
        begin: Position of the first character consumed
        end: Position immediately after the last character consumed

    Raises:
        ValueError: If end precedes begin
    """
    begin: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.begin:
            raise ValueError(f"span end {self.end!r} precedes begin {self.begin!r}")

    def __repr__(self) -> str:
        return f"{self.begin!r}-{self.end!r}"

    @property
    def is_empty(self) -> bool:
        """True for zero-width spans."""
        return self.begin == self.end

    @property
    def width(self) -> int:
        """
        Number of columns covered.

        Tokens never cross a line boundary, so for every span produced by
        the scanner this equals the length of the token text.
        """
        if self.begin.row != self.end.row:
            raise ValueError(f"span {self!r} crosses a line boundary")
        return self.end.col - self.begin.col

    def as_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self.begin.as_tuple(), self.end.as_tuple())

    @classmethod
    def from_sequence(cls, value: Sequence[Sequence[int]]) -> "Span":
        """Build a Span from a ``[[row, col], [row, col]]`` pair."""
        begin, end = value
        return cls(Position.from_sequence(begin), Position.from_sequence(end))
