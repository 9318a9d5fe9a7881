"""
Smith Error Hierarchy
=====================

This module defines the exception hierarchy for the Smith lexer toolkit.
All exceptions inherit from SmithError, allowing callers to catch all
toolkit-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
SmithError (base)
├── LexError - diagnostics raised on request from token streams
│   └── InvalidCharacterError - unclassifiable character in source
└── CaseError (test-case handling)
    ├── CaseFileError - unreadable or malformed case file
    └── TokenFormatError - token record that cannot be decoded

Design Philosophy
-----------------
The tokenizer itself never raises: an unclassifiable character becomes an
INVALID token and scanning continues. LexError exists for callers that opt
into strict handling (``tokenize_strict`` and ``smithlex --strict``), which
turn the first INVALID token into a located error.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from smith.lexer.position import Position


# =============================================================================
# Base Exception Class
# =============================================================================

class SmithError(Exception):
    """
    Base exception for all Smith errors.

    All exceptions in the toolkit inherit from this class, allowing callers
    to catch all Smith-related errors with a single except clause:

        try:
            tokens = tokenize_strict(source, "example.sm")
        except SmithError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Tokens carry zero-based Positions; messages shown to people use the
    conventional 1-indexed line and column. This class is the bridge.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"

    @classmethod
    def from_position(cls, filename: str, pos: "Position") -> "SourceLocation":
        """Convert a zero-based token Position into a 1-indexed location."""
        return cls(filename, pos.row + 1, pos.col + 1)


# =============================================================================
# Lexer Diagnostics
# =============================================================================

class LexError(SmithError):
    """
    Base exception for located lexical diagnostics.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            calc.sm:2:7: error: invalid character '$' (0x24)
                x = 1 $ 2
                      ^
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidCharacterError(LexError):
    """
    Character that belongs to no token class.

    Raised only in strict mode; the default tokenizer reports the same
    condition as an INVALID token.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        hint = None
        if char == "\t":
            hint = "indentation and separators must use spaces, not tabs"
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# Test Case Exceptions
# =============================================================================

class CaseError(SmithError):
    """Base exception for test-case loading and decoding."""
    pass


class CaseFileError(CaseError):
    """
    Case file that cannot be read or does not have the expected shape.

    Attributes:
        path: The offending file (may be None for in-memory data)
        index: Position of the bad case within the file (optional)
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        index: Optional[int] = None,
    ):
        self.path = path
        self.index = index
        prefix = path or "<cases>"
        if index is not None:
            prefix = f"{prefix}[{index}]"
        super().__init__(f"{prefix}: {message}")


class TokenFormatError(CaseError):
    """Token record (as found in a case file) that cannot be decoded."""
    pass
