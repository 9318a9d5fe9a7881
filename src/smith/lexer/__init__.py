"""
Smith Lexer
===========

Hand-written scanner for a small expression/declaration language.

Components
----------
- **position**: zero-based Position and half-open Span
- **cursor**: immutable cursor and the helpers that advance it
- **classifier**: character classes and pure predicates
- **tokens**: TokenKind, Token and the token record format
- **scanner**: the driving loop and per-class sub-scanners

Usage
-----
>>> from smith.lexer import tokenize
>>> [t.value for t in tokenize("3.max(10)")]
['3', '.', 'max', '(', '10', ')']
"""

from smith.lexer.position import Position, Span
from smith.lexer.cursor import Cursor, advance, advance_lines, take_while, trim
from smith.lexer.classifier import CharClass, classify
from smith.lexer.tokens import Token, TokenKind
from smith.lexer.scanner import (
    ScanState,
    next_token,
    source_line,
    source_text,
    tokenize,
    tokenize_strict,
)

__all__ = [
    "Position",
    "Span",
    "Cursor",
    "advance",
    "advance_lines",
    "take_while",
    "trim",
    "CharClass",
    "classify",
    "Token",
    "TokenKind",
    "ScanState",
    "next_token",
    "source_line",
    "source_text",
    "tokenize",
    "tokenize_strict",
]
