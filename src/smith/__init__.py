"""
Smith - Lexer for a Small Expression Language
=============================================

This package provides a hand-written scanner that turns source text into
position-tagged tokens, plus tools for checking a tokenizer against
reference cases.

Main Components
---------------
- **lexer**: the scanner (``tokenize``) and its token model
    Symbols, ints, floats, delimiters, operators, indentation markers and
    invalid characters, each with a zero-based (row, col) span

- **report**: case runner and report formatting
    Compares tokenizer output with expected tokens, case by case

- **cli**: command-line tools (smithlex, smithcheck)

Quick Start
-----------
    >>> from smith import tokenize
    >>> tokenize("f(x)")[0]
    Token(SYMBOL, 'f', 0:0-0:1)

Or use the command-line tools:
    $ smithlex program.sm
    $ smithcheck cases.json
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from smith.lexer import (
    CharClass,
    Cursor,
    Position,
    Span,
    Token,
    TokenKind,
    classify,
    tokenize,
    tokenize_strict,
)
from smith.errors import (
    SmithError,
    SourceLocation,
    LexError,
    InvalidCharacterError,
    CaseError,
    CaseFileError,
    TokenFormatError,
)
from smith.config import SmithConfig
from smith.report import (
    CaseResult,
    Report,
    UnitTest,
    format_tokens,
    load_cases,
    run_cases,
)

__all__ = [
    "__version__",
    # Lexer
    "CharClass",
    "Cursor",
    "Position",
    "Span",
    "Token",
    "TokenKind",
    "classify",
    "tokenize",
    "tokenize_strict",
    # Exception hierarchy
    "SmithError",
    "SourceLocation",
    "LexError",
    "InvalidCharacterError",
    "CaseError",
    "CaseFileError",
    "TokenFormatError",
    # Configuration
    "SmithConfig",
    # Reporting
    "CaseResult",
    "Report",
    "UnitTest",
    "format_tokens",
    "load_cases",
    "run_cases",
]
