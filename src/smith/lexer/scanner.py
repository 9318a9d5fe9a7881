"""
Scanner
=======

The driving loop and the per-class sub-scanners.

Driving Loop
------------
The scanner is a two-state machine (RUNNING, DONE). Each step:

1. trims leading spaces (no token produced),
2. stops if the input is exhausted,
3. classifies the head character and dispatches to its sub-scanner,
   appending the token and adopting the returned cursor.

Every sub-scanner consumes at least one character, so ``tokenize``
finishes in at most ``len(code)`` steps.

Decimal Point Disambiguation
----------------------------
``.`` is both the decimal point and the member-access operator
(``3.max(10)``, ``3.14.min(5.38)``). The numeric sub-scanner resolves it
with local lookahead only:

| Source      | Tokens                                      |
|-------------|---------------------------------------------|
| 3.14        | FLOAT "3.14"                                |
| .24         | FLOAT ".24"                                 |
| .           | OPERATOR "."                                |
| 3.max(10)   | INT "3", OPERATOR ".", SYMBOL "max", ...    |
| 3.14.min    | FLOAT "3.14", OPERATOR ".", SYMBOL "min"    |

Example Usage
-------------
>>> from smith.lexer import tokenize
>>> for token in tokenize("foo(x, 3.14)"):
...     print(token)
Token(SYMBOL, 'foo', 0:0-0:3)
Token(DELIMITER, '(', 0:3-0:4)
Token(SYMBOL, 'x', 0:4-0:5)
Token(DELIMITER, ',', 0:5-0:6)
Token(FLOAT, '3.14', 0:7-0:11)
Token(DELIMITER, ')', 0:11-0:12)
"""

from enum import Enum, auto
from typing import Callable

from smith.errors import InvalidCharacterError, SourceLocation
from smith.lexer.classifier import (
    CharClass,
    DECIMAL_POINT,
    classify,
    is_digit,
    is_newline,
    is_space,
    is_symbol_tail,
)
from smith.lexer.cursor import Cursor, advance, advance_lines, take_while, trim
from smith.lexer.position import Span
from smith.lexer.tokens import Token, TokenKind


class ScanState(Enum):
    """States of the driving loop."""
    RUNNING = auto()
    DONE = auto()


SubScanner = Callable[[Cursor], tuple[Token, Cursor]]


# =============================================================================
# Driving Loop
# =============================================================================

def tokenize(code: str) -> list[Token]:
    """
    Convert source text into an ordered list of tokens.

    Never raises for string input: characters outside every class become
    INVALID tokens and scanning continues after them.

    Args:
        code: Source text

    Returns:
        Tokens in source order
    """
    tokens: list[Token] = []
    cursor = Cursor.start(code)
    state = ScanState.RUNNING

    while state is ScanState.RUNNING:
        cursor = trim(cursor)
        if cursor.at_end:
            state = ScanState.DONE
            continue
        token, cursor = next_token(cursor)
        tokens.append(token)

    return tokens


def next_token(cursor: Cursor) -> tuple[Token, Cursor]:
    """
    Scan exactly one token at the head of a non-empty, trimmed cursor.

    Returns:
        (token, cursor after the token)
    """
    scanner = _DISPATCH[classify(cursor.peek())]
    return scanner(cursor)


# =============================================================================
# Sub-scanners
# =============================================================================

def scan_symbol(cursor: Cursor) -> tuple[Token, Cursor]:
    """
    Scan a symbol: a symbol-head character followed by symbol-tail characters.

    The head has already been classified, so the whole run is taken with
    the tail predicate.
    """
    text, span, next_cursor = take_while(cursor, is_symbol_tail)
    return Token(TokenKind.SYMBOL, text, span), next_cursor


def scan_number(cursor: Cursor) -> tuple[Token, Cursor]:
    """
    Scan a numeric literal, or a lone dot.

    The run is folded left to right with a "decimal point seen" flag:
    digits always extend it; a dot extends it only while the flag is
    clear. The run is then resolved:

    - exactly ``"."``: OPERATOR
    - ends in ``"."``: INT of the digits before it; the dot is left for
      the next step (``3.max`` -> ``3``, ``.``, ``max``)
    - contains ``"."``: FLOAT
    - otherwise: INT
    """
    source = cursor.source
    end = cursor.index
    seen_point = False
    while end < len(source):
        c = source[end]
        if is_digit(c):
            end += 1
        elif c == DECIMAL_POINT and not seen_point:
            seen_point = True
            end += 1
        else:
            break

    run = source[cursor.index:end]

    if run == DECIMAL_POINT:
        return scan_operator(cursor)

    if run.endswith(DECIMAL_POINT):
        run = run[:-1]
        seen_point = False

    next_cursor = advance(cursor, len(run))
    kind = TokenKind.FLOAT if seen_point else TokenKind.INT
    return Token(kind, run, Span(cursor.pos, next_cursor.pos)), next_cursor


def _scan_single(kind: TokenKind, cursor: Cursor) -> tuple[Token, Cursor]:
    next_cursor = advance(cursor, 1)
    return Token(kind, cursor.peek(), Span(cursor.pos, next_cursor.pos)), next_cursor


def scan_delimiter(cursor: Cursor) -> tuple[Token, Cursor]:
    return _scan_single(TokenKind.DELIMITER, cursor)


def scan_operator(cursor: Cursor) -> tuple[Token, Cursor]:
    # Single character only: "==" is two OPERATOR tokens
    return _scan_single(TokenKind.OPERATOR, cursor)


def scan_invalid(cursor: Cursor) -> tuple[Token, Cursor]:
    return _scan_single(TokenKind.INVALID, cursor)


def scan_newline(cursor: Cursor) -> tuple[Token, Cursor]:
    """
    Scan a run of newlines and the indentation of the line that follows.

    All consecutive newline characters are consumed in one step, then the
    spaces at the start of the new line. A line holding only spaces is
    blank and joins the run, so ``"a\\n  \\nb"`` gives one INDENT(0).
    One INDENT token is produced; its span covers the spaces of the last
    line only, so it is zero-width on a line with no indentation.
    """
    spaces, span, next_cursor = take_while(_skip_newlines(cursor), is_space)
    while is_newline(next_cursor.peek()):
        spaces, span, next_cursor = take_while(_skip_newlines(next_cursor), is_space)
    return Token(TokenKind.INDENT, len(spaces), span), next_cursor


def _skip_newlines(cursor: Cursor) -> Cursor:
    count = 0
    while is_newline(cursor.peek(count)):
        count += 1
    return advance_lines(cursor, count)


# SPACE has no entry: the loop trims spaces before classifying
_DISPATCH: dict[CharClass, SubScanner] = {
    CharClass.SYMBOL: scan_symbol,
    CharClass.NUMBER: scan_number,
    CharClass.DELIMITER: scan_delimiter,
    CharClass.OPERATOR: scan_operator,
    CharClass.NEWLINE: scan_newline,
    CharClass.INVALID: scan_invalid,
}


# =============================================================================
# Strict Mode and Source Helpers
# =============================================================================

def tokenize_strict(code: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize, treating the first INVALID token as a hard error.

    Args:
        code: Source text
        filename: Name used in the error location

    Raises:
        InvalidCharacterError: If the source contains an unclassifiable
            character
    """
    tokens = tokenize(code)
    for token in tokens:
        if token.kind is TokenKind.INVALID:
            raise InvalidCharacterError(
                str(token.value),
                SourceLocation.from_position(filename, token.begin),
                source_line(code, token.begin.row),
            )
    return tokens


def source_line(code: str, row: int) -> str:
    """Return the text of line ``row`` (zero-based) without its newline."""
    lines = code.split("\n")
    if row >= len(lines):
        return ""
    return lines[row]


def source_text(code: str, span: Span) -> str:
    """
    Return the substring of ``code`` covered by ``span``.

    Spans produced by the scanner lie within one line.
    """
    line = source_line(code, span.begin.row)
    if span.end.row != span.begin.row:
        raise ValueError(f"span {span!r} crosses a line boundary")
    return line[span.begin.col:span.end.col]
