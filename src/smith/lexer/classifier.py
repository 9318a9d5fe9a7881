"""
Character Classification
========================

Pure predicates that partition the input alphabet into disjoint classes.
The scanner dispatches on ``classify(char)``; nothing here has state.

Character Classes
-----------------
| Class     | Members                     | Produces          |
|-----------|-----------------------------|-------------------|
| SYMBOL    | a-z A-Z _                   | SYMBOL            |
| NUMBER    | 0-9 .                       | INT/FLOAT/OPERATOR|
| DELIMITER | ( ) [ ] { } , :             | DELIMITER         |
| OPERATOR  | + - * / =                   | OPERATOR          |
| NEWLINE   | \\n                          | INDENT            |
| SPACE     | (space)                     | nothing (skipped) |
| INVALID   | anything else, incl. tabs   | INVALID           |

``.`` is an operator character, but it classifies as NUMBER because a dot
may open a float literal (``.24``). The numeric sub-scanner re-emits a
lone dot as an OPERATOR.
"""

from enum import Enum, auto
import string


class CharClass(Enum):
    """Dispatch class of the character at the head of the cursor."""
    SYMBOL = auto()
    NUMBER = auto()
    DELIMITER = auto()
    OPERATOR = auto()
    NEWLINE = auto()
    SPACE = auto()
    INVALID = auto()


# Characters that can start a symbol
SYMBOL_HEAD = frozenset(string.ascii_letters + "_")

# Characters that can continue a symbol
SYMBOL_TAIL = SYMBOL_HEAD | frozenset(string.digits)

DIGITS = frozenset(string.digits)

DELIMITERS = frozenset("()[]{},:")

OPERATORS = frozenset("+-*/=.")

DECIMAL_POINT = "."

NEWLINE = "\n"

SPACE = " "


def is_symbol_head(c: str) -> bool:
    return c in SYMBOL_HEAD


def is_symbol_tail(c: str) -> bool:
    return c in SYMBOL_TAIL


def is_digit(c: str) -> bool:
    # str.isdigit() accepts non-ASCII digits such as '²'
    return c in DIGITS


def is_delimiter(c: str) -> bool:
    return c in DELIMITERS


def is_operator(c: str) -> bool:
    return c in OPERATORS


def is_newline(c: str) -> bool:
    return c == NEWLINE


def is_space(c: str) -> bool:
    return c == SPACE


def classify(c: str) -> CharClass:
    """
    Return the dispatch class of a single character.

    Args:
        c: A one-character string

    Returns:
        The CharClass the scanner should dispatch on
    """
    if is_symbol_head(c):
        return CharClass.SYMBOL
    if is_digit(c) or c == DECIMAL_POINT:
        return CharClass.NUMBER
    if is_delimiter(c):
        return CharClass.DELIMITER
    if is_operator(c):
        return CharClass.OPERATOR
    if is_newline(c):
        return CharClass.NEWLINE
    if is_space(c):
        return CharClass.SPACE
    return CharClass.INVALID
