"""
Token Model
===========

Every token carries its kind, its value and the Span it covers.

Token Kinds
-----------
| Kind      | value                     | Example source |
|-----------|---------------------------|----------------|
| SYMBOL    | source text               | foo, _x1, Max  |
| INT       | source text               | 42             |
| FLOAT     | source text               | 3.14, .24      |
| DELIMITER | the character             | ( , :          |
| OPERATOR  | the character             | + .            |
| INDENT    | number of leading spaces  | (line start)   |
| INVALID   | the character             | $, tab         |

Values are never normalised: ``007`` stays ``"007"``. INDENT is the only
kind with a non-string value; its ``unit`` is always ``"space"``.

Record Format
-------------
Tokens round-trip through plain dicts for JSON case files:

    {"kind": "symbol", "value": "foo", "span": [[0, 0], [0, 3]]}
    {"kind": "indent", "unit": "space", "count": 2, "span": [[1, 0], [1, 2]]}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from smith.errors import TokenFormatError
from smith.lexer.position import Position, Span


class TokenKind(Enum):
    """Token kinds; values are the names used in token records."""
    SYMBOL = "symbol"
    INT = "int"
    FLOAT = "float"
    DELIMITER = "delimiter"
    OPERATOR = "operator"
    INDENT = "indent"
    INVALID = "invalid"


INDENT_UNIT = "space"


@dataclass(frozen=True)
class Token:
    """
    A single classified, position-tagged unit of source text.

    Equality is structural (kind, value, span), which is exactly the
    comparison the case reporter performs.

    Attributes:
        kind: The TokenKind classification
        value: Source text, or the space count for INDENT tokens
        span: Half-open source range the token covers
    """
    kind: TokenKind
    value: str | int
    span: Span

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, {self.span!r})"

    @property
    def unit(self) -> Optional[str]:
        """Indentation unit for INDENT tokens, None for everything else."""
        if self.kind is TokenKind.INDENT:
            return INDENT_UNIT
        return None

    @property
    def begin(self) -> Position:
        return self.span.begin

    @property
    def end(self) -> Position:
        return self.span.end

    def to_dict(self) -> dict[str, Any]:
        """Encode the token as a JSON-compatible record."""
        if self.kind is TokenKind.INDENT:
            return {
                "kind": self.kind.value,
                "unit": INDENT_UNIT,
                "count": self.value,
                "span": [list(p) for p in self.span.as_tuple()],
            }
        return {
            "kind": self.kind.value,
            "value": self.value,
            "span": [list(p) for p in self.span.as_tuple()],
        }

    @classmethod
    def from_dict(cls, record: Any) -> "Token":
        """
        Decode a token record produced by ``to_dict``.

        Raises:
            TokenFormatError: If the record is missing fields or has
                values of the wrong type
        """
        if not isinstance(record, dict):
            raise TokenFormatError(f"token record must be an object, got {type(record).__name__}")

        try:
            kind = TokenKind(record.get("kind"))
        except ValueError:
            raise TokenFormatError(f"unknown token kind {record.get('kind')!r}") from None

        try:
            span = Span.from_sequence(record["span"])
        except KeyError:
            raise TokenFormatError(f"{kind.value} token has no span") from None
        except (TypeError, ValueError) as e:
            raise TokenFormatError(f"bad span {record['span']!r}: {e}") from None

        if kind is TokenKind.INDENT:
            unit = record.get("unit", INDENT_UNIT)
            if unit != INDENT_UNIT:
                raise TokenFormatError(f"unsupported indent unit {unit!r}")
            count = record.get("count")
            if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                raise TokenFormatError(f"indent count must be a non-negative integer, got {count!r}")
            return cls(kind, count, span)

        value = record.get("value")
        if not isinstance(value, str) or not value:
            raise TokenFormatError(f"{kind.value} token value must be a non-empty string, got {value!r}")
        return cls(kind, value, span)


# =============================================================================
# Constructors
# =============================================================================
# Shorthand used by tests and built-in cases:
#     symbol("foo", (0, 0), (0, 3))
# =============================================================================

def _make(kind: TokenKind, value: str | int, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return Token(kind, value, Span(Position(*begin), Position(*end)))


def symbol(value: str, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.SYMBOL, value, begin, end)


def int_(value: str, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.INT, value, begin, end)


def float_(value: str, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.FLOAT, value, begin, end)


def delimiter(value: str, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.DELIMITER, value, begin, end)


def operator(value: str, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.OPERATOR, value, begin, end)


def indent(count: int, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.INDENT, count, begin, end)


def invalid(value: str, begin: tuple[int, int], end: tuple[int, int]) -> Token:
    return _make(TokenKind.INVALID, value, begin, end)
