"""
Built-in Tokenizer Cases
========================

Reference cases run by ``smithcheck`` when no case file is given. They
cover every token kind, the decimal-point rules and line indentation.
"""

from smith.lexer.tokens import (
    delimiter,
    float_,
    indent,
    int_,
    invalid,
    operator,
    symbol,
)
from smith.report import UnitTest


def _case(name: str, code: str, *expected) -> UnitTest:
    return UnitTest(name, code, tuple(expected))


BUILTIN_CASES: tuple[UnitTest, ...] = (
    _case("empty input", ""),
    _case("symbol", "foo", symbol("foo", (0, 0), (0, 3))),
    _case("mixed-case symbol with underscore", "_Max1", symbol("_Max1", (0, 0), (0, 5))),
    _case("int", "42", int_("42", (0, 0), (0, 2))),
    _case("float", "3.14", float_("3.14", (0, 0), (0, 4))),
    _case("leading-dot float", ".24", float_(".24", (0, 0), (0, 3))),
    _case("lone dot", ".", operator(".", (0, 0), (0, 1))),
    _case(
        "short call",
        "f(x, y, z)",
        symbol("f", (0, 0), (0, 1)),
        delimiter("(", (0, 1), (0, 2)),
        symbol("x", (0, 2), (0, 3)),
        delimiter(",", (0, 3), (0, 4)),
        symbol("y", (0, 5), (0, 6)),
        delimiter(",", (0, 6), (0, 7)),
        symbol("z", (0, 8), (0, 9)),
        delimiter(")", (0, 9), (0, 10)),
    ),
    _case(
        "function call",
        "foo(x, y, z)",
        symbol("foo", (0, 0), (0, 3)),
        delimiter("(", (0, 3), (0, 4)),
        symbol("x", (0, 4), (0, 5)),
        delimiter(",", (0, 5), (0, 6)),
        symbol("y", (0, 7), (0, 8)),
        delimiter(",", (0, 8), (0, 9)),
        symbol("z", (0, 10), (0, 11)),
        delimiter(")", (0, 11), (0, 12)),
    ),
    _case(
        "member call on int",
        "3.max(10)",
        int_("3", (0, 0), (0, 1)),
        operator(".", (0, 1), (0, 2)),
        symbol("max", (0, 2), (0, 5)),
        delimiter("(", (0, 5), (0, 6)),
        int_("10", (0, 6), (0, 8)),
        delimiter(")", (0, 8), (0, 9)),
    ),
    _case(
        "member call on float",
        "3.14.min(5.38)",
        float_("3.14", (0, 0), (0, 4)),
        operator(".", (0, 4), (0, 5)),
        symbol("min", (0, 5), (0, 8)),
        delimiter("(", (0, 8), (0, 9)),
        float_("5.38", (0, 9), (0, 13)),
        delimiter(")", (0, 13), (0, 14)),
    ),
    _case(
        "assignment",
        "x = 1 + 2",
        symbol("x", (0, 0), (0, 1)),
        operator("=", (0, 2), (0, 3)),
        int_("1", (0, 4), (0, 5)),
        operator("+", (0, 6), (0, 7)),
        int_("2", (0, 8), (0, 9)),
    ),
    _case(
        "multi-line array",
        "[\n  1,\n  2\n]",
        delimiter("[", (0, 0), (0, 1)),
        indent(2, (1, 0), (1, 2)),
        int_("1", (1, 2), (1, 3)),
        delimiter(",", (1, 3), (1, 4)),
        indent(2, (2, 0), (2, 2)),
        int_("2", (2, 2), (2, 3)),
        indent(0, (3, 0), (3, 0)),
        delimiter("]", (3, 0), (3, 1)),
    ),
    _case(
        "tab is invalid",
        "a\tb",
        symbol("a", (0, 0), (0, 1)),
        invalid("\t", (0, 1), (0, 2)),
        symbol("b", (0, 2), (0, 3)),
    ),
)
