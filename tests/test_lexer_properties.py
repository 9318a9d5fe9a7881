"""Property-based tests for scanner invariants using Hypothesis.

These tests check properties that must hold for every input: the scanner
never raises, spans never overlap or go backwards, and tokens plus the
skipped whitespace reconstruct the source exactly.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from smith.lexer import Position, TokenKind, tokenize


# Alphabet weighted toward characters with interesting interactions
LEXER_ALPHABET = "abXY_019.()[]{},:+-*/= \n\t$"


def line_starts(code: str) -> list[int]:
    return [0] + [i + 1 for i, c in enumerate(code) if c == "\n"]


def offset(starts: list[int], pos: Position) -> int:
    return starts[pos.row] + pos.col


class TestTotality:
    """tokenize accepts every string."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        tokenize(source)

    @given(st.text(alphabet=LEXER_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_token_count_bounded_by_length(self, source: str) -> None:
        """Every token consumes at least one character (INDENT via its newline)."""
        assert len(tokenize(source)) <= len(source)


class TestSpanInvariants:
    """Spans are ordered and cover the source losslessly."""

    @given(st.text(alphabet=LEXER_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_spans_are_monotonic(self, source: str) -> None:
        tokens = tokenize(source)
        for token in tokens:
            assert token.span.begin <= token.span.end
        for current, following in zip(tokens, tokens[1:]):
            assert current.span.end <= following.span.begin

    @given(st.text(alphabet=LEXER_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_lossless_coverage(self, source: str) -> None:
        """Token text plus skipped spaces/newlines rebuilds the source."""
        starts = line_starts(source)
        rebuilt = []
        cursor = 0

        for token in tokenize(source):
            begin = offset(starts, token.span.begin)
            end = offset(starts, token.span.end)

            gap = source[cursor:begin]
            assert set(gap) <= {" ", "\n"}, (token, gap)
            if token.kind is TokenKind.INDENT:
                assert "\n" in gap
                text = " " * token.value
            else:
                text = token.value
            assert source[begin:end] == text

            rebuilt.append(gap)
            rebuilt.append(text)
            cursor = end

        tail = source[cursor:]
        assert set(tail) <= {" "}
        rebuilt.append(tail)
        assert "".join(rebuilt) == source

    @given(st.text(alphabet=LEXER_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_non_indent_tokens_stay_on_one_line(self, source: str) -> None:
        for token in tokenize(source):
            assert token.span.begin.row == token.span.end.row
            if token.kind is not TokenKind.INDENT:
                assert token.span.width >= 1


class TestIndentInvariants:
    """Blank lines, including space-only ones, never produce their own INDENT."""

    @given(st.text(alphabet="ab \n", max_size=200))
    @settings(max_examples=200)
    def test_no_adjacent_indents(self, source: str) -> None:
        tokens = tokenize(source)
        for current, following in zip(tokens, tokens[1:]):
            assert not (
                current.kind is TokenKind.INDENT and following.kind is TokenKind.INDENT
            ), source


class TestNumericInvariants:
    """Numeric literals never contain more than one dot or end in one."""

    @given(st.text(alphabet="0123456789.", max_size=100))
    @settings(max_examples=200)
    def test_number_shapes(self, source: str) -> None:
        for token in tokenize(source):
            if token.kind is TokenKind.INT:
                assert token.value.isdigit()
            elif token.kind is TokenKind.FLOAT:
                assert token.value.count(".") == 1
                assert not token.value.endswith(".")
            else:
                assert token.kind is TokenKind.OPERATOR
                assert token.value == "."


class TestDeterminism:
    """Tokenization is a pure function of its input."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        assert tokenize(source) == tokenize(source)
