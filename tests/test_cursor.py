# =============================================================================
# test_cursor.py - Position, Cursor and Classifier Unit Tests
# =============================================================================
# Tests for the scanner's building blocks:
#   - Position ordering and Span validation
#   - Cursor advance / advance_lines / take_while / trim
#   - Character classification
#   - Linear scaling of tokenize on large inputs
# =============================================================================

import time

import pytest

from smith.lexer import tokenize
from smith.lexer.classifier import (
    CharClass,
    classify,
    is_delimiter,
    is_digit,
    is_operator,
    is_symbol_head,
    is_symbol_tail,
)
from smith.lexer.cursor import Cursor, advance, advance_lines, take_while, trim
from smith.lexer.position import Position, Span


# =============================================================================
# Position and Span Tests
# =============================================================================

class TestPosition:
    """Test Position ordering and conversion."""

    def test_origin(self):
        assert Position.origin() == Position(0, 0)

    def test_ordering_is_row_major(self):
        assert Position(0, 9) < Position(1, 0)
        assert Position(2, 3) < Position(2, 4)
        assert Position(1, 1) <= Position(1, 1)

    def test_repr(self):
        assert repr(Position(3, 7)) == "3:7"

    def test_sequence_round_trip(self):
        assert Position.from_sequence([4, 2]).as_tuple() == (4, 2)


class TestSpan:
    """Test Span construction and properties."""

    def test_width(self):
        assert Span(Position(0, 2), Position(0, 5)).width == 3

    def test_empty_span(self):
        span = Span(Position(1, 0), Position(1, 0))
        assert span.is_empty
        assert span.width == 0

    def test_end_before_begin_rejected(self):
        with pytest.raises(ValueError):
            Span(Position(0, 5), Position(0, 2))

    def test_width_rejects_multi_line(self):
        with pytest.raises(ValueError):
            Span(Position(0, 0), Position(1, 0)).width

    def test_from_sequence(self):
        span = Span.from_sequence([[0, 3], [0, 4]])
        assert span == Span(Position(0, 3), Position(0, 4))
        assert repr(span) == "0:3-0:4"


# =============================================================================
# Cursor Tests
# =============================================================================

class TestCursor:
    """Test immutable cursor helpers."""

    def test_start(self):
        cursor = Cursor.start("abc")
        assert cursor.code == "abc"
        assert cursor.pos == Position(0, 0)
        assert not cursor.at_end

    def test_peek(self):
        cursor = Cursor.start("ab")
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) == ""

    def test_advance_moves_column(self):
        cursor = advance(Cursor("abc", Position(2, 4)), 2)
        assert cursor.code == "c"
        assert cursor.pos == Position(2, 6)

    def test_advance_does_not_mutate(self):
        original = Cursor.start("abc")
        advance(original, 1)
        assert original.code == "abc"
        assert original.pos == Position(0, 0)

    def test_advance_rejects_newline(self):
        with pytest.raises(ValueError):
            advance(Cursor.start("a\nb"), 2)

    def test_advance_past_end_stops_at_end(self):
        cursor = advance(Cursor.start("ab"), 5)
        assert cursor.at_end
        assert cursor.pos == Position(0, 2)

    def test_advance_lines(self):
        cursor = advance_lines(Cursor("\n\n  x", Position(0, 7)), 2)
        assert cursor.code == "  x"
        assert cursor.pos == Position(2, 0)

    def test_advance_lines_requires_newlines(self):
        with pytest.raises(ValueError):
            advance_lines(Cursor.start("\nx"), 2)

    def test_take_while(self):
        text, span, cursor = take_while(Cursor.start("abc1+"), str.isalpha)
        assert text == "abc"
        assert span == Span(Position(0, 0), Position(0, 3))
        assert cursor.code == "1+"

    def test_take_while_empty_run(self):
        """No matching characters gives a zero-width span."""
        text, span, cursor = take_while(Cursor("+x", Position(3, 2)), str.isalpha)
        assert text == ""
        assert span.is_empty
        assert span.begin == Position(3, 2)
        assert cursor.code == "+x"

    def test_take_while_at_end_of_input(self):
        text, span, cursor = take_while(Cursor("", Position(0, 4)), str.isalpha)
        assert text == ""
        assert span == Span(Position(0, 4), Position(0, 4))
        assert cursor.at_end

    def test_trim(self):
        cursor = trim(Cursor.start("   x "))
        assert cursor.code == "x "
        assert cursor.pos == Position(0, 3)

    def test_trim_keeps_tabs_and_newlines(self):
        assert trim(Cursor.start(" \tx")).code == "\tx"
        assert trim(Cursor.start(" \nx")).code == "\nx"

    def test_cursors_share_source(self):
        """Moving a cursor keeps the original string and only changes the index."""
        source = "abc\n  def"
        start = Cursor.start(source)
        _, _, after_word = take_while(start, str.isalpha)
        after_newline = advance_lines(after_word, 1)
        after_spaces = trim(after_newline)
        for cursor in (after_word, after_newline, after_spaces):
            assert cursor.source is source
        assert after_spaces.index == 6
        assert after_spaces.pos == Position(1, 2)
        assert after_spaces.peek() == "d"

    def test_advance_lines_past_end_rejected(self):
        with pytest.raises(ValueError):
            advance_lines(Cursor.start("\n"), 2)


# =============================================================================
# Scaling Tests
# =============================================================================

class TestScaling:
    """tokenize runs in time linear in the input length."""

    @staticmethod
    def _best_time(source: str, repeat: int = 3) -> float:
        best = float("inf")
        for _ in range(repeat):
            started = time.perf_counter()
            tokenize(source)
            best = min(best, time.perf_counter() - started)
        return best

    def test_large_input_scales_linearly(self):
        """16x the input must cost roughly 16x the time, not 256x."""
        small = self._best_time("a " * 20_000)
        large = self._best_time("a " * 320_000, repeat=1)
        assert large / small < 32

    def test_large_input_token_count(self):
        source = "x = 1.5\n" * 20_000
        tokens = tokenize(source)
        assert len(tokens) == 4 * 20_000
        assert tokens[-1].span.begin == Position(20_000, 0)


# =============================================================================
# Classifier Tests
# =============================================================================

class TestClassifier:
    """Test character classes."""

    @pytest.mark.parametrize("char,expected", [
        ("a", CharClass.SYMBOL),
        ("Z", CharClass.SYMBOL),
        ("_", CharClass.SYMBOL),
        ("0", CharClass.NUMBER),
        ("9", CharClass.NUMBER),
        (".", CharClass.NUMBER),
        ("(", CharClass.DELIMITER),
        ("}", CharClass.DELIMITER),
        (":", CharClass.DELIMITER),
        ("+", CharClass.OPERATOR),
        ("=", CharClass.OPERATOR),
        ("\n", CharClass.NEWLINE),
        (" ", CharClass.SPACE),
        ("\t", CharClass.INVALID),
        ("\r", CharClass.INVALID),
        ("$", CharClass.INVALID),
        ("é", CharClass.INVALID),
    ])
    def test_classify(self, char, expected):
        assert classify(char) is expected

    def test_symbol_tail_includes_digits(self):
        assert is_symbol_tail("7")
        assert not is_symbol_head("7")

    def test_dot_is_an_operator_character(self):
        assert is_operator(".")

    def test_ascii_digits_only(self):
        assert is_digit("5")
        assert not is_digit("٣")

    def test_classes_are_disjoint(self):
        """No ASCII character belongs to more than one token class."""
        for code in range(128):
            c = chr(code)
            memberships = [is_symbol_head(c), is_digit(c), is_delimiter(c), is_operator(c)]
            assert sum(memberships) <= 1, repr(c)
