"""Tests for the line lexer: indentation tracking and line classification."""

import pytest

from plainyaml.lexer import Lexer, tokenize
from plainyaml.lexer.classifiers import classify_line, measure_indent
from plainyaml.tokens import (
    COLON,
    DASH,
    DEDENT,
    INDENT,
    NEWLINE,
    Token,
    TokenType,
    scalar,
)


class TestEmptyInput:
    """Empty documents produce no tokens at all."""

    def test_empty_string(self) -> None:
        assert tokenize("") == []

    def test_lexer_class_matches_function(self) -> None:
        assert Lexer("a: 1").tokenize() == tokenize("a: 1")

    def test_single_newline_is_one_blank_line(self) -> None:
        assert tokenize("\n") == [NEWLINE]


class TestLineClassification:
    """Each line becomes its content tokens followed by one NEWLINE."""

    def test_key_value(self) -> None:
        assert tokenize("a: 1") == [scalar("a"), COLON, scalar("1"), NEWLINE]

    def test_key_without_value(self) -> None:
        assert tokenize("a:") == [scalar("a"), COLON, NEWLINE]

    def test_dash_entry(self) -> None:
        assert tokenize("- x") == [DASH, scalar("x"), NEWLINE]

    def test_dash_entry_keeps_colon_text(self) -> None:
        """A dash line is never split on its colon."""
        assert tokenize("- a: b") == [DASH, scalar("a: b"), NEWLINE]

    def test_plain_line(self) -> None:
        assert tokenize("hello world") == [scalar("hello world"), NEWLINE]

    def test_lone_dash_is_a_scalar(self) -> None:
        """Trimming removes the space, so "- " no longer starts with "- "."""
        assert tokenize("- ") == [scalar("-"), NEWLINE]

    def test_empty_key(self) -> None:
        assert tokenize(": x") == [scalar(""), COLON, scalar("x"), NEWLINE]

    def test_split_on_first_colon_only(self) -> None:
        assert tokenize("time: 12:30") == [scalar("time"), COLON, scalar("12:30"), NEWLINE]

    def test_bare_timestamp_is_split(self) -> None:
        """A colon-bearing plain value is mistaken for a key."""
        assert tokenize("12:30") == [scalar("12"), COLON, scalar("30"), NEWLINE]

    def test_surrounding_whitespace_stripped(self) -> None:
        assert tokenize("key :   value   ") == [scalar("key"), COLON, scalar("value"), NEWLINE]

    def test_dash_value_stripped(self) -> None:
        assert tokenize("-    x  ") == [DASH, scalar("x"), NEWLINE]

    def test_multiple_lines(self) -> None:
        assert tokenize("a: 1\nb: 2") == [
            scalar("a"), COLON, scalar("1"), NEWLINE,
            scalar("b"), COLON, scalar("2"), NEWLINE,
        ]

    def test_blank_line_still_emits_newline(self) -> None:
        assert tokenize("a: 1\n\nb: 2") == [
            scalar("a"), COLON, scalar("1"), NEWLINE,
            NEWLINE,
            scalar("b"), COLON, scalar("2"), NEWLINE,
        ]

    def test_trailing_newline_does_not_add_a_line(self) -> None:
        assert tokenize("a: 1\n") == tokenize("a: 1")

    def test_crlf_line_endings(self) -> None:
        assert tokenize("a: 1\r\nb: 2\r\n") == tokenize("a: 1\nb: 2")


class TestIndentation:
    """Leading spaces are resolved into INDENT/DEDENT tokens."""

    def test_nested_block(self) -> None:
        assert tokenize("a:\n  b: c") == [
            scalar("a"), COLON, NEWLINE,
            INDENT, scalar("b"), COLON, scalar("c"), NEWLINE,
            DEDENT,
        ]

    def test_return_to_column_zero(self) -> None:
        assert tokenize("a:\n  b: c\nd: e") == [
            scalar("a"), COLON, NEWLINE,
            INDENT, scalar("b"), COLON, scalar("c"), NEWLINE,
            DEDENT, scalar("d"), COLON, scalar("e"), NEWLINE,
        ]

    def test_multi_level_dedent(self) -> None:
        tokens = tokenize("a:\n  b:\n    c: d\ne: f")
        assert tokens == [
            scalar("a"), COLON, NEWLINE,
            INDENT, scalar("b"), COLON, NEWLINE,
            INDENT, scalar("c"), COLON, scalar("d"), NEWLINE,
            DEDENT, DEDENT, scalar("e"), COLON, scalar("f"), NEWLINE,
        ]

    def test_partial_dedent_between_levels(self) -> None:
        """Dedenting to a level never seen before emits no DEDENT until later."""
        assert tokenize("a:\n    b:\n  c: d") == [
            scalar("a"), COLON, NEWLINE,
            INDENT, scalar("b"), COLON, NEWLINE,
            scalar("c"), COLON, scalar("d"), NEWLINE,
            DEDENT,
        ]

    def test_unterminated_indentation_flushed(self) -> None:
        tokens = tokenize("a:\n  b:\n    c: d")
        assert tokens[-2:] == [DEDENT, DEDENT]

    def test_whitespace_only_line_counts_its_spaces(self) -> None:
        assert tokenize("a:\n  \nb") == [
            scalar("a"), COLON, NEWLINE,
            INDENT, NEWLINE,
            DEDENT, scalar("b"), NEWLINE,
        ]

    def test_document_starting_indented(self) -> None:
        assert tokenize("  a: 1") == [INDENT, scalar("a"), COLON, scalar("1"), NEWLINE, DEDENT]


class TestTabIndentation:
    """Tabs are not indentation: a tab-led line sits at level 0."""

    def test_tab_line_has_no_indent_tokens(self) -> None:
        assert tokenize("a:\n\tb: c") == [
            scalar("a"), COLON, NEWLINE,
            scalar("b"), COLON, scalar("c"), NEWLINE,
        ]

    def test_spaces_after_tab_do_not_count(self) -> None:
        assert measure_indent("\t  b") == 0

    def test_tab_after_spaces_stops_count(self) -> None:
        assert measure_indent("  \tb") == 2


class TestLineNumbers:
    """Tokens remember their source line for diagnostics."""

    def test_linenos(self) -> None:
        tokens = tokenize("a: 1\nb: 2")
        assert [t.lineno for t in tokens] == [1, 1, 1, 1, 2, 2, 2, 2]

    def test_flush_dedent_uses_last_line(self) -> None:
        tokens = tokenize("a:\n  b: c")
        assert tokens[-1].type is TokenType.DEDENT
        assert tokens[-1].lineno == 2

    def test_lineno_not_part_of_equality(self) -> None:
        assert Token(TokenType.SCALAR, "a", lineno=7) == scalar("a")
        assert hash(Token(TokenType.DASH, lineno=3)) == hash(DASH)


class TestClassifyLine:
    """Direct tests of the pure line classifier."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("", []),
            ("   ", []),
            ("- x", [DASH, scalar("x")]),
            ("k: v", [scalar("k"), COLON, scalar("v")]),
            ("k:", [scalar("k"), COLON]),
            ("  plain  ", [scalar("plain")]),
        ],
    )
    def test_classify(self, line: str, expected: list[Token]) -> None:
        assert classify_line(line) == expected

    def test_lineno_attached(self) -> None:
        assert all(t.lineno == 5 for t in classify_line("k: v", 5))
