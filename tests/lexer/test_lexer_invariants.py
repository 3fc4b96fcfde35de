"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from plainyaml.lexer import tokenize
from plainyaml.lexer.classifiers import WHITESPACE
from plainyaml.tokens import TokenType

# Biased toward structure-bearing characters
_YAMLISH = st.text(alphabet=" \t\n-:abc\r", max_size=300)


def _line_count(text: str) -> int:
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


class TestStructuralInvariants:
    """Properties every token list must satisfy."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_indent_dedent_balanced(self, source: str) -> None:
        tokens = tokenize(source)
        indents = sum(1 for t in tokens if t.type is TokenType.INDENT)
        dedents = sum(1 for t in tokens if t.type is TokenType.DEDENT)
        assert indents == dedents

    @given(_YAMLISH)
    @settings(max_examples=200)
    def test_depth_never_negative(self, source: str) -> None:
        depth = 0
        for token in tokenize(source):
            if token.type is TokenType.INDENT:
                depth += 1
            elif token.type is TokenType.DEDENT:
                depth -= 1
            assert depth >= 0
        assert depth == 0

    @given(_YAMLISH)
    @settings(max_examples=200)
    def test_one_newline_per_line(self, source: str) -> None:
        tokens = tokenize(source)
        newlines = sum(1 for t in tokens if t.type is TokenType.NEWLINE)
        assert newlines == _line_count(source)


class TestScalarInvariants:
    """Scalars are single-line and trimmed."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_scalars_single_line_and_trimmed(self, source: str) -> None:
        for token in tokenize(source):
            if token.type is TokenType.SCALAR:
                assert "\n" not in token.value
                assert token.value == token.value.strip(WHITESPACE)

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_structural_tokens_have_no_value(self, source: str) -> None:
        for token in tokenize(source):
            if token.type is not TokenType.SCALAR:
                assert token.value == ""

    @given(_YAMLISH)
    @settings(max_examples=100)
    def test_linenos_within_source(self, source: str) -> None:
        lines = _line_count(source)
        for token in tokenize(source):
            assert 1 <= token.lineno <= lines
