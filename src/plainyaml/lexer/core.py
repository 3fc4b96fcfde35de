"""Line-based lexer with indentation tracking.

Processes the document one line at a time: resolve the line's indentation
against an indent stack (emitting INDENT/DEDENT), classify the trimmed
content, then emit NEWLINE. After the last line the stack is flushed so
INDENT and DEDENT counts always balance.

The lexer is total: every string tokenizes, nothing raises, and the cost
is linear in the input length.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from plainyaml.lexer.classifiers import classify_line, measure_indent
from plainyaml.tokens import Token, TokenType


class Lexer:
    """Indentation-aware line lexer.

    Usage:
        >>> Lexer("a:\\n  b: c").tokenize()
        [Token(SCALAR, 'a'), Token(COLON), Token(NEWLINE), Token(INDENT),
         Token(SCALAR, 'b'), Token(COLON), Token(SCALAR, 'c'),
         Token(NEWLINE), Token(DEDENT)]

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_indent",  # Indent level of the current block
        "_indent_stack",  # Enclosing block levels, innermost last
        "_lineno",
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._indent = 0
        self._indent_stack: list[int] = []
        self._lineno = 0

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Fully materialized token list. Empty for empty source.
        """
        for line in self._lines():
            self._lineno += 1
            self._resolve_indent(measure_indent(line))
            self._tokens.extend(classify_line(line, self._lineno))
            self._emit(TokenType.NEWLINE)

        while self._indent_stack:
            self._indent_stack.pop()
            self._emit(TokenType.DEDENT)
        self._indent = 0

        return self._tokens

    def _lines(self) -> list[str]:
        """Split source into lines.

        A final "\\n" terminates the last line rather than opening an empty
        one; an unterminated last line is still a line.
        """
        if not self._source:
            return []
        lines = self._source.split("\n")
        if self._source.endswith("\n"):
            lines.pop()
        return lines

    def _resolve_indent(self, level: int) -> None:
        if level > self._indent:
            self._emit(TokenType.INDENT)
            self._indent_stack.append(self._indent)
            self._indent = level
        elif level < self._indent:
            while self._indent_stack and self._indent_stack[-1] >= level:
                self._indent_stack.pop()
                self._emit(TokenType.DEDENT)
            self._indent = level

    def _emit(self, token_type: TokenType) -> None:
        self._tokens.append(Token(token_type, lineno=self._lineno))


def tokenize(text: str) -> list[Token]:
    """Convert document text into a list of structural tokens."""
    return Lexer(text).tokenize()
