"""Token and TokenType definitions for the plainyaml lexer.

The lexer produces a flat list of Token objects that the parser consumes.
Indentation is already resolved into synthetic INDENT/DEDENT tokens, so
the parser never looks at whitespace.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer."""

    SCALAR = auto()  # Raw text: a key or a value
    DASH = auto()  # "- " sequence entry marker
    COLON = auto()  # Key/value separator
    NEWLINE = auto()  # One per source line
    INDENT = auto()  # Entering a deeper indentation block
    DEDENT = auto()  # Leaving an indentation block


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Scalar text; empty for structural tokens
        lineno: Source line the token came from (1-indexed, 0 if unknown).
            Diagnostic metadata only: excluded from equality and hashing so
            hand-built token lists compare equal to lexer output.

    """

    type: TokenType
    value: str = ""
    lineno: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.SCALAR:
            return f"Token(SCALAR, {self.value!r})"
        return f"Token({self.type.name})"


# Shared structural tokens for hand-built token lists and tests.
DASH = Token(TokenType.DASH)
COLON = Token(TokenType.COLON)
NEWLINE = Token(TokenType.NEWLINE)
INDENT = Token(TokenType.INDENT)
DEDENT = Token(TokenType.DEDENT)


def scalar(value: str, lineno: int = 0) -> Token:
    """Create a SCALAR token."""
    return Token(TokenType.SCALAR, value, lineno)
