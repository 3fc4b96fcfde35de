"""Token navigation utilities for the plainyaml parser.

Provides mixin for token stream navigation and basic parsing operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plainyaml.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _current: Token | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None

    def _at_end(self) -> bool:
        """Check if the cursor has run past the last token."""
        return self._current is None

    def _at(self, *types: TokenType) -> bool:
        """Check whether the current token has one of the given types."""
        return self._current is not None and self._current.type in types

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _peek(self, offset: int = 1) -> Token | None:
        """Peek at token at offset from current position."""
        pos = self._pos + offset
        if pos < self._tokens_len:
            return self._tokens[pos]
        return None

    def _skip_ahead(self, token_type: TokenType, offset: int = 0) -> int:
        """Return the first offset at or after ``offset`` whose token is not ``token_type``."""
        while (token := self._peek(offset)) is not None and token.type is token_type:
            offset += 1
        return offset
