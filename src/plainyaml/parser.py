"""Recursive descent parser producing a plainyaml node tree.

Consumes the token list from the Lexer and builds immutable nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token list traversal
- `BlockParsingMixin`: Scalars, sequences and mappings

Failure Policy:
By default the parser never raises. Malformed token arrangements degrade
to an absent node, an empty container or a partially built one, and the
dropped pieces are logged at DEBUG level. With ``ParseConfig(strict=True)``
the same situations raise ParseError instead.

Thread Safety:
- Parser instances are single-use; the cursor is instance state
- Configuration is read from ContextVar (context-local)
- The resulting tree is immutable and safe to share

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from plainyaml.config import get_parse_config
from plainyaml.errors import ParseError
from plainyaml.parsing import BlockParsingMixin, TokenNavigationMixin
from plainyaml.tokens import Token, TokenType
from plainyaml.utils.logger import get_logger

if TYPE_CHECKING:
    from plainyaml.nodes import YAMLNode

logger = get_logger(__name__)

# Tokens that may follow the root node without losing data
_TRAILING_OK = frozenset({TokenType.NEWLINE, TokenType.DEDENT})


class Parser(
    TokenNavigationMixin,
    BlockParsingMixin,
):
    """Recursive descent parser over a token list.

    Accepts any token sequence, including hand-built ones that the lexer
    would never produce.

    Usage:
        >>> from plainyaml.lexer import tokenize
        >>> Parser(tokenize("a: 1")).parse()
        Mapping(entries=mappingproxy({'a': Scalar(value='1')}))

    Root Entry:
        A document whose first significant tokens are SCALAR COLON (a
        ``key: value`` line at column 0) is parsed as an implicit root
        mapping that runs to the end of the tokens. Anything else is a
        single call to the node dispatch.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_config",
        "_source_file",
    )

    def __init__(
        self,
        tokens: Iterable[Token],
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with a token sequence.

        Configuration is read from ContextVar at construction time. Use
        parse_config_context() before creating a Parser for non-default
        behavior.

        Args:
            tokens: Token sequence, typically from tokenize()
            source_file: Optional source file path for error messages

        """
        self._tokens: list[Token] = list(tokens)
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current: Token | None = self._tokens[0] if self._tokens else None
        self._config = get_parse_config()
        self._source_file = source_file

    def parse(self) -> YAMLNode | None:
        """Parse the tokens into a single root node.

        Returns:
            The root node, or None for empty input and for token lists
            that start with nothing parseable.

        Raises:
            ParseError: Only in strict mode, on malformed input.
        """
        if self._starts_root_mapping():
            root = self._parse_root_mapping()
        else:
            root = self._parse_node()
        self._check_trailing()
        return root

    def _starts_root_mapping(self) -> bool:
        offset = self._skip_ahead(TokenType.NEWLINE)
        key = self._peek(offset)
        colon = self._peek(offset + 1)
        return (
            key is not None
            and key.type is TokenType.SCALAR
            and colon is not None
            and colon.type is TokenType.COLON
        )

    def _check_trailing(self) -> None:
        """Report content left unparsed after the root node."""
        for pos in range(self._pos, self._tokens_len):
            token = self._tokens[pos]
            if token.type not in _TRAILING_OK:
                remaining = self._tokens_len - pos
                self._malformed(
                    token,
                    f"unexpected {token.type.name} after document root "
                    f"({remaining} token(s) ignored)",
                )
                return

    def _malformed(self, token: Token, message: str) -> None:
        if self._config.strict:
            raise ParseError(message, lineno=token.lineno, source_file=self._source_file)
        logger.debug(
            "Dropping malformed input at line %s: %s",
            token.lineno or "?",
            message,
        )


def parse(tokens: Iterable[Token], *, source_file: str | None = None) -> YAMLNode | None:
    """Parse a token sequence into an optional root node."""
    return Parser(tokens, source_file=source_file).parse()
