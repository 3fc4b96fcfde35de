"""
plainyaml — Minimal indentation-based YAML-subset parser

Parses a small, predictable subset of YAML (block mappings, dash
sequences, raw string scalars) into an immutable node tree. Zero runtime
dependencies; meant for embedding lightweight config parsing.

Quick Start:
    >>> from plainyaml import parse_document, to_python
    >>> doc = parse_document("name: demo\\nserver:\\n  port: 8080")
    >>> to_python(doc)
    {'name': 'demo', 'server': {'port': '8080'}}

Lower level:
    >>> from plainyaml import parse, tokenize
    >>> parse(tokenize("a: 1"))
    Mapping(entries=mappingproxy({'a': Scalar(value='1')}))

Not supported: multi-document streams, anchors/aliases, tags, flow
collections, block scalars, quoting/escaping, comments, and typed scalars.
Malformed input degrades silently unless strict mode is enabled:
    >>> from plainyaml import ParseConfig
    >>> parse_document("- x\\n- y", config=ParseConfig(strict=True))
    Traceback (most recent call last):
    ...
    plainyaml.errors.ParseError: 2 unexpected DASH after document root (3 token(s) ignored)
"""

from plainyaml.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from plainyaml.errors import ParseError, PlainYAMLError
from plainyaml.lexer import Lexer, tokenize
from plainyaml.nodes import Mapping, Scalar, Sequence, YAMLNode
from plainyaml.parser import Parser, parse
from plainyaml.serialization import to_python
from plainyaml.tokens import Token, TokenType
from plainyaml.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse_document(
    text: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> YAMLNode | None:
    """Tokenize and parse a document in one call.

    Args:
        text: Document source text
        source_file: Optional source file path for error messages
        config: Parse configuration for this call only; the active
            context configuration is used when None

    Returns:
        Root node, or None for an empty document.

    Raises:
        ParseError: Only with a strict config, on malformed input.

    Example:
        >>> parse_document("a: 1\\na: 2")
        Mapping(entries=mappingproxy({'a': Scalar(value='2')}))
    """
    tokens = tokenize(text)
    logger.debug("Tokenized %s into %d tokens", source_file or "<string>", len(tokens))

    if config is None:
        return Parser(tokens, source_file=source_file).parse()
    with parse_config_context(config):
        return Parser(tokens, source_file=source_file).parse()


__all__ = [
    # Parsing
    "parse",
    "parse_document",
    "tokenize",
    "Lexer",
    "Parser",
    # Model
    "Mapping",
    "Scalar",
    "Sequence",
    "Token",
    "TokenType",
    "YAMLNode",
    # Conversion
    "to_python",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ParseError",
    "PlainYAMLError",
]
