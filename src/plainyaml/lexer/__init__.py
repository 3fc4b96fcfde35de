"""Indentation-aware lexer for plainyaml.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (indent stack + line loop)
└── classifiers.py       # Pure per-line classification

Usage:
    >>> from plainyaml.lexer import tokenize
    >>> tokenize("a: 1")
    [Token(SCALAR, 'a'), Token(COLON), Token(SCALAR, '1'), Token(NEWLINE)]

"""

from plainyaml.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
