"""Line classification for the plainyaml lexer.

Pure functions: they look at one line and return tokens, never touching
lexer state. Indentation is handled separately by the Lexer.
"""

from __future__ import annotations

from plainyaml.tokens import Token, TokenType

# ASCII whitespace only; str.strip() with no argument also strips Unicode spaces.
WHITESPACE = " \t\n\r\x0b\x0c"


def measure_indent(line: str) -> int:
    """Count leading spaces of a raw line.

    Only the space character counts. A tab stops the count, so a line
    starting with a tab has indent 0.
    """
    return len(line) - len(line.lstrip(" "))


def classify_line(line: str, lineno: int = 0) -> list[Token]:
    """Classify one line's content into tokens, excluding the NEWLINE.

    - ``- item``: DASH, then SCALAR(item)
    - ``key: value``: SCALAR(key), COLON, then SCALAR(value) if non-empty.
      Splits on the first colon only, so values containing a colon are
      cut short.
    - anything else: SCALAR(line) if non-empty

    Args:
        line: Raw line without its line terminator
        lineno: Source line number attached to the tokens

    Returns:
        Tokens for the line content (may be empty).
    """
    content = line.strip(WHITESPACE)
    tokens: list[Token] = []

    if content.startswith("- "):
        tokens.append(Token(TokenType.DASH, lineno=lineno))
        pending = content[2:].strip(WHITESPACE)
    elif ":" in content:
        key, _, rest = content.partition(":")
        tokens.append(Token(TokenType.SCALAR, key.strip(WHITESPACE), lineno))
        tokens.append(Token(TokenType.COLON, lineno=lineno))
        pending = rest.strip(WHITESPACE)
    else:
        pending = content

    if pending:
        tokens.append(Token(TokenType.SCALAR, pending, lineno))
    return tokens
