"""ContextVar-based parse configuration for plainyaml.

Provides context-local configuration using Python's ContextVars (PEP 567).
The parser reads the active config once per parse; it is never passed
through the recursive descent.

Usage:
    from plainyaml.config import ParseConfig, parse_config_context
    from plainyaml import parse_document

    with parse_config_context(ParseConfig(strict=True)):
        node = parse_document("a: 1")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        strict: Raise ParseError on malformed token arrangements instead
            of silently dropping data
        merge_sequences: Collect consecutive same-level "- " lines into one
            Sequence instead of one Sequence per dash

    """

    strict: bool = False
    merge_sequences: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary, ignoring unknown keys.

        Example:
            >>> ParseConfig.from_dict({"strict": True, "other": 1}).strict
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "plainyaml_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the active parse configuration for this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context only."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset the current context to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(merge_sequences=True)):
        ...     node = parse_document("- x\\n- y")
        >>> # Previous config is back here

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
