"""Exception classes for plainyaml.

The default parse mode never raises: malformed input degrades to partial
or absent output. These exceptions are raised only in strict mode
(``ParseConfig(strict=True)``).
"""

from __future__ import annotations


class PlainYAMLError(Exception):
    """Base exception for all plainyaml errors."""

    pass


class ParseError(PlainYAMLError):
    """Malformed token arrangement found by the strict parser."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed); 0 and
                None both mean unknown
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno or None
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if self.lineno is not None:
            location += f"{self.lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
