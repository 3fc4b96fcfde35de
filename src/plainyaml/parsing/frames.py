"""Frames for the parser's explicit block stack.

Each frame is one container under construction. The parser pushes a frame
when a DASH or INDENT opens a container, feeds it child nodes, and pops it
once the container's tokens run out. Nesting depth therefore costs list
entries, not interpreter stack frames.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plainyaml.nodes import YAMLNode
    from plainyaml.tokens import Token


@dataclass(slots=True)
class SequenceFrame:
    """A Sequence being filled from one or more dash lines.

    Attributes:
        dash: The DASH token whose items are being collected
        items: Nodes collected so far
        start: len(items) when ``dash`` began, to detect an empty entry

    """

    dash: Token
    items: list[YAMLNode] = field(default_factory=list)
    start: int = 0


@dataclass(slots=True)
class MappingFrame:
    """A Mapping being filled from key/value pairs.

    Attributes:
        root: Implicit document-level mapping; runs to the end of tokens
        entries: Pairs collected so far (last write wins)
        key: Key token awaiting its value, or None between pairs

    """

    root: bool = False
    entries: dict[str, YAMLNode] = field(default_factory=dict)
    key: Token | None = None


Frame = SequenceFrame | MappingFrame
