"""Typed document nodes for plainyaml.

A parsed document is a tree built from exactly three node kinds:

- Scalar: raw, untyped leaf text
- Sequence: ordered list of nodes
- Mapping: string keys to nodes, last write wins on duplicate keys

The kinds form a flat union (``YAMLNode``), not a class hierarchy, so
``match`` statements and ``isinstance`` checks against the concrete
classes are the way to inspect a tree.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.
Sequence items are stored as a tuple and mapping entries behind a
read-only ``MappingProxyType`` view.

"""

from __future__ import annotations

import collections.abc
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Scalar:
    """Leaf text value.

    Always a raw string: no number, boolean or null inference.

    """

    value: str


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered list of nodes. Accepts any iterable, stores a tuple."""

    items: tuple[YAMLNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> collections.abc.Iterator[YAMLNode]:
        return iter(self.items)

    def __getitem__(self, index: int) -> YAMLNode:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class Mapping:
    """Key-to-node mapping.

    Equality and hashing ignore insertion order. The entries are copied
    on construction and exposed read-only.

    """

    entries: collections.abc.Mapping[str, YAMLNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> collections.abc.Iterator[str]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> YAMLNode:
        return self.entries[key]

    def get(self, key: str, default: YAMLNode | None = None) -> YAMLNode | None:
        return self.entries.get(key, default)


YAMLNode = Scalar | Sequence | Mapping

__all__ = ["Mapping", "Scalar", "Sequence", "YAMLNode"]
