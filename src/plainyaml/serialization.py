"""Conversion of plainyaml node trees into plain Python data.

``to_python`` turns a tree into the builtins that ``json.dumps`` or any
config loader expects: Scalar -> str, Sequence -> list, Mapping -> dict.
Scalars stay strings; there is no type inference.

Example:
    from plainyaml import parse_document
    from plainyaml.serialization import to_python

    to_python(parse_document("a: 1\\nb: 2"))
    # {'a': '1', 'b': '2'}

Thread Safety:
    Pure function, safe to call from any thread.

"""

from __future__ import annotations

from typing import Any

from plainyaml.nodes import Mapping, Scalar, Sequence, YAMLNode


def to_python(node: YAMLNode | None) -> Any:
    """Convert a node tree to nested str/list/dict values.

    Args:
        node: Root node, or None for an empty document.

    Returns:
        str, list, dict, or None.

    Raises:
        TypeError: If ``node`` is not a plainyaml node.
    """
    match node:
        case None:
            return None
        case Scalar(value=value):
            return value
        case Sequence(items=items):
            return [to_python(item) for item in items]
        case Mapping(entries=entries):
            return {key: to_python(value) for key, value in entries.items()}
        case _:
            raise TypeError(f"Cannot convert {type(node).__name__} to Python data")
