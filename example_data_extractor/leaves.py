from __future__ import annotations

from collections.abc import Mapping
from typing import Any

UNKNOWN_EXAMPLE = 'unknown'


def is_plain_mapping(node: Any) -> bool:
    """True for key/value schema nodes (not lists, scalars or None)."""
    return isinstance(node, Mapping)


def node_field(node: Any, key: str) -> Any:
    """Read a keyword from a schema node; non-mapping nodes have no keywords."""
    if is_plain_mapping(node):
        return node.get(key)
    return None


def get_example_from_item(node: Any) -> Any:
    """Resolve the leaf value of a schema node.

    `{'type': 'string', 'example': 'abc'}` -> `'abc'`
    `{'type': 'string', 'default': 'x'}` -> `'x'`
    `'string'` -> `'unknown'`
    """
    if not is_plain_mapping(node):
        return UNKNOWN_EXAMPLE
    if 'example' in node:
        return node['example']
    return node.get('default')
