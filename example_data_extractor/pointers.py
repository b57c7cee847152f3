from __future__ import annotations

from typing import Any, List

from .errors import InvalidSchemaError
from .leaves import is_plain_mapping

ROOT_POINTER = '/'

# Keywords that make a mapping worth offering as an extraction target.
STRUCTURAL_KEYWORDS = ('properties', 'items', 'allOf', 'oneOf', 'anyOf', 'rel', 'id', 'type')


def escape_pointer_token(token: Any) -> str:
    """Escape a key for use as a JSON Pointer token (RFC 6901).

    '~' becomes '~0' and '/' becomes '~1', in that order.
    """
    if not isinstance(token, str):
        token = str(token)
    return token.replace('~', '~0').replace('/', '~1')


def unescape_pointer_token(token: str) -> str:
    return token.replace('~1', '/').replace('~0', '~')


def split_pointer(pointer: str) -> List[str]:
    """Split a pointer into unescaped tokens; '' and '/' address the document."""
    if pointer in (None, '', ROOT_POINTER):
        return []
    if not pointer.startswith('/'):
        raise InvalidSchemaError(f"JSON Pointer must start with '/': {pointer!r}")
    return [unescape_pointer_token(part) for part in pointer[1:].split('/')]


def join_pointer(parent: str, token: Any) -> str:
    prefix = '' if parent in ('', ROOT_POINTER) else parent
    return f"{prefix}/{escape_pointer_token(token)}"


def is_array_index(token: str) -> bool:
    """Array indices are digits without leading zeros (RFC 6901)."""
    return token.isdigit() and (token == '0' or not token.startswith('0'))


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Return the node addressed by `pointer` inside `document`."""
    node = document
    for token in split_pointer(pointer):
        if is_plain_mapping(node) and token in node:
            node = node[token]
        elif isinstance(node, list) and is_array_index(token) and int(token) < len(node):
            node = node[int(token)]
        else:
            raise InvalidSchemaError(f"Pointer {pointer!r} does not resolve at {token!r}")
    return node


def find_subschema_pointers(document: Any) -> List[str]:
    """Find pointers to every schema node that can be extracted on its own.

    The document itself is always listed first as '/'.
    """
    pointers: List[str] = []

    def walk(node, current):
        if is_plain_mapping(node):
            for key, value in node.items():
                child = join_pointer(current, key)
                if is_plain_mapping(value) and any(k in value for k in STRUCTURAL_KEYWORDS):
                    pointers.append(child)
                walk(value, child)
        elif isinstance(node, list):
            for idx, value in enumerate(node):
                child = join_pointer(current, idx)
                if is_plain_mapping(value) and any(k in value for k in STRUCTURAL_KEYWORDS):
                    pointers.append(child)
                walk(value, child)

    walk(document, '')
    return [ROOT_POINTER] + sorted(pointers)
