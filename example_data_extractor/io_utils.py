from __future__ import annotations

import json
from typing import Any

from .errors import InvalidSchemaError


def parse_schema_text(text: str) -> Any:
    """Parse a schema pasted as JSON text."""
    if text is None or not text.strip():
        raise InvalidSchemaError("No schema text provided.")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidSchemaError(f"Schema is not valid JSON: {exc}") from exc


def read_schema_content(file_obj) -> Any:
    """Read a schema from an uploaded file object or a file path."""
    if file_obj is None:
        raise InvalidSchemaError("No schema file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return parse_schema_text(content)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return parse_schema_text(f.read())
