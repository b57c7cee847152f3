from __future__ import annotations


class ExtractionError(Exception):
    """Base class for errors raised while building example data."""


class InvalidSchemaError(ExtractionError, ValueError):
    """Raised when no usable schema was supplied."""


class SchemaDepthExceededError(ExtractionError):
    """Raised when an extractor configured with ``max_depth`` recurses past it."""

    def __init__(self, max_depth: int):
        super().__init__(f"Schema nesting exceeded the maximum depth of {max_depth}.")
        self.max_depth = max_depth
