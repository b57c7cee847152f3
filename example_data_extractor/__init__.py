"""Core logic for the Example Data Extractor.

The Gradio UI lives in `app.py`. This package contains the pieces that:
- build example data from a JSON schema (`extractor`)
- resolve leaf examples and defaults (`leaves`)
- select schema nodes by JSON Pointer (`pointers`)
- load schemas from files or text (`io_utils`)
"""

from .errors import ExtractionError, InvalidSchemaError, SchemaDepthExceededError
from .extractor import ExampleDataExtractor, extract, map_properties_to_examples

__all__ = [
    "ExampleDataExtractor",
    "ExtractionError",
    "InvalidSchemaError",
    "SchemaDepthExceededError",
    "extract",
    "map_properties_to_examples",
]
