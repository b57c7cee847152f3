from __future__ import annotations

import json
import math
import os
import tempfile
from typing import Any, Optional

import gradio as gr
import structlog

from .errors import ExtractionError, InvalidSchemaError
from .extractor import ExampleDataExtractor
from .io_utils import parse_schema_text, read_schema_content
from .pointers import ROOT_POINTER, find_subschema_pointers, resolve_pointer
from .settings import get_settings

logger = structlog.get_logger(__name__)


def prepare_schema_payload(schema: Any, source: str):
    pointers = find_subschema_pointers(schema)
    logger.info("schema_loaded", source=source, targets=len(pointers))
    message = f"Schema loaded from {source}. Found {len(pointers)} extraction targets."
    return schema, gr.update(choices=pointers, value=ROOT_POINTER), message


def load_schema_file(file_obj):
    if file_obj is None:
        return None, gr.update(choices=[ROOT_POINTER], value=ROOT_POINTER), "No file uploaded."

    try:
        schema = read_schema_content(file_obj)
    except (ExtractionError, OSError) as e:
        logger.warning("schema_load_failed", source="file", error=str(e))
        return None, gr.update(choices=[ROOT_POINTER], value=ROOT_POINTER), f"Error loading schema: {e}"

    return prepare_schema_payload(schema, "file")


def load_schema_text(text: str):
    try:
        schema = parse_schema_text(text)
    except ExtractionError as e:
        logger.warning("schema_load_failed", source="text", error=str(e))
        return None, gr.update(choices=[ROOT_POINTER], value=ROOT_POINTER), f"Error loading schema: {e}"

    return prepare_schema_payload(schema, "text")


def parse_optional_int(value: Any) -> Optional[int]:
    """Gradio number boxes hand over None, floats or blank strings."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSchemaError(f"Expected a whole number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidSchemaError(f"Expected a finite number, got {value!r}")
    return int(number)


def build_extractor(preserve_case: Optional[bool] = None, seed: Any = None, max_depth: Any = None) -> ExampleDataExtractor:
    settings = get_settings()
    seed = parse_optional_int(seed)
    max_depth = parse_optional_int(max_depth)
    return ExampleDataExtractor(
        preserve_case=settings.preserve_case if preserve_case is None else preserve_case,
        seed=settings.seed if seed is None else seed,
        max_depth=settings.max_depth if max_depth is None else max_depth,
    )


def generate_example_handler(schema, pointer, preserve_case=None, seed=None, max_depth=None):
    """Extract an example for the node at `pointer`, with the whole document as root."""
    if schema is None:
        return None, "No schema loaded."

    pointer = pointer or ROOT_POINTER
    try:
        component = resolve_pointer(schema, pointer)
        extractor = build_extractor(preserve_case, seed, max_depth)
        example = extractor.extract(component, schema)
    except ExtractionError as e:
        logger.warning("example_generation_failed", pointer=pointer, error=str(e))
        return None, f"Error generating example: {e}"
    except RecursionError:
        logger.warning("example_generation_failed", pointer=pointer, error="recursion")
        return None, "Error generating example: the schema references itself without end. Set a depth limit."

    logger.info("example_generated", pointer=pointer)
    return example, f"Generated example for {pointer}."


def export_example_handler(example, file_name):
    if example is None:
        return None, "No example generated."

    # Exports always land in the temp directory.
    file_name = os.path.basename((file_name or "").strip())
    if not file_name:
        file_name = "example"
    if not file_name.lower().endswith(".json"):
        file_name += ".json"

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        content = json.dumps(example, indent=get_settings().indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("example_export_failed", path=path, error=str(e))
        return None, f"Error during export: {e}"

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        logger.error("example_export_failed", path=path, error=str(e))
        return None, f"Error during export: {e}"

    logger.info("example_exported", path=path)
    return path, f"Export successful! Saved to {path}"
