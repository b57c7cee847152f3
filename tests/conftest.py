"""
Pytest Configuration and Shared Fixtures.

Schemas used across the extractor, pointer and handler tests.
"""

from typing import Any

import pytest

from example_data_extractor.extractor import ExampleDataExtractor
from example_data_extractor.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def extractor() -> ExampleDataExtractor:
    return ExampleDataExtractor(seed=1234)


@pytest.fixture
def user_schema() -> dict[str, Any]:
    """A hyper-schema style resource with nested definitions."""
    return {
        "id": "schema/user",
        "title": "User",
        "definitions": {
            "identity": {
                "properties": {
                    "ID": {"type": "string", "example": "usr_01"},
                },
            },
            "address": {
                "properties": {
                    "street": {"type": "string", "example": "1 Main St"},
                    "city": {"type": "string", "default": "Springfield"},
                },
            },
        },
        "allOf": [
            {"properties": {"ID": {"type": "string", "example": "usr_01"}}},
        ],
        "properties": {
            "name": {"type": "string", "example": "Ada"},
            "email": {"type": "string", "default": "ada@example.com"},
            "tags": {"type": "array", "items": {"type": "string", "example": "admin"}},
            "address": {
                "properties": {
                    "street": {"type": "string", "example": "1 Main St"},
                    "city": {"type": "string", "default": "Springfield"},
                },
            },
            "__internal": {"type": "string", "example": "hidden"},
            "password": {"type": "string", "example": "secret", "private": True},
        },
    }
