"""Extractor settings, read from environment variables and an optional .env file."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal, Optional

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_to_lowercase(v):
    if isinstance(v, str):
        return v.lower()
    return v


class ExtractorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EXAMPLE_EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: Optional[int] = Field(
        default=None, ge=0, description="Nesting limit for cyclic schemas; unset means no limit"
    )
    preserve_case: bool = Field(default=False, description="Keep 'ID' property names as written")
    seed: Optional[int] = Field(default=None, description="Seed for array length selection")
    indent: int = Field(default=2, ge=0, description="Indentation of exported JSON")

    log_level: Annotated[
        Literal["debug", "info", "warning", "error"],
        BeforeValidator(normalize_to_lowercase),
    ] = Field(default="info", description="Log level")
    log_format: Literal["console", "json"] = Field(default="console", description="Log renderer")


@lru_cache
def get_settings() -> ExtractorSettings:
    """Get cached settings instance."""
    return ExtractorSettings()
