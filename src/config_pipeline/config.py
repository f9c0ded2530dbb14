"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with PIPELINE_
  - Fall back to a .env file
  - Validate types and constraints at startup

Only AppSettings is a BaseSettings instance. Stage sections are plain
BaseModel classes populated via env_nested_delimiter="__", so the env var
PIPELINE_LOADER__ENCODING maps to loader.encoding,
PIPELINE_PROCESSOR__MIN_LENGTH maps to processor.min_length, etc.

Every stage default reproduces the reference behaviour: "malformed" and
"invalid_field" markers, the "Validated: " prefix and a minimum length of 10.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config_pipeline.adapters.file_loader import MALFORMED_MARKER
from config_pipeline.adapters.length_processor import MIN_LENGTH
from config_pipeline.adapters.sentinel_validator import INVALID_FIELD_MARKER, VALIDATED_PREFIX

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class LoaderSettings(BaseModel):
    """Load stage configuration."""

    encoding: str = Field(default="utf-8", description="Text encoding of configuration sources")
    malformed_marker: str = Field(
        default=MALFORMED_MARKER,
        min_length=1,
        description="Substring that marks a source as malformed",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
        return value


class ValidatorSettings(BaseModel):
    """Validate stage configuration."""

    invalid_marker: str = Field(
        default=INVALID_FIELD_MARKER,
        min_length=1,
        description="Substring that fails validation",
    )
    prefix: str = Field(default=VALIDATED_PREFIX, description="Prefix applied to validated text")


class ProcessorSettings(BaseModel):
    """Process stage configuration."""

    min_length: int = Field(
        default=MIN_LENGTH,
        ge=0,
        description="Minimum validated text length, prefix included",
    )


class AppSettings(BaseSettings):
    """
    Root application settings — aggregates all sub-settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values

    `sources` lists the files to run through the pipeline
    (PIPELINE_SOURCES='["a.txt", "b.txt"]'); when empty and no paths are
    given on the command line, the built-in demo scenarios run instead.
    """

    model_config = SettingsConfigDict(
        env_prefix="PIPELINE_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    loader: LoaderSettings = Field(default_factory=lambda: LoaderSettings())
    validator: ValidatorSettings = Field(default_factory=lambda: ValidatorSettings())
    processor: ProcessorSettings = Field(default_factory=lambda: ProcessorSettings())

    sources: list[str] = Field(default_factory=list)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only standard logging level names, case-insensitively."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
