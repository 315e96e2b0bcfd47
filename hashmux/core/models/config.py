"""
Configuration models.

Provides Pydantic models for hashmux configuration with validation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import NoDecode

from .base import HashmuxBaseModel

# Type aliases
ExtraAlgorithm = Literal["sha512", "blake3"]
LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_CHUNK_SIZE = 8192 * 1024  # 8MB


def _split_csv(v: Any) -> list[str]:
    if isinstance(v, str):
        if v.lstrip().startswith("["):
            return json.loads(v)
        return [x.strip() for x in v.split(",") if x.strip()]
    return v if v else []


class ConfigBaseModel(HashmuxBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Hash algorithm configuration section."""

    # NoDecode hands raw env strings to parse_comma_separated
    default: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["md5", "sha1", "sha256"]
    )
    extra: Annotated[list[ExtraAlgorithm], NoDecode] = Field(default_factory=list)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @field_validator("default", "extra", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> list[str]:
        """Parse comma-separated string to list."""
        return _split_csv(v)

    @field_validator("default")
    @classmethod
    def require_default(cls, v: list[str]) -> list[str]:
        """Reject an empty default algorithm list."""
        if not v:
            raise ValueError("hash.default must name at least one algorithm")
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    file_path: Path = Field(default_factory=lambda: Path.home() / ".hashmux" / "hashmux.log")

    @field_validator("level", mode="before")
    @classmethod
    def lower_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.lower() if isinstance(v, str) else v

