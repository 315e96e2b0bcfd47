"""
Pydantic models for hashmux.

This package provides typed, validated models for hashmux configuration.
"""

from .base import HashmuxBaseModel
from .config import (
    DEFAULT_CHUNK_SIZE,
    ConfigBaseModel,
    HashConfig,
    LoggingConfig,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ConfigBaseModel",
    "HashConfig",
    "HashmuxBaseModel",
    "LoggingConfig",
]
