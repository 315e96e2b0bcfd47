"""
Core infrastructure for hashmux.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Settings loading from TOML and environment
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    DigestWriteError,
    HasherStateError,
    HashmuxConfigError,
    HashmuxException,
    HashmuxHashingError,
    HashmuxIOError,
    HashmuxValidationError,
    HashReaderError,
    SourceRewindError,
    UnsupportedAlgorithmError,
)
from .settings import HashmuxSettings, find_config_file, load_settings

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "DigestWriteError",
    "HashReaderError",
    "HasherStateError",
    "HashmuxConfigError",
    "HashmuxException",
    "HashmuxHashingError",
    "HashmuxIOError",
    "HashmuxSettings",
    "HashmuxValidationError",
    "ServiceContainer",
    "SourceRewindError",
    "UnsupportedAlgorithmError",
    "bootstrap",
    "find_config_file",
    "get_container",
    "is_initialized",
    "load_settings",
    "reset",
]
