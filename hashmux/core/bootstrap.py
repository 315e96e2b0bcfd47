"""
Application bootstrap for hashmux.

Initializes the DI container with settings, the logger and the algorithm
registry. Call once at application startup, before hashing begins.
"""

from __future__ import annotations

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .settings import HashmuxSettings, load_settings

_initialized = False


def bootstrap(
    settings: HashmuxSettings | None = None,
    config_path: Path | None = None,
    start_dir: str | None = None,
) -> ServiceContainer:
    """
    Bootstrap the hashmux application.

    Registers:
    - HashmuxSettings (given, or loaded from config_path / start_dir)
    - ILogger built from the logging section
    - HashAlgorithmRegistry: a copy of the default registry plus hash.extra algorithms

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path, start_dir=start_dir)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: HashmuxSettings) -> None:
    """Register core application services."""
    from ..hashing.registry import HashAlgorithmRegistry, default_registry
    from ..services.logging import HashmuxLogger

    container.register_singleton(HashmuxSettings, implementation=settings)

    def create_logger() -> ILogger:
        return HashmuxLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
            file_path=settings.logging.file_path,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    # Copy so MD5/SHA1/SHA256 stay valid keys while extras stay out of the default
    registry = default_registry().copy()
    registry.register_extras(settings.hash.extra)
    container.register_singleton(HashAlgorithmRegistry, implementation=registry)

    if settings.config_error:
        container.resolve(ILogger).warning("%s", settings.config_error)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
