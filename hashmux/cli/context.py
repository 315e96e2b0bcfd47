"""
Click context extension for hashmux CLI.

Provides HashmuxContext dataclass that holds the bootstrapped services
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import click

from ..core.bootstrap import bootstrap
from ..core.exceptions import HashmuxConfigError, UnsupportedAlgorithmError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.services import HashingService
from ..core.settings import HashmuxSettings
from ..hashing.registry import HashAlgorithmRegistry
from ..hashing.strategies import AlgorithmDescriptor
from ..services.hashing import FileHashingService


@dataclass
class HashmuxContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Merged configuration
        registry: Algorithm registry (default algorithms plus hash.extra)
        logger: Diagnostic logger
        cwd: Current working directory
    """

    settings: HashmuxSettings
    registry: HashAlgorithmRegistry
    logger: ILogger
    cwd: Path

    @classmethod
    def create(cls, config_path: Path | None = None, cwd: Path | None = None) -> HashmuxContext:
        """Bootstrap the application and gather its services.

        Args:
            config_path: Explicit config file (otherwise searched from cwd)
            cwd: Working directory override (defaults to Path.cwd())

        Raises:
            click.ClickException: If the configuration cannot be loaded
        """
        if cwd is None:
            cwd = Path.cwd()

        try:
            container = bootstrap(config_path=config_path, start_dir=str(cwd))
        except HashmuxConfigError as e:
            raise click.ClickException(str(e)) from e

        return cls(
            settings=container.resolve(HashmuxSettings),
            registry=container.resolve(HashAlgorithmRegistry),
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
            cwd=cwd,
        )

    def resolve_algorithms(
        self, names: Iterable[str], param_hint: str = "'-a' / '--algorithm'"
    ) -> list[AlgorithmDescriptor]:
        """Resolve algorithm names, falling back to hash.default.

        Raises:
            click.BadParameter: If a name is not registered
        """
        names = list(names) or list(self.settings.hash.default)
        try:
            return self.registry.resolve(names)
        except UnsupportedAlgorithmError as e:
            raise click.BadParameter(
                f"unknown algorithm {e.algorithm!r} (available: {', '.join(self.registry.names)})",
                param_hint=param_hint,
            ) from e

    def hashing_service(self) -> HashingService:
        """Build the file hashing service wired to this context."""
        return FileHashingService(
            registry=self.registry,
            chunk_size=self.settings.hash.chunk_size,
            logger=self.logger,
        )
