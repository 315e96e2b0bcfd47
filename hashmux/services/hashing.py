"""
File hashing service.

Computes several digests of files in a single read pass, using the
algorithm registry to resolve names.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.di import resolve_or_default
from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_CHUNK_SIZE
from ..hashing.registry import HashAlgorithmRegistry, default_registry
from ..hashing.result import HashInfo
from ..hashing.strategies import AlgorithmDescriptor
from ..hashing.streams import hash_reader_multi
from .logging import NullLogger


class FileHashingService:
    """
    Default implementation of the hashing service.

    Algorithms may be passed as descriptors or as names/aliases known to
    the registry.
    """

    def __init__(
        self,
        registry: HashAlgorithmRegistry | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: ILogger | None = None,
    ):
        """
        Initialize hashing service.

        Args:
            registry: Hash algorithm registry (defaults to the container's,
                or the process-wide default registry)
            chunk_size: Bytes per read call
            logger: Logger (defaults to the container's ILogger)
        """
        if registry is None:
            registry = resolve_or_default(HashAlgorithmRegistry, default_registry)
        self._registry = registry
        self._chunk_size = chunk_size
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    @property
    def registry(self) -> HashAlgorithmRegistry:
        return self._registry

    def hash_path(
        self, path: str, algorithms: Iterable[AlgorithmDescriptor | str]
    ) -> HashInfo:
        """
        Compute several digests of one file in a single pass.

        Raises:
            UnsupportedAlgorithmError: If an algorithm name is unknown
            OSError: If the file cannot be opened
            HashReaderError: If reading fails part-way
        """
        descriptors = self._registry.resolve(algorithms)
        with open(path, "rb") as f:
            info = hash_reader_multi(descriptors, f, self._chunk_size)
        self._logger.debug("Hashed %s with %s", path, ", ".join(d.name for d in descriptors))
        return info

    def hash_paths(
        self, paths: Iterable[str], algorithms: Iterable[AlgorithmDescriptor | str]
    ) -> dict[str, HashInfo]:
        """Compute digests for several files, keyed by path."""
        descriptors = self._registry.resolve(algorithms)
        return {path: self.hash_path(path, descriptors) for path in paths}

    def verify(self, path: str, algorithm: AlgorithmDescriptor | str, expected: str) -> bool:
        """
        Check a file against an expected hex digest.

        Comparison ignores case and surrounding whitespace.
        """
        (descriptor,) = self._registry.resolve([algorithm])
        actual = self.hash_path(path, [descriptor]).get_hash(descriptor)
        matched = actual.lower() == expected.strip().lower()
        if not matched:
            self._logger.info("Digest mismatch for %s (%s)", path, descriptor.name)
        return matched
