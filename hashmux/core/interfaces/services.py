"""
Service protocol definitions.

These protocols define the contracts for services built on top of the
hashing core.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...hashing.result import HashInfo
    from ...hashing.strategies import AlgorithmDescriptor


@runtime_checkable
class HashingService(Protocol):
    """Service for computing file digests."""

    def hash_path(
        self, path: str, algorithms: Iterable[AlgorithmDescriptor | str]
    ) -> HashInfo:
        """Compute several digests of one file in a single pass."""
        ...

    def hash_paths(
        self, paths: Iterable[str], algorithms: Iterable[AlgorithmDescriptor | str]
    ) -> dict[str, HashInfo]:
        """Compute digests for several files."""
        ...

    def verify(self, path: str, algorithm: AlgorithmDescriptor | str, expected: str) -> bool:
        """Check a file against an expected hex digest."""
        ...
