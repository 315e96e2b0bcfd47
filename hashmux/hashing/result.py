"""
Digest result sets.

HashInfo is a read-only snapshot mapping algorithm descriptors to hex
digests, as produced by MultiHasher.get_hash_info().
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .strategies import AlgorithmDescriptor


class HashInfo:
    """Hex digests for one or more algorithms."""

    def __init__(self, hashes: Mapping[AlgorithmDescriptor, str] | None = None):
        self._hashes: dict[AlgorithmDescriptor, str] = dict(hashes or {})

    @classmethod
    def single(cls, algorithm: AlgorithmDescriptor, digest: str) -> HashInfo:
        """Build a result set holding one precomputed digest."""
        return cls({algorithm: digest})

    def get_hash(self, algorithm: AlgorithmDescriptor) -> str:
        """Return the hex digest for algorithm, or '' if absent."""
        return self._hashes.get(algorithm, "")

    def render(self) -> str:
        """
        Render as ``name:hexdigest`` lines.

        Entries with an empty digest are left out. Lines are sorted by
        algorithm name so the output is stable.
        """
        lines = [
            f"{algorithm.name}:{digest}"
            for algorithm, digest in sorted(self._hashes.items(), key=lambda kv: kv[0].name)
            if digest
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{algorithm name: hex digest}`` for non-empty entries."""
        return {
            algorithm.name: digest
            for algorithm, digest in sorted(self._hashes.items(), key=lambda kv: kv[0].name)
            if digest
        }

    @property
    def algorithms(self) -> list[AlgorithmDescriptor]:
        return list(self._hashes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"HashInfo({self.to_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashInfo):
            return NotImplemented
        return self._hashes == other._hashes

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, algorithm: object) -> bool:
        return algorithm in self._hashes

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(list(self._hashes))

    def __len__(self) -> int:
        return len(self._hashes)
