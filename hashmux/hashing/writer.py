"""
Fan-out writer.

Turns several digest computers into one write sink so a single pass over
the data updates all of them.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.exceptions import DigestWriteError
from ..core.interfaces.digest import DigestComputer
from .strategies import AlgorithmDescriptor


class FanOutWriter:
    """
    Forward every write to a fixed, ordered set of digest computers.

    Each computer sees the same bytes in the same order. A failing
    computer aborts the write; the ones before it keep their update.
    """

    def __init__(self, targets: Iterable[tuple[AlgorithmDescriptor, DigestComputer]]):
        self._targets = list(targets)

    def write(self, data: bytes) -> int:
        """
        Update every computer with data.

        Args:
            data: Any bytes-like object

        Returns:
            Number of bytes written (always the full length)

        Raises:
            TypeError: If data is not bytes-like (no computer is touched)
            DigestWriteError: If a computer rejects the update
        """
        size = memoryview(data).nbytes
        for algorithm, computer in self._targets:
            try:
                computer.update(data)
            except Exception as e:
                raise DigestWriteError(
                    f"Digest update failed for {algorithm.name}",
                    algorithm=algorithm.name,
                    cause=e,
                ) from e
        return size

    def __len__(self) -> int:
        return len(self._targets)
