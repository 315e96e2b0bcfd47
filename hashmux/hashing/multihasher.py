"""
Multi-algorithm hasher.

MultiHasher computes any number of digests over the same byte stream in
one pass and keeps count of the bytes it accepted.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.exceptions import DigestWriteError, HasherStateError, UnsupportedAlgorithmError
from ..core.interfaces.digest import DigestComputer
from .result import HashInfo
from .strategies import AlgorithmDescriptor
from .writer import FanOutWriter


def _get_logger():
    from ..core.di import resolve_or_default
    from ..core.interfaces.logger import ILogger
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


class MultiHasher:
    """
    Hash writer that updates every requested algorithm on each write.

    Digests can be read at any point; hashlib and blake3 computers are
    not finalized by it, so writing may continue afterwards. Instances
    are not thread safe.

    Example:
        hasher = MultiHasher([MD5, SHA256])
        hasher.write(b"hello")
        print(hasher.get_hash_info())
    """

    def __init__(self, algorithms: Iterable[AlgorithmDescriptor]):
        """
        Build one digest computer per algorithm.

        Args:
            algorithms: Descriptors to compute; repeats are ignored
        """
        self._hashers: dict[AlgorithmDescriptor, DigestComputer] = {}
        for algorithm in algorithms:
            if algorithm not in self._hashers:
                self._hashers[algorithm] = algorithm.new()

        self._writer = FanOutWriter(self._hashers.items())
        self._size = 0
        self._failed = False

        _get_logger().debug(
            "MultiHasher created for %s", ", ".join(a.name for a in self._hashers) or "(none)"
        )

    def _ensure_usable(self) -> None:
        if not self.writable():
            raise HasherStateError(
                "MultiHasher is unusable after a failed write",
                context={"size": self._size},
            )

    def write(self, data: bytes) -> int:
        """
        Feed data to every algorithm.

        Args:
            data: Any bytes-like object

        Returns:
            Number of bytes accepted

        Raises:
            DigestWriteError: If a digest computer rejected the data; the
                instance refuses further use afterwards
            HasherStateError: If an earlier write failed
        """
        self._ensure_usable()
        try:
            n = self._writer.write(data)
        except DigestWriteError as e:
            self._failed = True
            _get_logger().error("Fan-out write failed after %d bytes: %s", self._size, e)
            raise
        self._size += n
        return n

    def writable(self) -> bool:
        """Return False once a write has failed; the instance is then unusable."""
        return not self._failed

    def sum(self, algorithm: AlgorithmDescriptor) -> bytes:
        """
        Return the current raw digest for algorithm.

        Raises:
            UnsupportedAlgorithmError: If this hasher was not built with it
            HasherStateError: If an earlier write failed
        """
        self._ensure_usable()
        hasher = self._hashers.get(algorithm)
        if hasher is None:
            raise UnsupportedAlgorithmError(algorithm=getattr(algorithm, "name", str(algorithm)))
        return hasher.digest()

    def hexdigest(self, algorithm: AlgorithmDescriptor) -> str:
        """Return the current digest for algorithm as lowercase hex."""
        return self.sum(algorithm).hex()

    def get_hash_info(self) -> HashInfo:
        """Snapshot the hex digest of every algorithm."""
        self._ensure_usable()
        return HashInfo({algorithm: h.digest().hex() for algorithm, h in self._hashers.items()})

    @property
    def size(self) -> int:
        """Total number of bytes written so far."""
        return self._size

    @property
    def algorithms(self) -> tuple[AlgorithmDescriptor, ...]:
        return tuple(self._hashers)

    def __repr__(self) -> str:
        names = ", ".join(a.name for a in self._hashers)
        return f"MultiHasher([{names}], size={self._size})"
