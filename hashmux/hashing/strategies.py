"""
Algorithm descriptors and the built-in hash strategies.

A strategy knows how to build a digest computer for one algorithm; the
registry turns strategies (or bare factories) into AlgorithmDescriptors,
which are the handles the rest of the package passes around.
"""

from __future__ import annotations

import hashlib
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

import blake3

from ..core.interfaces.digest import DigestComputer

_tokens = itertools.count(1)


@dataclass(frozen=True, eq=False)
class AlgorithmDescriptor:
    """
    Registry handle for one hashing algorithm.

    Descriptors compare and hash by their registration token, so two
    registrations under the same name stay distinct while copies of one
    descriptor remain interchangeable as mapping keys.

    Attributes:
        name: Canonical name (e.g. 'sha256')
        alias: Display alias (e.g. 'SHA-256')
        width: Hex digest length in characters (informational)
        factory: Zero-argument callable returning a fresh digest computer
    """

    name: str
    alias: str
    width: int
    factory: Callable[[], DigestComputer] = field(repr=False)
    token: int = field(default_factory=lambda: next(_tokens), repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlgorithmDescriptor):
            return NotImplemented
        return self.token == other.token

    def __hash__(self) -> int:
        return hash(self.token)

    def __str__(self) -> str:
        return self.name

    def new(self) -> DigestComputer:
        """Create a fresh digest computer for this algorithm."""
        return self.factory()


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Canonical identifier for the algorithm
    - alias: Human readable display name
    - width: Length of the hex digest
    - create_hasher(): Factory method for digest computers
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'md5', 'sha256')."""
        pass

    @property
    @abstractmethod
    def alias(self) -> str:
        """Return display alias (e.g., 'MD5', 'SHA-256')."""
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """Return hex digest length."""
        pass

    @abstractmethod
    def create_hasher(self) -> DigestComputer:
        """Create a new digest computer."""
        pass


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    algorithm_name = "md5"
    alias = "MD5"
    width = 32

    def create_hasher(self) -> DigestComputer:
        return hashlib.md5()


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy - still common for content addressing."""

    algorithm_name = "sha1"
    alias = "SHA-1"
    width = 40

    def create_hasher(self) -> DigestComputer:
        return hashlib.sha1()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    algorithm_name = "sha256"
    alias = "SHA-256"
    width = 64

    def create_hasher(self) -> DigestComputer:
        return hashlib.sha256()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    algorithm_name = "sha512"
    alias = "SHA-512"
    width = 128

    def create_hasher(self) -> DigestComputer:
        return hashlib.sha512()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash."""

    algorithm_name = "blake3"
    alias = "BLAKE3"
    width = 64

    def create_hasher(self) -> DigestComputer:
        return blake3.blake3()


# Registered in every registry built with defaults, in this order
DEFAULT_STRATEGIES: tuple[type[HashStrategy], ...] = (
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
)

# Known to the package but only registered on request (hash.extra)
EXTRA_STRATEGIES: dict[str, type[HashStrategy]] = {
    "sha512": SHA512Strategy,
    "blake3": Blake3Strategy,
}
