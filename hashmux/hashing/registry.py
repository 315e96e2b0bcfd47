"""
Hash algorithm registry.

Provides a registry of algorithm descriptors indexed by canonical name and
by display alias. New algorithms are added by registering a factory or a
strategy; nothing else in the package needs to change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from ..core.exceptions import UnsupportedAlgorithmError
from ..core.interfaces.digest import DigestComputer
from .strategies import (
    DEFAULT_STRATEGIES,
    EXTRA_STRATEGIES,
    AlgorithmDescriptor,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
)


def _get_logger():
    from ..core.di import resolve_or_default
    from ..core.interfaces.logger import ILogger
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


class HashAlgorithmRegistry:
    """
    Registry of hash algorithm descriptors.

    Registration is expected to happen during start-up; lookups after that
    are plain dict reads and need no locking.

    Example:
        registry = HashAlgorithmRegistry()

        # Use default algorithms
        hasher = MultiHasher([registry.require("sha256")])

        # Register custom algorithm
        crc = registry.register("crc", "CRC", 8, make_crc_hasher)
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register md5, sha1 and sha256
        """
        self._by_name: dict[str, AlgorithmDescriptor] = {}
        self._by_alias: dict[str, AlgorithmDescriptor] = {}
        self._supported: list[AlgorithmDescriptor] = []
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        for strategy_cls in DEFAULT_STRATEGIES:
            self.register_strategy(strategy_cls())

    def register(
        self,
        name: str,
        alias: str,
        width: int,
        factory: Callable[[], DigestComputer],
    ) -> AlgorithmDescriptor:
        """
        Register a hash algorithm.

        Registering an existing name or alias replaces the lookup entry;
        the earlier descriptor stays in list_supported().

        Args:
            name: Canonical name
            alias: Display alias
            width: Hex digest length
            factory: Zero-argument callable returning a digest computer

        Returns:
            The new descriptor
        """
        descriptor = AlgorithmDescriptor(name=name, alias=alias, width=width, factory=factory)
        return self.add(descriptor)

    def add(self, descriptor: AlgorithmDescriptor) -> AlgorithmDescriptor:
        """
        Index an existing descriptor, e.g. one taken from another registry.

        Same overwrite rules as register().
        """
        if descriptor.name in self._by_name or descriptor.alias in self._by_alias:
            _get_logger().debug(
                "Hash algorithm %s (%s) re-registered", descriptor.name, descriptor.alias
            )

        self._by_name[descriptor.name] = descriptor
        self._by_alias[descriptor.alias] = descriptor
        self._supported.append(descriptor)
        return descriptor

    def copy(self) -> HashAlgorithmRegistry:
        """Return a new registry holding the same descriptors in the same order."""
        clone = HashAlgorithmRegistry(register_defaults=False)
        for descriptor in self._supported:
            clone.add(descriptor)
        return clone

    def register_strategy(self, strategy: HashStrategy) -> AlgorithmDescriptor:
        """
        Register a hash strategy.

        Args:
            strategy: HashStrategy implementation

        Returns:
            The new descriptor
        """
        return self.register(
            strategy.algorithm_name,
            strategy.alias,
            strategy.width,
            strategy.create_hasher,
        )

    def register_extras(self, names: Iterable[str]) -> list[AlgorithmDescriptor]:
        """
        Register optional built-in algorithms by name.

        Names already registered are left alone, so calling this twice
        does not create duplicate entries.

        Args:
            names: Names from EXTRA_STRATEGIES (e.g. 'sha512', 'blake3')

        Returns:
            Descriptors for every requested name

        Raises:
            UnsupportedAlgorithmError: If a name is not a known extra
        """
        result = []
        for name in names:
            existing = self._by_name.get(name)
            if existing is not None:
                result.append(existing)
                continue
            strategy_cls = EXTRA_STRATEGIES.get(name)
            if strategy_cls is None:
                raise UnsupportedAlgorithmError(
                    f"Unknown optional hash algorithm: {name}",
                    algorithm=name,
                    context={"available": sorted(EXTRA_STRATEGIES)},
                )
            result.append(self.register_strategy(strategy_cls()))
        return result

    def lookup(self, name: str) -> AlgorithmDescriptor | None:
        """
        Get descriptor by canonical name.

        Args:
            name: Algorithm name (e.g., 'md5', 'sha256')

        Returns:
            AlgorithmDescriptor or None if not found
        """
        return self._by_name.get(name)

    def lookup_alias(self, alias: str) -> AlgorithmDescriptor | None:
        """
        Get descriptor by display alias.

        Args:
            alias: Display alias (e.g., 'SHA-1')

        Returns:
            AlgorithmDescriptor or None if not found
        """
        return self._by_alias.get(alias)

    def get(self, name_or_alias: str) -> AlgorithmDescriptor | None:
        """Get descriptor by canonical name, falling back to the alias index."""
        return self._by_name.get(name_or_alias) or self._by_alias.get(name_or_alias)

    def require(self, name_or_alias: str) -> AlgorithmDescriptor:
        """
        Get descriptor by name or alias.

        Raises:
            UnsupportedAlgorithmError: If neither index knows the algorithm
        """
        descriptor = self.get(name_or_alias)
        if descriptor is None:
            raise UnsupportedAlgorithmError(
                f"Unknown hash algorithm: {name_or_alias}",
                algorithm=name_or_alias,
            )
        return descriptor

    def resolve(self, algorithms: Iterable[AlgorithmDescriptor | str]) -> list[AlgorithmDescriptor]:
        """Turn a mix of descriptors and names/aliases into descriptors."""
        return [a if isinstance(a, AlgorithmDescriptor) else self.require(a) for a in algorithms]

    def list_supported(self) -> list[AlgorithmDescriptor]:
        """List every registered descriptor in registration order."""
        return list(self._supported)

    def create_hasher(self, algorithm: str) -> DigestComputer:
        """
        Create a digest computer for the given algorithm.

        Args:
            algorithm: Algorithm name or alias

        Returns:
            Fresh digest computer

        Raises:
            UnsupportedAlgorithmError: If algorithm not registered
        """
        return self.require(algorithm).new()

    @property
    def names(self) -> list[str]:
        """Canonical names currently resolvable, in registration order."""
        return list(self._by_name.keys())

    def __contains__(self, algorithm: object) -> bool:
        """Check if a name, alias or descriptor is registered."""
        if isinstance(algorithm, AlgorithmDescriptor):
            return algorithm in self._supported
        if isinstance(algorithm, str):
            return self.get(algorithm) is not None
        return False

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(list(self._supported))

    def __len__(self) -> int:
        return len(self._supported)


# Process-wide default registry, built once at import
_default_registry = HashAlgorithmRegistry(register_defaults=False)

# MD5 indicates MD5 support
MD5 = _default_registry.register_strategy(MD5Strategy())

# SHA1 indicates SHA-1 support
SHA1 = _default_registry.register_strategy(SHA1Strategy())

# SHA256 indicates SHA-256 support
SHA256 = _default_registry.register_strategy(SHA256Strategy())


def default_registry() -> HashAlgorithmRegistry:
    """Return the process-wide registry holding MD5, SHA1 and SHA256."""
    return _default_registry
