"""
Convenience helpers for hashing in-memory data and byte sources.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from ..core.exceptions import HashReaderError, SourceRewindError
from ..core.models.config import DEFAULT_CHUNK_SIZE
from .multihasher import MultiHasher
from .registry import MD5
from .result import HashInfo
from .strategies import AlgorithmDescriptor


def _get_logger():
    from ..core.di import resolve_or_default
    from ..core.interfaces.logger import ILogger
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


def _drain(reader: BinaryIO, hasher: MultiHasher, chunk_size: int) -> None:
    """Copy reader into hasher until EOF."""
    while True:
        try:
            chunk = reader.read(chunk_size)
        except OSError as e:
            _get_logger().debug("Read failed after %d bytes: %s", hasher.size, e)
            raise HashReaderError(
                algorithm=",".join(a.name for a in hasher.algorithms),
                bytes_read=hasher.size,
                cause=e,
            ) from e
        if not chunk:
            break
        hasher.write(chunk)


def hash_data(algorithm: AlgorithmDescriptor, data: bytes) -> str:
    """Return the hex digest of data."""
    hasher = MultiHasher([algorithm])
    hasher.write(data)
    return hasher.hexdigest(algorithm)


def get_md5_encode_str(text: str) -> str:
    """
    Return the MD5 hex digest of a UTF-8 encoded string.

    Lone surrogates from undecodable command-line bytes (surrogateescape)
    are turned back into the original bytes.
    """
    return hash_data(MD5, text.encode("utf-8", errors="surrogateescape"))


def hash_reader(
    algorithm: AlgorithmDescriptor,
    reader: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """
    Hash everything readable from reader.

    Args:
        algorithm: Algorithm to compute
        reader: Object with a read(n) method returning bytes
        chunk_size: Bytes per read call

    Returns:
        Hex digest

    Raises:
        HashReaderError: If reading fails part-way
    """
    hasher = MultiHasher([algorithm])
    _drain(reader, hasher, chunk_size)
    _get_logger().debug("Hashed %d bytes with %s", hasher.size, algorithm.name)
    return hasher.hexdigest(algorithm)


def hash_reader_multi(
    algorithms: Iterable[AlgorithmDescriptor],
    reader: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> HashInfo:
    """
    Hash everything readable from reader with several algorithms at once.

    Raises:
        HashReaderError: If reading fails part-way
    """
    hasher = MultiHasher(algorithms)
    _drain(reader, hasher, chunk_size)
    _get_logger().debug(
        "Hashed %d bytes with %s", hasher.size, ", ".join(a.name for a in hasher.algorithms)
    )
    return hasher.get_hash_info()


def hash_file(
    algorithm: AlgorithmDescriptor,
    file: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """
    Hash a seekable source, then rewind it to the start.

    The source can be handed to another consumer afterwards (e.g. upload
    after computing its checksum).

    Raises:
        HashReaderError: If reading fails part-way
        SourceRewindError: If the rewind fails; the digest is on its
            ``digest`` attribute
    """
    digest = hash_reader(algorithm, file, chunk_size)
    try:
        file.seek(0)
    except OSError as e:
        raise SourceRewindError(
            "Failed to rewind source after hashing",
            digest=digest,
            context={"algorithm": algorithm.name},
            cause=e,
        ) from e
    return digest
