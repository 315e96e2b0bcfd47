"""
hashmux - pluggable multi-algorithm hashing.

Register named hash algorithms, compute several digests over one byte
stream in a single pass, and retrieve the results keyed by algorithm.

Usage:
    from hashmux import MD5, SHA256, MultiHasher

    hasher = MultiHasher([MD5, SHA256])
    hasher.write(b"hello")
    print(hasher.get_hash_info())
"""

from .core.exceptions import (
    DigestWriteError,
    HasherStateError,
    HashmuxException,
    HashReaderError,
    SourceRewindError,
    UnsupportedAlgorithmError,
)
from .hashing import (
    MD5,
    SHA1,
    SHA256,
    AlgorithmDescriptor,
    FanOutWriter,
    HashAlgorithmRegistry,
    HashInfo,
    MultiHasher,
    default_registry,
    get_md5_encode_str,
    hash_data,
    hash_file,
    hash_reader,
    hash_reader_multi,
)
from .services import FileHashingService

__all__ = [
    "MD5",
    "SHA1",
    "SHA256",
    "AlgorithmDescriptor",
    "DigestWriteError",
    "FanOutWriter",
    "FileHashingService",
    "HashAlgorithmRegistry",
    "HashInfo",
    "HashReaderError",
    "HasherStateError",
    "HashmuxException",
    "MultiHasher",
    "SourceRewindError",
    "UnsupportedAlgorithmError",
    "default_registry",
    "get_md5_encode_str",
    "hash_data",
    "hash_file",
    "hash_reader",
    "hash_reader_multi",
]
