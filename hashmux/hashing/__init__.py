"""
Pluggable multi-algorithm hashing.

Register named algorithms, compute several digests over one byte stream
in a single pass, and read the results back per algorithm.
"""

from .multihasher import MultiHasher
from .registry import MD5, SHA1, SHA256, HashAlgorithmRegistry, default_registry
from .result import HashInfo
from .strategies import (
    AlgorithmDescriptor,
    Blake3Strategy,
    HashStrategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
    SHA512Strategy,
)
from .streams import get_md5_encode_str, hash_data, hash_file, hash_reader, hash_reader_multi
from .writer import FanOutWriter

__all__ = [
    "MD5",
    "SHA1",
    "SHA256",
    "AlgorithmDescriptor",
    "Blake3Strategy",
    "FanOutWriter",
    "HashAlgorithmRegistry",
    "HashInfo",
    "HashStrategy",
    "MD5Strategy",
    "MultiHasher",
    "SHA1Strategy",
    "SHA256Strategy",
    "SHA512Strategy",
    "default_registry",
    "get_md5_encode_str",
    "hash_data",
    "hash_file",
    "hash_reader",
    "hash_reader_multi",
]
