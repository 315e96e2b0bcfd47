"""Services built on the hashing core."""

from .hashing import FileHashingService
from .logging import HashmuxLogger, NullLogger

__all__ = [
    "FileHashingService",
    "HashmuxLogger",
    "NullLogger",
]
