"""
Protocol definitions for hashmux's service interfaces.

These protocols define the contracts that implementations must follow,
enabling dependency inversion and loose coupling throughout the codebase.
"""

from .digest import DigestComputer
from .logger import ILogger
from .services import HashingService

__all__ = [
    "DigestComputer",
    "HashingService",
    "ILogger",
]
