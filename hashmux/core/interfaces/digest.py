"""
Digest computer protocol.

A digest computer is the stateful accumulator produced by an algorithm's
factory. hashlib objects and blake3.blake3 both satisfy it.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DigestComputer(Protocol):
    """Stateful object accumulating input and producing a digest on demand."""

    def update(self, data: bytes, /) -> None:
        """Feed bytes into the running digest."""
        ...

    def digest(self) -> bytes:
        """Return the digest of everything fed so far.

        Must not finalize the computer: further updates stay legal.
        """
        ...
