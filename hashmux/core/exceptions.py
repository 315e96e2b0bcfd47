"""
Custom exception hierarchy for hashmux.

Every error raised by the package derives from HashmuxException so callers
can catch the whole family at once, while the I/O and validation branches
also derive from the matching builtin (OSError, ValueError).
"""

from __future__ import annotations


class HashmuxException(Exception):
    """
    Base exception for all hashmux errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm names, paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class HashmuxConfigError(HashmuxException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(HashmuxConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(HashmuxConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so pydantic validators can raise it directly.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class HashmuxValidationError(HashmuxException, ValueError):
    """Base class for input validation errors."""

    pass


class UnsupportedAlgorithmError(HashmuxValidationError):
    """
    Hash type not supported.

    Raised when a digest is requested for an algorithm a MultiHasher was
    not constructed with, or when a name is not known to the registry.
    The caller has to rebuild with the right algorithm set.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str = "hash type not supported",
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)
        self.algorithm = algorithm


# =============================================================================
# Hashing Errors
# =============================================================================


class HashmuxHashingError(HashmuxException):
    """Base class for errors raised while feeding digest computers."""

    pass


class DigestWriteError(HashmuxHashingError):
    """
    A digest computer rejected a fan-out write.

    Computers updated before the failing one keep their new state, so the
    per-algorithm digests of the owning hasher no longer agree.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)
        self.algorithm = algorithm


class HasherStateError(HashmuxHashingError):
    """A MultiHasher was used after one of its writes failed."""

    recoverable: bool = False


# =============================================================================
# I/O Errors
# =============================================================================


class HashmuxIOError(HashmuxException, OSError):
    """
    Base class for byte source failures.

    Inherits from OSError so callers handling plain I/O errors keep working.
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class HashReaderError(HashmuxIOError):
    """
    Reading a byte source failed while hashing it.

    Bytes read before the failure were already written to the hasher, so
    any digest taken from it afterwards is unfinished.
    """

    def __init__(
        self,
        message: str = "HashReader error",
        *,
        algorithm: str | None = None,
        bytes_read: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if bytes_read is not None:
            ctx["bytes_read"] = bytes_read
        super().__init__(message, context=ctx, cause=cause)


class SourceRewindError(HashmuxIOError):
    """
    Seeking a source back to its start failed after it was hashed.

    The digest was computed successfully and is available on ``digest``.
    """

    def __init__(
        self,
        message: str,
        *,
        digest: str,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)
        self.digest = digest
