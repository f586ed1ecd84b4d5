"""Errors raised while resolving tags for filesystem paths."""

from __future__ import annotations

import os


class IdentifyError(Exception):
    """Base exception for path identification failures."""

    def __init__(self, path: str | os.PathLike[str], message: str | None = None) -> None:
        self.path = os.fspath(path)
        super().__init__(message or self.default_message())

    def default_message(self) -> str:
        return f"Unable to identify {self.path}."


class NotFoundError(IdentifyError):
    """Raised when the path does not exist."""

    def default_message(self) -> str:
        return f"{self.path} does not exist."


class PermissionDeniedError(IdentifyError):
    """Raised when metadata or content cannot be read due to permissions."""

    def default_message(self) -> str:
        return f"Permission denied: {self.path}"


class ReadError(IdentifyError):
    """Raised for any other OS-level failure while reading a path."""


class ConfigError(Exception):
    """Raised when settings data cannot be loaded, merged, or validated."""


def translate_os_error(
    path: str | os.PathLike[str], exc: OSError | ValueError
) -> IdentifyError:
    """Map an ``OSError`` onto the matching identification error kind.

    A ``ValueError`` from the ``os`` layer (e.g. an embedded NUL byte) means the
    path cannot name any entry and maps to ``NotFoundError``.

    Args:
        path: Path that was being inspected.
        exc: Error raised by the operating system or by path validation.

    Returns:
        IdentifyError: Error instance ready to be raised by the caller.
    """
    if isinstance(exc, (ValueError, FileNotFoundError, NotADirectoryError)):
        return NotFoundError(path)
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(path)
    return ReadError(path, f"Failed to read {os.fspath(path)}: {exc.strerror or exc}")


__all__ = [
    "ConfigError",
    "IdentifyError",
    "NotFoundError",
    "PermissionDeniedError",
    "ReadError",
    "translate_os_error",
]
