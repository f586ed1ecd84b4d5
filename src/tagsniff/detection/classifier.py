"""Text versus binary classification of a bounded content sample."""

from __future__ import annotations

import codecs
import logging
import os

from tagsniff.errors import translate_os_error
from tagsniff.tags import BINARY, TEXT

LOGGER = logging.getLogger(__name__)

SNIFF_SIZE = 1024


def is_text(data: bytes) -> bool:
    """Return True when ``data`` looks like text.

    Only the first ``SNIFF_SIZE`` bytes are considered. A sample is binary when it
    contains a NUL byte or is not valid UTF-8. When ``data`` runs past the window,
    a multi-byte sequence cut off at the window edge is not held against it.

    Args:
        data: Leading bytes of a file.

    Returns:
        bool: ``True`` for text, ``False`` for binary.
    """
    sample = bytes(data[:SNIFF_SIZE])
    if b"\x00" in sample:
        return False
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    try:
        decoder.decode(sample, final=len(data) <= SNIFF_SIZE)
    except UnicodeDecodeError:
        return False
    return True


def classify(data: bytes) -> str:
    """Return ``"text"`` or ``"binary"`` for the sample."""
    return TEXT if is_text(data) else BINARY


def read_sniff_buffer(path: str | os.PathLike[str]) -> bytes:
    """Read the leading bytes of ``path`` for classification.

    One byte past ``SNIFF_SIZE`` is read so callers can tell a file that ends at
    the window edge from one that continues beyond it.

    Raises:
        IdentifyError: Subclass matching the underlying ``OSError``.
    """
    try:
        with open(path, "rb") as fh:
            buffer = fh.read(SNIFF_SIZE + 1)
    except (OSError, ValueError) as exc:
        raise translate_os_error(path, exc) from exc
    LOGGER.debug("Sniffed %d bytes from %s", len(buffer), os.fspath(path))
    return buffer


def file_is_text(path: str | os.PathLike[str]) -> bool:
    """Return True when the file at ``path`` looks like text."""
    return is_text(read_sniff_buffer(path))


__all__ = ["SNIFF_SIZE", "is_text", "classify", "read_sniff_buffer", "file_is_text"]
