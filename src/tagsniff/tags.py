"""Tag vocabulary shared by the tables and the resolver."""

from __future__ import annotations

from typing import FrozenSet, Iterable

TagSet = FrozenSet[str]

DIRECTORY = "directory"
SYMLINK = "symlink"
SOCKET = "socket"
FILE = "file"

EXECUTABLE = "executable"
NON_EXECUTABLE = "non-executable"

TEXT = "text"
BINARY = "binary"

TYPE_TAGS: TagSet = frozenset({DIRECTORY, FILE, SYMLINK, SOCKET})
MODE_TAGS: TagSet = frozenset({EXECUTABLE, NON_EXECUTABLE})
ENCODING_TAGS: TagSet = frozenset({BINARY, TEXT})

EMPTY: TagSet = frozenset()


def tag_set(tags: Iterable[str]) -> TagSet:
    """Return an immutable tag set built from ``tags``."""
    return frozenset(tags)


def has_encoding(tags: Iterable[str]) -> bool:
    """Return True when ``tags`` already carries ``text`` or ``binary``."""
    return not ENCODING_TAGS.isdisjoint(tags)


__all__ = [
    "TagSet",
    "DIRECTORY",
    "SYMLINK",
    "SOCKET",
    "FILE",
    "EXECUTABLE",
    "NON_EXECUTABLE",
    "TEXT",
    "BINARY",
    "TYPE_TAGS",
    "MODE_TAGS",
    "ENCODING_TAGS",
    "EMPTY",
    "tag_set",
    "has_encoding",
]
