"""Identify files by standardized tags derived from names, metadata, and content."""

from importlib import metadata as _metadata

from .detection import (
    FileIdentifier,
    ShebangInfo,
    classify,
    file_is_text,
    is_text,
    parse_shebang,
    parse_shebang_from_file,
    tags_from_filename,
    tags_from_interpreter,
    tags_from_path,
)
from .errors import IdentifyError, NotFoundError, PermissionDeniedError, ReadError
from .tags import (
    BINARY,
    DIRECTORY,
    ENCODING_TAGS,
    EXECUTABLE,
    FILE,
    MODE_TAGS,
    NON_EXECUTABLE,
    SOCKET,
    SYMLINK,
    TEXT,
    TYPE_TAGS,
)

__all__ = [
    "__version__",
    "BINARY",
    "DIRECTORY",
    "ENCODING_TAGS",
    "EXECUTABLE",
    "FILE",
    "FileIdentifier",
    "IdentifyError",
    "MODE_TAGS",
    "NON_EXECUTABLE",
    "NotFoundError",
    "PermissionDeniedError",
    "ReadError",
    "SOCKET",
    "SYMLINK",
    "ShebangInfo",
    "TEXT",
    "TYPE_TAGS",
    "classify",
    "file_is_text",
    "is_text",
    "parse_shebang",
    "parse_shebang_from_file",
    "tags_from_filename",
    "tags_from_interpreter",
    "tags_from_path",
]


def __getattr__(name: str):
    if name == "__version__":
        return _metadata.version("tagsniff")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(list(globals().keys()) + ["__version__"])
