"""Static lookup tables mapping names, extensions, and interpreters to tags."""

from .extensions import EXTENSIONS, EXTENSIONS_NEED_BINARY_CHECK, MAX_EXTENSION_PARTS, NAMES
from .interpreters import INTERPRETERS

__all__ = [
    "EXTENSIONS",
    "EXTENSIONS_NEED_BINARY_CHECK",
    "INTERPRETERS",
    "MAX_EXTENSION_PARTS",
    "NAMES",
]
