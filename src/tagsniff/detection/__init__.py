"""Tag resolution pipeline: classifier, shebang parser, and resolver."""

from .classifier import SNIFF_SIZE, classify, file_is_text, is_text, read_sniff_buffer
from .resolver import FileIdentifier, tags_from_filename, tags_from_interpreter, tags_from_path
from .shebang import ShebangInfo, parse_shebang, parse_shebang_from_file

__all__ = [
    "SNIFF_SIZE",
    "FileIdentifier",
    "ShebangInfo",
    "classify",
    "file_is_text",
    "is_text",
    "parse_shebang",
    "parse_shebang_from_file",
    "read_sniff_buffer",
    "tags_from_filename",
    "tags_from_interpreter",
    "tags_from_path",
]
