"""Shebang parsing."""

from __future__ import annotations

import logging
import os
import stat
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from tagsniff.errors import translate_os_error

from .classifier import SNIFF_SIZE, read_sniff_buffer

LOGGER = logging.getLogger(__name__)

_ENV = "env"


class ShebangInfo(BaseModel):
    """Interpreter and arguments extracted from a ``#!`` line.

    Attributes:
        interpreter: Interpreter name used for table lookups (final path segment).
        args: Tokens that follow the interpreter on the shebang line.
    """

    model_config = ConfigDict(frozen=True)

    interpreter: str
    args: Tuple[str, ...] = Field(default_factory=tuple)


def _basename(token: str) -> str:
    return token.rsplit("/", 1)[-1]


def _is_printable(line: str) -> bool:
    return all(char == "\t" or " " <= char <= "~" for char in line)


def _first_line(data: bytes) -> bytes:
    line = data[:SNIFF_SIZE].split(b"\n", 1)[0]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line


def resolve_env_command(tokens: List[str]) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """Split an ``env`` argument list into the real interpreter and its arguments.

    Flags (leading ``-``) and ``NAME=value`` assignments are skipped while
    searching for the interpreter.

    Args:
        tokens: Tokens following ``env``.

    Returns:
        Optional[Tuple[str, Tuple[str, ...]]]: Interpreter name and trailing
        arguments, or ``None`` when no interpreter token is present.
    """
    for index, token in enumerate(tokens):
        if token.startswith("-") or "=" in token:
            continue
        return _basename(token), tuple(tokens[index + 1 :])
    return None


def parse_shebang(data: bytes | str) -> Optional[ShebangInfo]:
    """Parse the leading ``#!`` line of ``data``.

    Args:
        data: File content (or its first line). ``str`` input is encoded as UTF-8.

    Returns:
        Optional[ShebangInfo]: Parsed interpreter information, or ``None`` when the
        content does not start with a usable shebang.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if not raw.startswith(b"#!"):
        return None

    try:
        line = _first_line(raw)[2:].decode("ascii")
    except UnicodeDecodeError:
        return None
    if not _is_printable(line):
        return None

    tokens = line.split()
    if not tokens:
        return None

    interpreter = _basename(tokens[0])
    args: Tuple[str, ...] = tuple(tokens[1:])
    if interpreter == _ENV:
        resolved = resolve_env_command(tokens[1:])
        if resolved is None:
            return None
        interpreter, args = resolved
    if not interpreter:
        return None
    return ShebangInfo(interpreter=interpreter, args=args)


def parse_shebang_from_file(path: str | os.PathLike[str]) -> Optional[ShebangInfo]:
    """Parse the shebang of an executable file.

    Non-executable files are not read and yield ``None``.

    Raises:
        IdentifyError: When the file cannot be inspected or read.
    """
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError) as exc:
        raise translate_os_error(path, exc) from exc
    if not mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
        LOGGER.debug("Skipping shebang parse for non-executable %s", os.fspath(path))
        return None
    return parse_shebang(read_sniff_buffer(path))


__all__ = ["ShebangInfo", "parse_shebang", "parse_shebang_from_file", "resolve_env_command"]
