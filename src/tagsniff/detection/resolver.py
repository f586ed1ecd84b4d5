"""Tag resolution pipeline.

A path is resolved in a fixed order: file kind, executable bits, exact filename,
extension, then (only when nothing matched) a bounded content sniff followed by a
shebang pass on text content. Metadata lookups never read file content.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import TYPE_CHECKING, Iterable, Mapping, Optional, Set, Tuple

from tagsniff.errors import translate_os_error
from tagsniff.tables import (
    EXTENSIONS,
    EXTENSIONS_NEED_BINARY_CHECK,
    INTERPRETERS,
    MAX_EXTENSION_PARTS,
    NAMES,
)
from tagsniff.tags import (
    DIRECTORY,
    EMPTY,
    EXECUTABLE,
    FILE,
    NON_EXECUTABLE,
    SOCKET,
    SYMLINK,
    TEXT,
    TagSet,
    has_encoding,
    tag_set,
)

from . import classifier
from .shebang import parse_shebang, resolve_env_command

if TYPE_CHECKING:
    from tagsniff.config.models import DetectionSettings

LOGGER = logging.getLogger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _basename(name: str) -> str:
    return os.path.basename(name)


def _extension_candidates(basename: str, max_parts: int) -> Iterable[str]:
    """Yield dotted suffixes of ``basename`` from longest to shortest.

    Leading dots belong to the stem, so ``.bashrc`` has no extension.
    """
    parts = basename.lstrip(".").split(".")[1:]
    start = max(0, len(parts) - max_parts)
    for index in range(start, len(parts)):
        candidate = ".".join(parts[index:]).lower()
        if candidate:
            yield candidate


def _normalize_extension(extension: str) -> str:
    return extension.lstrip(".").lower()


def _interpreter_candidates(name: str) -> Iterable[str]:
    """Yield ``name`` followed by progressively shorter dotted prefixes."""
    current = name
    while current:
        yield current
        if "." not in current:
            return
        current = current.rsplit(".", 1)[0]


class FileIdentifier:
    """Resolve tag sets for paths, filenames, and interpreters.

    Attributes:
        skip_content_analysis: Never sniff content (no ``text``/``binary`` from content
            and no shebang tags).
        skip_shebang_analysis: Sniff content but never interpret shebangs.
        custom_extensions: Extension table consulted before the built-in tables.
        custom_filenames: Exact-filename table consulted before the built-in table.
    """

    def __init__(
        self,
        *,
        skip_content_analysis: bool = False,
        skip_shebang_analysis: bool = False,
        custom_extensions: Optional[Mapping[str, Iterable[str]]] = None,
        custom_filenames: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> None:
        self.skip_content_analysis = skip_content_analysis
        self.skip_shebang_analysis = skip_shebang_analysis
        self.custom_extensions = {
            _normalize_extension(ext): tag_set(tags)
            for ext, tags in (custom_extensions or {}).items()
        }
        self.custom_filenames = {
            name: tag_set(tags) for name, tags in (custom_filenames or {}).items()
        }
        self._max_extension_parts = max(
            [MAX_EXTENSION_PARTS, *(key.count(".") + 1 for key in self.custom_extensions)]
        )

    @classmethod
    def from_settings(cls, settings: "DetectionSettings") -> "FileIdentifier":
        """Build an identifier from persisted detection settings."""
        return cls(
            skip_content_analysis=settings.skip_content_analysis,
            skip_shebang_analysis=settings.skip_shebang_analysis,
            custom_extensions=settings.custom_extensions,
            custom_filenames=settings.custom_filenames,
        )

    # Public API -------------------------------------------------------

    def identify(self, path: str | os.PathLike[str]) -> TagSet:
        """Return the tag set for the filesystem entry at ``path``.

        Args:
            path: Path to inspect. Symlinks are not followed.

        Returns:
            TagSet: Tags describing the entry.

        Raises:
            NotFoundError: If ``path`` does not exist.
            PermissionDeniedError: If metadata or content is unreadable.
            ReadError: For any other OS-level failure.
        """
        try:
            info = os.lstat(path)
        except (OSError, ValueError) as exc:
            raise translate_os_error(path, exc) from exc

        mode = info.st_mode
        if stat.S_ISDIR(mode):
            return frozenset({DIRECTORY})
        if stat.S_ISLNK(mode):
            return frozenset({SYMLINK})
        if stat.S_ISSOCK(mode):
            return frozenset({SOCKET})

        tags: Set[str] = {FILE, EXECUTABLE if mode & _EXECUTE_BITS else NON_EXECUTABLE}

        name_tags, needs_content = self._lookup_name(_basename(os.fspath(path)))
        tags |= name_tags
        if not needs_content:
            return frozenset(tags)

        if not stat.S_ISREG(mode):
            LOGGER.debug("Not sniffing special file %s", os.fspath(path))
            return frozenset(tags)
        if self.skip_content_analysis:
            return frozenset(tags)

        buffer = classifier.read_sniff_buffer(path)
        encoding = classifier.classify(buffer)
        tags.add(encoding)

        # Tags from a name/extension match are final apart from the content class.
        if name_tags or encoding != TEXT or self.skip_shebang_analysis:
            return frozenset(tags)

        shebang = parse_shebang(buffer)
        if shebang is not None:
            interpreter_tags = self.tags_from_interpreter(shebang.interpreter)
            LOGGER.debug(
                "Shebang interpreter %s for %s -> %s",
                shebang.interpreter,
                os.fspath(path),
                sorted(interpreter_tags),
            )
            tags |= interpreter_tags
        return frozenset(tags)

    def tags_from_filename(self, name: str) -> TagSet:
        """Return tags derived from a filename alone.

        Directory components of ``name`` are ignored. Unknown names yield an empty set.
        """
        tags, _ = self._lookup_name(_basename(name))
        return tags

    def tags_from_interpreter(self, name: str) -> TagSet:
        """Return tags for an interpreter name, path, or ``env`` command line.

        ``python3.11`` falls back to ``python3``; ``/usr/bin/env -S python3 -u``
        resolves to ``python3``. Unknown interpreters yield an empty set.
        """
        tokens = name.split()
        if not tokens:
            return EMPTY
        interpreter = _basename(tokens[0])
        if interpreter == "env":
            resolved = resolve_env_command(tokens[1:])
            if resolved is None:
                return EMPTY
            interpreter = resolved[0]
        for candidate in _interpreter_candidates(interpreter):
            found = INTERPRETERS.get(candidate)
            if found is not None:
                return found
        return EMPTY

    # Internal helpers -------------------------------------------------

    def _lookup_name(self, basename: str) -> Tuple[TagSet, bool]:
        """Return name-derived tags and whether content must still be sniffed.

        The second element is True when the tags lack a content class, i.e. nothing
        matched or the matching entry leaves ``text``/``binary`` to the sniff.
        """
        if not basename:
            return EMPTY, True

        exact = self.custom_filenames.get(basename)
        if exact is None:
            exact = NAMES.get(basename)
        if exact is not None:
            LOGGER.debug("Exact filename match for %s", basename)
            return exact, not has_encoding(exact)

        by_extension = self._lookup_extension(basename)
        if by_extension is not None:
            return by_extension, not has_encoding(by_extension)

        for part in basename.split("."):
            found = self.custom_filenames.get(part)
            if found is None:
                found = NAMES.get(part)
            if found is not None:
                LOGGER.debug("Dotted-name match %s for %s", part, basename)
                return found, not has_encoding(found)

        return EMPTY, True

    def _lookup_extension(self, basename: str) -> Optional[TagSet]:
        candidates = list(_extension_candidates(basename, self._max_extension_parts))
        if self.custom_extensions:
            for candidate in candidates:
                if candidate in self.custom_extensions:
                    LOGGER.debug("Custom extension match .%s for %s", candidate, basename)
                    return self.custom_extensions[candidate]
        for candidate in candidates:
            found = EXTENSIONS.get(candidate)
            if found is None:
                found = EXTENSIONS_NEED_BINARY_CHECK.get(candidate)
            if found is not None:
                LOGGER.debug("Extension match .%s for %s", candidate, basename)
                return found
        return None


_DEFAULT_IDENTIFIER = FileIdentifier()


def tags_from_path(path: str | os.PathLike[str]) -> TagSet:
    """Return the tag set for ``path`` using the default pipeline."""
    return _DEFAULT_IDENTIFIER.identify(path)


def tags_from_filename(name: str) -> TagSet:
    """Return tags derived from ``name`` without touching the filesystem."""
    return _DEFAULT_IDENTIFIER.tags_from_filename(name)


def tags_from_interpreter(name: str) -> TagSet:
    """Return tags for an interpreter name or command line."""
    return _DEFAULT_IDENTIFIER.tags_from_interpreter(name)


__all__ = [
    "FileIdentifier",
    "tags_from_path",
    "tags_from_filename",
    "tags_from_interpreter",
]
