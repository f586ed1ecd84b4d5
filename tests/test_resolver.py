"""Tests covering the tag resolution pipeline."""

import errno
import os
import socket
from pathlib import Path
from typing import Callable, List

import pytest

from tagsniff import tags_from_filename, tags_from_interpreter, tags_from_path
from tagsniff.config.models import DetectionSettings
from tagsniff.detection import classifier
from tagsniff.detection.resolver import FileIdentifier
from tagsniff.errors import NotFoundError, PermissionDeniedError, ReadError


@pytest.fixture
def sniff_calls(monkeypatch: pytest.MonkeyPatch) -> List[str]:
    """Record every bounded content read performed by the resolver."""
    calls: List[str] = []
    original: Callable[..., bytes] = classifier.read_sniff_buffer

    def _counting(path):
        calls.append(os.fspath(path))
        return original(path)

    monkeypatch.setattr(classifier, "read_sniff_buffer", _counting)
    return calls


def _write(path: Path, content: bytes, mode: int = 0o644) -> Path:
    path.write_bytes(content)
    os.chmod(path, mode)
    return path


def _assert_invariants(tags) -> None:
    assert not {"text", "binary"} <= tags
    assert not {"executable", "non-executable"} <= tags
    assert len(tags & {"file", "directory", "symlink", "socket"}) <= 1


# Filesystem kinds -----------------------------------------------------


def test_directory_resolves_to_directory_only(tmp_path: Path, sniff_calls: List[str]) -> None:
    (tmp_path / "inner.py").write_text("print('x')\n", encoding="utf-8")

    assert tags_from_path(tmp_path) == {"directory"}
    assert sniff_calls == []


def test_symlink_is_not_followed(tmp_path: Path, sniff_calls: List[str]) -> None:
    target = _write(tmp_path / "target.py", b"print('x')\n")
    link = tmp_path / "link.py"
    link.symlink_to(target)

    assert tags_from_path(link) == {"symlink"}
    assert sniff_calls == []


def test_dangling_symlink_is_still_a_symlink(tmp_path: Path) -> None:
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "missing")

    assert tags_from_path(link) == {"symlink"}


@pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="requires unix sockets")
def test_socket_resolves_to_socket(tmp_path: Path) -> None:
    sock_path = tmp_path / "s.sock"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        try:
            sock.bind(str(sock_path))
        except OSError:
            pytest.skip("socket path too long for this platform")
        assert tags_from_path(sock_path) == {"socket"}
    finally:
        sock.close()


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires named pipes")
def test_fifo_is_never_sniffed(tmp_path: Path, sniff_calls: List[str]) -> None:
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo, 0o644)

    assert tags_from_path(fifo) == {"file", "non-executable"}
    assert sniff_calls == []


# Metadata short-circuits ------------------------------------------------


def test_registered_extension_reads_no_content(tmp_path: Path, sniff_calls: List[str]) -> None:
    script = _write(tmp_path / "script.py", b"print('hello')\n")

    assert tags_from_path(script) == {"file", "non-executable", "text", "python"}
    assert sniff_calls == []


def test_registered_binary_extension_is_trusted(tmp_path: Path, sniff_calls: List[str]) -> None:
    archive = _write(tmp_path / "archive.tar.gz", b"not really gzip, just text\n")

    assert tags_from_path(archive) == {"file", "non-executable", "binary", "tar", "gzip"}
    assert sniff_calls == []


def test_exact_filename_reads_no_content(tmp_path: Path, sniff_calls: List[str]) -> None:
    makefile = _write(tmp_path / "Makefile", b"all:\n\techo hi\n")

    tags = tags_from_path(makefile)

    assert {"file", "non-executable", "text", "makefile"} <= tags
    assert sniff_calls == []


def test_unmatched_name_triggers_one_read(tmp_path: Path, sniff_calls: List[str]) -> None:
    notes = _write(tmp_path / "NOTES", b"plain words\n")

    assert tags_from_path(notes) == {"file", "non-executable", "text"}
    assert sniff_calls == [os.fspath(notes)]


def test_shebang_is_ignored_when_extension_matches(tmp_path: Path) -> None:
    notes = _write(tmp_path / "notes.txt", b"#!/bin/bash\necho hi\n", 0o755)

    tags = tags_from_path(notes)

    assert "bash" not in tags
    assert {"file", "executable", "text", "plain-text"} == tags


# Content sniff and shebang ----------------------------------------------


def test_deploy_script_end_to_end(tmp_path: Path) -> None:
    script = _write(tmp_path / "deploy.sh", b"#!/bin/bash\necho hi\n", 0o755)

    tags = tags_from_path(script)

    assert {"file", "executable", "shell", "bash", "text"} <= tags
    _assert_invariants(tags)


def test_extensionless_executable_uses_shebang(tmp_path: Path, sniff_calls: List[str]) -> None:
    script = _write(tmp_path / "manage", b"#!/usr/bin/env python3\nprint('hi')\n", 0o755)

    tags = tags_from_path(script)

    assert tags == {"file", "executable", "text", "python", "python3"}
    assert len(sniff_calls) == 1


def test_non_executable_text_still_uses_shebang(tmp_path: Path) -> None:
    script = _write(tmp_path / "hook", b"#!/bin/sh\nexit 0\n", 0o644)

    assert tags_from_path(script) == {"file", "non-executable", "text", "shell", "sh"}


def test_leading_nul_is_binary_without_shebang_tags(tmp_path: Path) -> None:
    blob = _write(tmp_path / "blob", b"\x00\x01#!/bin/bash\necho hi\n", 0o755)

    assert tags_from_path(blob) == {"file", "executable", "binary"}


def test_unknown_interpreter_adds_nothing(tmp_path: Path) -> None:
    script = _write(tmp_path / "tool", b"#!/opt/bin/frobnicate --fast\n", 0o755)

    assert tags_from_path(script) == {"file", "executable", "text"}


def test_empty_file_is_text(tmp_path: Path) -> None:
    empty = _write(tmp_path / "empty", b"")

    assert tags_from_path(empty) == {"file", "non-executable", "text"}


def test_binary_check_extension_sniffs_content(tmp_path: Path, sniff_calls: List[str]) -> None:
    binary_plist = _write(tmp_path / "binary.plist", b"bplist00\xd1\x01\x02\x00\x00")
    text_plist = _write(
        tmp_path / "text.plist",
        b'<?xml version="1.0" encoding="UTF-8"?>\n<plist version="1.0"><dict/></plist>\n',
    )

    assert tags_from_path(binary_plist) == {"file", "non-executable", "binary", "plist"}
    assert tags_from_path(text_plist) == {"file", "non-executable", "text", "plist"}
    assert len(sniff_calls) == 2


def test_resolution_is_idempotent(tmp_path: Path) -> None:
    script = _write(tmp_path / "run", b"#!/usr/bin/env ruby\nputs 1\n", 0o755)

    assert tags_from_path(script) == tags_from_path(script)


def test_invariants_hold_across_inputs(tmp_path: Path) -> None:
    samples = {
        "a.py": (b"x = 1\n", 0o755),
        "b.png": (b"\x89PNG\r\n\x1a\n\x00", 0o644),
        "c": (b"#!/bin/zsh\n", 0o700),
        "d": (b"\xff\xfe\xfd", 0o644),
        "e.plist": (b"bplist00\x00", 0o644),
        "Dockerfile": (b"FROM scratch\n", 0o644),
    }
    for name, (content, mode) in samples.items():
        _assert_invariants(tags_from_path(_write(tmp_path / name, content, mode)))


# Errors ----------------------------------------------------------------


def test_missing_path_raises_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "missing.py"

    with pytest.raises(NotFoundError) as excinfo:
        tags_from_path(missing)

    assert "does not exist" in str(excinfo.value)
    assert excinfo.value.path == os.fspath(missing)


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores modes")
def test_unreadable_content_raises_permission_denied(tmp_path: Path) -> None:
    locked = _write(tmp_path / "locked", b"secret\n", 0o000)

    try:
        with pytest.raises(PermissionDeniedError):
            tags_from_path(locked)
    finally:
        os.chmod(locked, 0o644)


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores modes")
def test_unreadable_file_with_known_extension_needs_no_read(tmp_path: Path) -> None:
    locked = _write(tmp_path / "locked.py", b"secret\n", 0o000)

    try:
        assert tags_from_path(locked) == {"file", "non-executable", "text", "python"}
    finally:
        os.chmod(locked, 0o644)


def test_path_with_nul_byte_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        tags_from_path(str(tmp_path / "a\x00b"))

    assert isinstance(excinfo.value.__cause__, ValueError)


@pytest.mark.parametrize(
    "error, expected",
    [
        (OSError(errno.EIO, "Input/output error"), ReadError),
        (PermissionError(errno.EACCES, "Permission denied"), PermissionDeniedError),
    ],
)
def test_metadata_failures_map_to_error_kinds(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, error: OSError, expected: type
) -> None:
    target = _write(tmp_path / "blob", b"data\n")
    real_lstat = os.lstat

    def _failing_lstat(path, *args, **kwargs):
        if os.fspath(path) == os.fspath(target):
            raise error
        return real_lstat(path, *args, **kwargs)

    monkeypatch.setattr(os, "lstat", _failing_lstat)

    with pytest.raises(expected) as excinfo:
        tags_from_path(target)

    assert excinfo.value.__cause__ is error


@pytest.mark.parametrize(
    "error, expected",
    [
        (OSError(errno.EIO, "Input/output error"), ReadError),
        (PermissionError(errno.EACCES, "Permission denied"), PermissionDeniedError),
    ],
)
def test_content_read_failures_map_to_error_kinds(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, error: OSError, expected: type
) -> None:
    target = _write(tmp_path / "blob", b"data\n")

    def _failing_open(*args, **kwargs):
        raise error

    monkeypatch.setattr(classifier, "open", _failing_open, raising=False)

    with pytest.raises(expected) as excinfo:
        tags_from_path(target)

    assert excinfo.value.__cause__ is error
    assert excinfo.value.path == os.fspath(target)


def test_read_error_message_names_path_and_reason(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = _write(tmp_path / "blob", b"data\n")

    def _failing_open(*args, **kwargs):
        raise OSError(errno.EIO, "Input/output error")

    monkeypatch.setattr(classifier, "open", _failing_open, raising=False)

    with pytest.raises(ReadError, match="Input/output error") as excinfo:
        tags_from_path(target)

    assert os.fspath(target) in str(excinfo.value)


# Filename-only lookups ---------------------------------------------------


def test_tags_from_filename_basics() -> None:
    assert {"makefile"} <= tags_from_filename("Makefile")
    assert {"python", "text"} <= tags_from_filename("script.py")
    assert tags_from_filename("path/to/script.py") == tags_from_filename("script.py")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Dockerfile", {"text", "dockerfile"}),
        ("setup.cfg", {"text", "ini"}),
        ("Cargo.toml", {"text", "toml", "cargo"}),
        ("image.JPG", {"binary", "image", "jpeg"}),
        ("archive.tar.gz", {"binary", "tar", "gzip"}),
        ("backup.gz", {"binary", "gzip"}),
        ("Dockerfile.xenial", {"text", "dockerfile"}),
        ("Dockerfile.txt", {"text", "plain-text"}),
        (".bashrc", {"text", "shell", "bash"}),
        ("README.md", {"text", "markdown"}),
        ("config.plist", {"plist"}),
    ],
)
def test_tags_from_filename_tables(name: str, expected: set) -> None:
    assert tags_from_filename(name) == expected


@pytest.mark.parametrize("name", ["unknown.xyz", "noextension", ".hidden", "", "trailing."])
def test_tags_from_filename_unknown(name: str) -> None:
    assert tags_from_filename(name) == frozenset()


def test_exact_filename_is_case_sensitive() -> None:
    assert tags_from_filename("DOCKERFILE") == frozenset()


# Interpreter lookups -----------------------------------------------------


@pytest.mark.parametrize(
    "interpreter, expected",
    [
        ("python3", {"python", "python3"}),
        ("python3.11", {"python", "python3"}),
        ("python3.5.2", {"python", "python3"}),
        ("/usr/bin/python3", {"python", "python3"}),
        ("env python3", {"python", "python3"}),
        ("/usr/bin/env -S python3 -u", {"python", "python3"}),
        ("php8.1", {"php", "php8"}),
        ("/bin/bash", {"shell", "bash"}),
        ("node", {"javascript"}),
    ],
)
def test_tags_from_interpreter(interpreter: str, expected: set) -> None:
    assert tags_from_interpreter(interpreter) == expected


@pytest.mark.parametrize("interpreter", ["unknown-interpreter", "", "env", "/usr/bin/env -i"])
def test_tags_from_interpreter_unknown(interpreter: str) -> None:
    assert tags_from_interpreter(interpreter) == frozenset()


# Configured identifiers ----------------------------------------------------


def test_skip_content_analysis_reads_nothing(tmp_path: Path, sniff_calls: List[str]) -> None:
    script = _write(tmp_path / "tool", b"#!/bin/sh\n", 0o755)
    identifier = FileIdentifier(skip_content_analysis=True)

    assert identifier.identify(script) == {"file", "executable"}
    assert sniff_calls == []


def test_skip_shebang_analysis_keeps_encoding(tmp_path: Path) -> None:
    script = _write(tmp_path / "tool", b"#!/usr/bin/env python3\n", 0o755)
    identifier = FileIdentifier(skip_shebang_analysis=True)

    assert identifier.identify(script) == {"file", "executable", "text"}


def test_custom_extensions_take_precedence(tmp_path: Path) -> None:
    identifier = FileIdentifier(custom_extensions={".PY": ["text", "snake"], "j.cfg": ["jcfg"]})
    custom = _write(tmp_path / "module.py", b"x = 1\n")
    multi = _write(tmp_path / "settings.j.cfg", b"key = value\n")

    assert identifier.identify(custom) == {"file", "non-executable", "text", "snake"}
    assert identifier.identify(multi) == {"file", "non-executable", "text", "jcfg"}
    assert identifier.tags_from_filename("lib.py") == {"text", "snake"}


def test_custom_filenames_take_precedence(tmp_path: Path) -> None:
    identifier = FileIdentifier(custom_filenames={"Makefile": ["text", "gnu-make"]})

    assert identifier.tags_from_filename("Makefile") == {"text", "gnu-make"}
    assert tags_from_filename("Makefile") != identifier.tags_from_filename("Makefile")


def test_from_settings() -> None:
    settings = DetectionSettings(
        skip_shebang_analysis=True,
        custom_extensions={"foo": ["text", "foo"]},
    )

    identifier = FileIdentifier.from_settings(settings)

    assert identifier.skip_shebang_analysis is True
    assert identifier.skip_content_analysis is False
    assert identifier.tags_from_filename("a.foo") == {"text", "foo"}


def test_custom_filenames_apply_to_dotted_names(tmp_path: Path) -> None:
    identifier = FileIdentifier(custom_filenames={"Tiltfile": ["text", "tilt"]})
    local = _write(tmp_path / "Tiltfile.local", b"k8s_yaml('app.yaml')\n")

    assert identifier.tags_from_filename("Tiltfile.local") == {"text", "tilt"}
    assert identifier.identify(local) == {"file", "non-executable", "text", "tilt"}
    assert tags_from_filename("Tiltfile.local") == {"text", "tiltfile"}


def test_custom_dotted_name_without_encoding_sniffs_content(
    tmp_path: Path, sniff_calls: List[str]
) -> None:
    identifier = FileIdentifier(custom_filenames={"Tiltfile": ["tilt"]})
    local = _write(tmp_path / "Tiltfile.dev", b"\x00\x01")

    assert identifier.identify(local) == {"file", "non-executable", "binary", "tilt"}
    assert sniff_calls == [os.fspath(local)]
