"""Tests for the tagsniff identification command."""

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from tagsniff.cli import cli


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in list(os.environ):
        if key.startswith("TAGSNIFF__"):
            monkeypatch.delenv(key)
    return CliRunner()


def _tags(output: str) -> list:
    return json.loads(output.strip())


def test_cli_help_displays_usage(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "File identification tool" in result.output
    assert "--filename-only" in result.output


def test_cli_identifies_file_as_sorted_json(runner: CliRunner, tmp_path: Path) -> None:
    target = tmp_path / "test.py"
    target.write_text("print('hello')\n", encoding="utf-8")
    os.chmod(target, 0o644)

    result = runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert _tags(result.output) == ["file", "non-executable", "python", "text"]


def test_cli_filename_only_skips_filesystem(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--filename-only", "does/not/exist/test.py"])

    assert result.exit_code == 0
    tags = _tags(result.output)
    assert tags == ["python", "text"]
    assert "file" not in tags


def test_cli_missing_path_fails(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, [str(tmp_path / "nonexistent")])

    assert result.exit_code == 1
    assert "does not exist" in result.output
    assert result.output.startswith("Error:")


def test_cli_unrecognized_filename_exits_without_output(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--filename-only", "unknown.xyz"])

    assert result.exit_code == 1
    assert result.output.strip() == ""


def test_cli_directory(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, [str(tmp_path)])

    assert result.exit_code == 0
    assert _tags(result.output) == ["directory"]


def test_cli_executable_script(runner: CliRunner, tmp_path: Path) -> None:
    script = tmp_path / "script"
    script.write_text("#!/bin/bash\necho hello\n", encoding="utf-8")
    os.chmod(script, 0o755)

    result = runner.invoke(cli, [str(script)])

    assert result.exit_code == 0
    assert _tags(result.output) == ["bash", "executable", "file", "shell", "text"]


def test_cli_skip_flags(runner: CliRunner, tmp_path: Path) -> None:
    script = tmp_path / "script"
    script.write_text("#!/bin/bash\necho hello\n", encoding="utf-8")
    os.chmod(script, 0o755)

    no_shebang = runner.invoke(cli, ["--skip-shebang", str(script)])
    no_content = runner.invoke(cli, ["--skip-content", str(script)])

    assert _tags(no_shebang.output) == ["executable", "file", "text"]
    assert _tags(no_content.output) == ["executable", "file"]


def test_cli_reads_custom_tables_from_config(runner: CliRunner, tmp_path: Path) -> None:
    config_path = tmp_path / "tagsniff.yaml"
    config_path.write_text(
        "detection:\n  custom_extensions:\n    tpl: [text, template]\n", encoding="utf-8"
    )

    result = runner.invoke(cli, ["--config", str(config_path), "--filename-only", "page.tpl"])

    assert result.exit_code == 0
    assert _tags(result.output) == ["template", "text"]


def test_cli_invalid_config_fails(runner: CliRunner, tmp_path: Path) -> None:
    config_path = tmp_path / "tagsniff.yaml"
    config_path.write_text("detection:\n  unknown_option: true\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config_path), "--filename-only", "a.py"])

    assert result.exit_code == 1
    assert "Invalid configuration values" in result.output


def test_cli_table_format(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--filename-only", "--format", "table", "Makefile"])

    assert result.exit_code == 0
    assert "makefile" in result.output
    assert "encoding" in result.output
