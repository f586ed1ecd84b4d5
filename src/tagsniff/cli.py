"""Command line interface for tagsniff."""

from __future__ import annotations

import difflib
import json
import logging
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

from tagsniff.config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    ConfigManager,
    TagsniffConfig,
    resolve_with_precedence,
)
from tagsniff.detection import FileIdentifier
from tagsniff.errors import IdentifyError
from tagsniff.tags import ENCODING_TAGS, MODE_TAGS, TYPE_TAGS

console = Console()
err_console = Console(stderr=True)

_PACKAGE_LOGGER = "tagsniff"


def _configure_logging(level: str) -> None:
    """Attach a single rich handler on stderr to the package logger."""
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _load_settings(config_path: Path | None, overrides: dict[str, Any]) -> TagsniffConfig:
    manager = ConfigManager(config_path)
    try:
        return manager.load(cli_overrides=overrides or None)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _tag_group(tag: str) -> str:
    if tag in TYPE_TAGS:
        return "kind"
    if tag in MODE_TAGS:
        return "mode"
    if tag in ENCODING_TAGS:
        return "encoding"
    return "type"


def _render_table(target: str, tags: list[str]) -> Table:
    table = Table(title=target, show_header=True, header_style="bold")
    table.add_column("Tag")
    table.add_column("Group", style="dim")
    for tag in tags:
        table.add_row(tag, _tag_group(tag))
    return table


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "File identification tool - determines file types based on extensions, "
        "content, and shebangs."
    ),
)
@click.version_option(package_name="tagsniff", prog_name="tagsniff")
@click.argument("path", type=str)
@click.option(
    "--filename-only",
    is_flag=True,
    help="Only use the filename for identification (don't read file contents).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "table"]),
    default="json",
    show_default=True,
    help="Output format for the resulting tags.",
)
@click.option("--skip-content", is_flag=True, help="Never read file content.")
@click.option("--skip-shebang", is_flag=True, help="Never interpret shebang lines.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Settings file to use instead of {DEFAULT_CONFIG_PATH}.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each resolution step to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    path: str,
    filename_only: bool,
    output_format: str,
    skip_content: bool,
    skip_shebang: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Print the tags identifying PATH.

    Args:
        ctx: Click context used to set the exit code.
        path: File path (or bare filename with ``--filename-only``).
        filename_only: Resolve from the filename alone.
        output_format: ``json`` for a sorted JSON array, ``table`` for a rich table.
        skip_content: Override ``detection.skip_content_analysis``.
        skip_shebang: Override ``detection.skip_shebang_analysis``.
        config_path: Optional settings file path.
        verbose: Enable debug logging.

    Raises:
        click.ClickException: If the path cannot be identified or settings are invalid.
    """
    overrides: dict[str, Any] = {}
    if skip_content:
        overrides["detection.skip_content_analysis"] = True
    if skip_shebang:
        overrides["detection.skip_shebang_analysis"] = True
    if verbose:
        overrides["logging.level"] = "DEBUG"

    settings = _load_settings(config_path, overrides)
    _configure_logging(settings.logging.level)
    identifier = FileIdentifier.from_settings(settings.detection)

    if filename_only:
        tags = identifier.tags_from_filename(path)
    else:
        try:
            tags = identifier.identify(path)
        except IdentifyError as exc:
            raise click.ClickException(str(exc)) from exc

    if not tags:
        ctx.exit(1)

    ordered = sorted(tags)
    if output_format == "table":
        console.print(_render_table(path, ordered))
    else:
        click.echo(json.dumps(ordered))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Settings file to manage instead of {DEFAULT_CONFIG_PATH}.",
)
@click.pass_context
def config_cli(ctx: click.Context, config_path: Path | None) -> None:
    """Manage tagsniff settings files and overrides."""
    ctx.obj = ConfigManager(config_path)


@config_cli.command("path")
@click.pass_obj
def config_path_command(manager: ConfigManager) -> None:
    """Print the settings file location."""
    click.echo(str(manager.config_path))


@config_cli.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
@click.pass_obj
def config_view(manager: ConfigManager, no_env: bool) -> None:
    """Display the effective settings after applying precedence rules.

    Raises:
        click.ClickException: If settings cannot be loaded.
    """
    try:
        config = manager.load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config_cli.command("set")
@click.argument("key")
@click.option("--value", required=True, help="YAML literal to assign to KEY.")
@click.pass_obj
def config_set(manager: ConfigManager, key: str, value: str) -> None:
    """Persist a setting expressed as a dotted KEY (e.g. detection.skip_shebang_analysis).

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if len(segments) != 2:
        raise click.ClickException("KEY must have the form SECTION.FIELD, e.g. 'logging.level'.")

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    manager.ensure_exists()
    before = manager.read_text().splitlines()
    try:
        file_data = manager.load_file_overrides()
        section = file_data.setdefault(segments[0], {})
        if not isinstance(section, dict):
            raise ConfigError(f"Section {segments[0]!r} in the settings file is not a mapping.")
        if segments[1] in section and section[segments[1]] == parsed_value:
            console.print("[yellow]No changes applied; value already up to date.[/yellow]")
            return
        section[segments[1]] = parsed_value
        resolve_with_precedence(defaults=TagsniffConfig(), file_overrides=file_data)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    after = manager.read_text().splitlines()

    diff = difflib.unified_diff(
        before,
        after,
        fromfile="config.yaml (before)",
        tofile="config.yaml (after)",
        lineterm="",
    )
    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


__all__ = ["cli", "config_cli"]
