"""Validate command for checking theme configuration files.

This module provides the `validate` command that loads a JSON theme
configuration, validates every component slice and reports which
components the configuration enables.
"""

from pathlib import Path
from typing import Annotated

import typer

from themecore.application.config import ConfigError, ThemeConfiguration, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON theme configuration to validate"),
    ],
) -> None:
    """Validate a theme configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing required keys, invalid types, typos)
    - Component ids that name no known component (ignored, not an error)

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)

    Example:
        themecore validate theme.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    _display_configuration(config)
    typer.echo("Validation passed. Configuration is valid.")


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(root)"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_configuration(config: ThemeConfiguration) -> None:
    if config.components:
        typer.echo("Components:")
        for component_id in config.component_ids:
            typer.echo(f"  {component_id}")
        typer.echo()
    else:
        typer.echo("No components configured.")
        typer.echo()

    if config.ignored:
        typer.echo("Warnings:")
        for component_id in config.ignored:
            typer.echo(f"  {component_id}: unknown component, ignored")
        typer.echo()
