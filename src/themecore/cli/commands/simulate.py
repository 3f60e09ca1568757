"""Simulate command running a theme configuration against an in-memory host.

The theme is set up, the standard request lifecycle events are fired in
order and the resulting host calls are printed.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from themecore.application import ConfigError, Theme, load_config
from themecore.cli.commands.validate import display_load_error
from themecore.infrastructure import CallLogFormatter, InMemoryHost, ThemeDirectory

# Events fired for a simulated front-end request, in order
LIFECYCLE: tuple[str, ...] = (
    "after_setup_theme",
    "init",
    "widgets_init",
    "wp",
    "customize_register",
    "wp_enqueue_scripts",
    "genesis_meta",
    "genesis_before_content_sidebar_wrap",
)


def parse_condition(text: str) -> tuple[str, Any]:
    """Parse a ``NAME=VALUE`` condition.

    Values "true"/"false" become booleans and integers become ints; a bare
    ``NAME`` means true.

    Example:
        >>> parse_condition("is_front_page")
        ('is_front_page', True)
        >>> parse_condition("page_on_front=4")
        ('page_on_front', 4)

    Raises:
        typer.BadParameter: If the name is empty.
    """
    name, separator, raw = text.partition("=")
    name = name.strip()
    if not name:
        raise typer.BadParameter(f"Invalid condition '{text}': expected NAME=VALUE")
    if not separator:
        return name, True

    raw = raw.strip()
    if raw.lower() in ("true", "false"):
        return name, raw.lower() == "true"
    try:
        return name, int(raw)
    except ValueError:
        return name, raw


def simulate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON theme configuration"),
    ],
    condition: Annotated[
        list[str] | None,
        typer.Option(
            "--condition",
            "-c",
            help="Conditional tag answer as NAME=VALUE (repeatable)",
        ),
    ] = None,
    child_theme: Annotated[
        bool,
        typer.Option("--child-theme", help="Simulate an active child theme"),
    ] = False,
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Parent theme (template) slug"),
    ] = "genesis",
    effects_only: Annotated[
        bool,
        typer.Option("--effects-only", help="Hide hook subscriptions in the call log"),
    ] = False,
) -> None:
    """Simulate a request against a theme configuration.

    Sets the theme up on an in-memory host, fires the standard lifecycle
    events and prints every recorded host call.

    Example:
        themecore simulate theme.json -c is_singular=true --child-theme
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    conditions = dict(parse_condition(text) for text in condition or [])
    host = InMemoryHost(
        theme=ThemeDirectory(template=template, is_child=child_theme),
        conditions=conditions,
    )

    try:
        Theme(host).setup(config)
        for event in LIFECYCLE:
            if event == "customize_register":
                host.do_action(event, host.customizer)
            else:
                host.do_action(event)
    except (ValueError, RuntimeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    formatter = CallLogFormatter(include_subscriptions=not effects_only)
    typer.echo(formatter.format(host.calls))

    if host.output_buffer:
        typer.echo()
        typer.echo("OUTPUT")
        typer.echo("=" * 70)
        typer.echo(host.rendered)
