"""Components command listing the registered theme components."""

import typer

from themecore.domain.components import component_registry


def components_command() -> None:
    """List all registered theme components.

    Each id is a valid top-level key of a theme configuration.

    Example:
        themecore components
    """
    ids = component_registry.list()
    if not ids:
        typer.echo("No components registered.")
        return

    typer.echo("Available components:")
    typer.echo()

    max_id_width = max(len(component_id) for component_id in ids)
    for component_id in ids:
        component_cls = component_registry.get(component_id)
        summary = (component_cls.__doc__ or "").strip().splitlines()
        description = summary[0] if summary else component_cls.__name__
        typer.echo(f"  {component_id:<{max_id_width}}  - {description}")
