"""Typer CLI for theme configurations."""

import logging
from typing import Annotated

import typer

from themecore.cli.commands import components_command, simulate_command, validate_command

app = typer.Typer(
    name="themecore",
    help="Validate and simulate declarative theme configurations.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log component registrations and skipped entries"),
    ] = False,
) -> None:
    """Validate and simulate declarative theme configurations."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


app.command(name="validate")(validate_command)
app.command(name="components")(components_command)
app.command(name="simulate")(simulate_command)


if __name__ == "__main__":
    app()
