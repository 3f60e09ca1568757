"""CLI command implementations for the themecore application.

This package contains subcommands for the themecore CLI, including:
- validate: Validate a theme configuration file
- components: List registered components
- simulate: Run a configuration against the in-memory host
"""

from themecore.cli.commands.components import components_command
from themecore.cli.commands.simulate import simulate_command
from themecore.cli.commands.validate import validate_command

__all__ = ["components_command", "simulate_command", "validate_command"]
