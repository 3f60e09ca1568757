"""Configuration loading for theme definitions.

Public API:
    - ThemeConfiguration: Validated component slices plus ignored ids
    - COMPONENT_SCHEMAS: Component id to pydantic schema
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a mapping
    - ConfigError: Exception for configuration errors

Example:
    >>> from pathlib import Path
    >>> from themecore.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("theme.json"))
    ...     print(f"Components: {', '.join(config.component_ids)}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from themecore.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from themecore.application.config.schemas import COMPONENT_SCHEMAS, ThemeConfiguration

__all__ = [
    "COMPONENT_SCHEMAS",
    "ConfigError",
    "ThemeConfiguration",
    "load_config",
    "load_config_from_dict",
]
