"""Application layer: configuration loading and theme orchestration."""

from themecore.application.config import (
    COMPONENT_SCHEMAS,
    ConfigError,
    ThemeConfiguration,
    load_config,
    load_config_from_dict,
)
from themecore.application.theme import Theme, setup_theme

__all__ = [
    "COMPONENT_SCHEMAS",
    "ConfigError",
    "Theme",
    "ThemeConfiguration",
    "load_config",
    "load_config_from_dict",
    "setup_theme",
]
