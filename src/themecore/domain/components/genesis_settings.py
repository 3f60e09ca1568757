"""Genesis theme settings defaults and forced values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..callbacks import return_value
from .base import ThemeComponent
from .registry import component_registry


@component_registry.register("genesis_settings")
class GenesisSettings(ThemeComponent):
    """Override Genesis theme settings.

    Configuration keys:
        defaults: Values overlaid on the theme settings defaults.
        force: Values every read of the named option short-circuits to.
    """

    def setup(self) -> None:
        if "defaults" in self.config:
            self.add_filter("genesis_theme_settings_defaults", self.set_defaults)

        if "force" in self.config:
            self.force_settings(self.config["force"])

    def set_defaults(self, defaults: dict[str, Any]) -> dict[str, Any]:
        return {**defaults, **self.config["defaults"]}

    def force_settings(self, settings: Mapping[str, Any]) -> None:
        for key, value in settings.items():
            self.add_filter(f"genesis_pre_get_option_{key}", return_value(value))
