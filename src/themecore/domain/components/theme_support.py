"""Theme feature declarations."""

from __future__ import annotations

from .base import ThemeComponent
from .registry import component_registry


@component_registry.register("theme_support")
class ThemeSupport(ThemeComponent):
    """Add and remove theme features at init time.

    Configuration keys:
        add: Mapping of feature name to feature arguments.
        remove: Feature names to remove. Removals happen first.
    """

    def setup(self) -> None:
        for feature in self.config.get("remove", ()):
            self.host.remove_theme_support(feature)

        for feature, args in self.config.get("add", {}).items():
            self.host.add_theme_support(feature, args)
