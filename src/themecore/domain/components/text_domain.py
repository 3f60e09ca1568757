"""Translation catalog loading."""

from __future__ import annotations

from .base import ThemeComponent
from .registry import component_registry


@component_registry.register("text_domain")
class TextDomain(ThemeComponent):
    """Load the theme's translations at init time.

    Configuration keys:
        domain: Text domain to load. Nothing happens without it.
        path: Directory holding the catalogs (default: the stylesheet
            directory's ``languages`` folder).
    """

    def setup(self) -> None:
        if "domain" not in self.config:
            return
        load = (
            self.host.load_child_theme_textdomain
            if self.host.is_child_theme()
            else self.host.load_theme_textdomain
        )
        load(self.config["domain"], self.path())

    def path(self) -> str:
        if self.config.get("path") is not None:
            return self.config["path"]
        return self.host.stylesheet_directory() + "/languages"
