"""Page template list filtering."""

from __future__ import annotations

from .base import ThemeComponent
from .registry import component_registry

ARCHIVE = "page_archive.php"
BLOG = "page_blog.php"


@component_registry.register("page_template")
class PageTemplate(ThemeComponent):
    """Add to or remove from the list of selectable page templates.

    Configuration keys:
        register: Mapping of template path to label.
        unregister: Template paths to drop.
    """

    def setup(self) -> None:
        if "register" in self.config:
            self.add_filter("theme_page_templates", self.add_templates)

        if "unregister" in self.config:
            self.add_filter("theme_page_templates", self.remove_templates)

    def add_templates(self, templates: dict[str, str]) -> dict[str, str]:
        return {**templates, **self.config["register"]}

    def remove_templates(self, templates: dict[str, str]) -> dict[str, str]:
        removed = set(self.config["unregister"])
        return {path: label for path, label in templates.items() if path not in removed}
