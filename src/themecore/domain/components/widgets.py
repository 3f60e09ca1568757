"""Widget class registration."""

from __future__ import annotations

from typing import Any

from .base import ThemeComponent
from .registry import component_registry


@component_registry.register("widgets")
class Widgets(ThemeComponent):
    """Register and unregister widgets on ``widgets_init``.

    Configuration keys:
        register: Widget classes (or class names) to register.
        unregister: Widget classes (or class names) to unregister.
    """

    def setup(self) -> None:
        if "unregister" in self.config:
            self.add_action("widgets_init", self.unregister, 15)

        if "register" in self.config:
            self.add_action("widgets_init", self.register, 15)

    def register(self, *args: Any) -> None:
        for widget in self.config["register"]:
            self.host.register_widget(widget)

    def unregister(self, *args: Any) -> None:
        for widget in self.config["unregister"]:
            self.host.unregister_widget(widget)
