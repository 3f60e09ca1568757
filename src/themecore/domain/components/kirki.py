"""Kirki customizer field builder integration."""

from __future__ import annotations

from typing import Any

from themecore.contracts.host import CustomizerManager

from .base import ThemeComponent, iter_entries
from .registry import component_registry

DEFAULT_HANDLE = "child-theme"

_REMOVABLE = frozenset({"setting", "control", "section", "panel"})


@component_registry.register("kirki")
class Kirki(ThemeComponent):
    """Register Kirki panels, sections and fields and tune Kirki itself.

    Configuration keys:
        handle: Kirki config id (default: the ``CHILD_THEME_HANDLE``
            constant, else "child-theme").
        config: Arguments for the Kirki config.
        method: Dynamic CSS output method ("inline" or "file").
        loader: Loader settings overriding Kirki's own.
        remove: ``[kind, id]`` pairs of default customizer objects to remove.
        styles: Extra CSS printed in the customizer controls.
        scripts: Extra JS printed in the customizer controls.
        panels, sections, fields: Kirki objects to add.
    """

    def setup(self) -> None:
        if "method" in self.config:
            self.add_filter("kirki/dynamic_css/method", self.write_to_file)
        if "loader" in self.config:
            self.add_filter("kirki_config", self.remove_loader)
        if "remove" in self.config:
            self.add_action("customize_register", self.remove_defaults, 99)
        if "styles" in self.config:
            self.add_action("customize_controls_print_styles", self.styles, 99)
        if "scripts" in self.config:
            self.add_action("customize_controls_print_scripts", self.scripts, 999)

        # The config must exist before fields can reference it
        self.add_action("after_setup_theme", self.add_config)
        self.add_action("after_setup_theme", self.add_objects, 20)

    @property
    def handle(self) -> str:
        return self.config.get("handle") or self.host.constant("CHILD_THEME_HANDLE", DEFAULT_HANDLE)

    def write_to_file(self, *args: Any) -> str:
        return self.config["method"]

    def remove_loader(self, config: dict[str, Any]) -> dict[str, Any]:
        return {**config, **self.config["loader"]}

    def add_config(self, *args: Any) -> None:
        self.host.field_builder.add_config(self.handle, dict(self.config.get("config", {})))

    def add_objects(self, *args: Any) -> None:
        builder = self.host.field_builder
        for panel in iter_entries(self.config.get("panels", ())):
            builder.add_panel(panel["id"], dict(panel))
        for section in iter_entries(self.config.get("sections", ())):
            builder.add_section(section["id"], dict(section))
        for field in iter_entries(self.config.get("fields", ())):
            builder.add_field(self.handle, dict(field))

    def remove_defaults(self, customizer: CustomizerManager) -> None:
        for kind, object_id in self.config["remove"]:
            if kind not in _REMOVABLE:
                raise ValueError(f"Cannot remove customizer object of kind '{kind}'")
            getattr(customizer, f"remove_{kind}")(object_id)

    def styles(self, *args: Any) -> None:
        self.host.output(self.config["styles"])

    def scripts(self, *args: Any) -> None:
        self.host.output(self.config["scripts"])
