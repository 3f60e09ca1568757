"""Customizer fields, sections and panels."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from themecore.contracts.host import CustomizerManager

from .base import ThemeComponent, iter_entries
from .registry import component_registry

# Keys only meaningful to a setting, removed from control arguments
SETTING_PROPERTIES: frozenset[str] = frozenset(
    {
        "theme_supports",
        "transport",
        "validate_callback",
        "sanitize_callback",
        "sanitize_js_callback",
        "dirty",
    }
)

# Keys only meaningful to a control, removed from setting arguments
CONTROL_PROPERTIES: frozenset[str] = frozenset(
    {
        "settings",
        "setting",
        "priority",
        "section",
        "label",
        "description",
        "choices",
        "input_attrs",
        "allow_addition",
        "type",
        "active_callback",
    }
)


def setting_args(args: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in args.items() if key not in CONTROL_PROPERTIES}


def control_args(args: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in args.items() if key not in SETTING_PROPERTIES}


@component_registry.register("customizer")
class Customizer(ThemeComponent):
    """Register customizer objects on ``customize_register``.

    Configuration keys:
        fields: Combined setting + control entries keyed by ``settings``.
        sections: Section entries keyed by ``id``.
        panels: Panel entries keyed by ``id``.

    A field's arguments are split: keys belonging to controls are dropped
    from the setting and keys belonging to settings are dropped from the
    control. Shared keys such as ``default`` or ``capability`` go to both.
    """

    def setup(self) -> None:
        if "fields" in self.config:
            self.add_action("customize_register", self.add_fields)

        if "sections" in self.config:
            self.add_action("customize_register", self.add_sections)

        if "panels" in self.config:
            self.add_action("customize_register", self.add_panels)

    def add_fields(self, customizer: CustomizerManager) -> None:
        for args in iter_entries(self.config["fields"]):
            customizer.add_setting(args["settings"], setting_args(args))
            customizer.add_control(args["settings"], control_args(args))

    def add_sections(self, customizer: CustomizerManager) -> None:
        for args in iter_entries(self.config["sections"]):
            customizer.add_section(args["id"], dict(args))

    def add_panels(self, customizer: CustomizerManager) -> None:
        for args in iter_entries(self.config["panels"]):
            customizer.add_panel(args["id"], dict(args))

