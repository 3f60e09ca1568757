"""Customizer color settings with generated inline CSS."""

from __future__ import annotations

import logging
from typing import Any

from themecore.contracts.host import CustomizerManager

from ..services.css import color_rule, minify_css
from ..services.text import humanize, slugify
from .base import ThemeComponent
from .registry import component_registry

logger = logging.getLogger(__name__)

DEFAULT_STYLE_HANDLE = "child-theme"


def setting_id(color_id: str) -> str:
    return f"child_theme_{color_id}_color"


@component_registry.register("custom_colors")
class CustomColors(ThemeComponent):
    """Expose theme colors in the customizer and print the resulting CSS.

    The slice maps a color name to its settings::

        {
            "primary": {
                "id": "primary",
                "default": "#009cff",
                "output": [
                    {"elements": ["a", ".button"], "properties": {"color": "%s"}}
                ]
            }
        }

    CSS is only emitted for colors whose stored value differs from the
    default. Patterns containing ``rgba`` receive a decimal triple.
    """

    def setup(self) -> None:
        self.add_action("customize_register", self.add_settings)
        self.add_action("wp_enqueue_scripts", self.output_css, 100)

    def add_settings(self, customizer: CustomizerManager) -> None:
        for settings in self.config.values():
            setting = setting_id(settings["id"])
            customizer.add_setting(
                setting,
                {
                    "default": settings["default"],
                    "sanitize_callback": "sanitize_hex_color",
                },
            )
            customizer.add_control(
                setting,
                {
                    "type": "color",
                    "section": "colors",
                    "label": humanize(settings["id"]) + " Color",
                    "settings": setting,
                },
            )

    def build_css(self) -> str:
        """Unminified CSS for every color changed from its default."""
        css = ""
        for settings in self.config.values():
            default = settings["default"]
            color = self.host.get_theme_mod(setting_id(settings["id"]), default)
            if color == default:
                continue
            for rule in settings["output"]:
                css += color_rule(list(rule["elements"]), dict(rule["properties"]), color)
        return css

    def output_css(self, *args: Any) -> None:
        css = self.build_css()
        if not css:
            logger.debug("All custom colors at their defaults, no inline CSS")
            return
        self.host.add_inline_style(self.style_handle(), minify_css(css))

    def style_handle(self) -> str:
        name = self.host.constant("CHILD_THEME_NAME")
        return slugify(name) if name else DEFAULT_STYLE_HANDLE
