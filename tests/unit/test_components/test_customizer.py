"""Tests for the Customizer, CustomColors and Kirki components."""

from __future__ import annotations

import pytest

from themecore.domain.components import CustomColors, Customizer, Kirki
from themecore.infrastructure import InMemoryHost

PRIMARY = {
    "primary": {
        "id": "primary",
        "default": "#009cff",
        "output": [
            {"elements": ["a", ".button"], "properties": {"color": "%s"}},
            {"elements": [".overlay"], "properties": {"background": "rgba(%s,0.5)"}},
        ],
    }
}


class TestCustomizer:
    """Tests for plain customizer registration."""

    def test_field_arguments_split(self, host: InMemoryHost) -> None:
        """Setting-only and control-only keys go to their own object."""
        Customizer(
            {
                "fields": [
                    {
                        "settings": "footer_text",
                        "default": "",
                        "transport": "postMessage",
                        "sanitize_callback": "wp_kses_post",
                        "label": "Footer Text",
                        "section": "footer",
                        "type": "textarea",
                    }
                ]
            }
        ).init(host)

        host.do_action("customize_register", host.customizer)

        assert host.customizer.settings["footer_text"] == {
            "default": "",
            "transport": "postMessage",
            "sanitize_callback": "wp_kses_post",
        }
        assert host.customizer.controls["footer_text"] == {
            "settings": "footer_text",
            "default": "",
            "label": "Footer Text",
            "section": "footer",
            "type": "textarea",
        }

    def test_sections_and_panels(self, host: InMemoryHost) -> None:
        """Sections and panels are registered under their ids."""
        Customizer(
            {
                "panels": {"theme": {"id": "theme_options", "title": "Theme Options"}},
                "sections": [{"id": "footer", "title": "Footer", "panel": "theme_options"}],
            }
        ).init(host)

        host.do_action("customize_register", host.customizer)

        assert host.customizer.panels == {"theme_options": {"id": "theme_options", "title": "Theme Options"}}
        assert host.customizer.sections["footer"]["panel"] == "theme_options"

    def test_absent_keys_skip_capabilities(self, host: InMemoryHost) -> None:
        """Only present keys subscribe."""
        assert len(Customizer({"sections": []}).init(host)) == 1


class TestCustomColors:
    """Tests for customizer colors and their CSS."""

    def test_settings_and_controls(self, host: InMemoryHost) -> None:
        """Each color gets a hex setting and a color control."""
        CustomColors(PRIMARY).init(host)

        host.do_action("customize_register", host.customizer)

        assert host.customizer.settings["child_theme_primary_color"] == {
            "default": "#009cff",
            "sanitize_callback": "sanitize_hex_color",
        }
        assert host.customizer.controls["child_theme_primary_color"] == {
            "type": "color",
            "section": "colors",
            "label": "Primary Color",
            "settings": "child_theme_primary_color",
        }

    def test_no_css_at_default(self, host: InMemoryHost) -> None:
        """Colors left at their default print nothing."""
        CustomColors(PRIMARY).init(host)

        host.do_action("wp_enqueue_scripts")

        assert host.inline_styles == {}

    def test_css_for_changed_color(self, host: InMemoryHost) -> None:
        """Changed colors print minified rules on the theme handle."""
        host.define("CHILD_THEME_NAME", "Business Pro")
        host.set_theme_mod("child_theme_primary_color", "#ff0000")
        CustomColors(PRIMARY).init(host)

        host.do_action("wp_enqueue_scripts")

        assert host.inline_styles == {
            "business-pro": ["a,.button{color:#f00}.overlay{background:rgba(255,0,0,0.5)}"]
        }

    def test_css_for_short_hex_color(self, host: InMemoryHost) -> None:
        """Three digit colors accepted by the sanitizer print valid rgba rules."""
        host.set_theme_mod("child_theme_primary_color", "#abc")
        CustomColors(PRIMARY).init(host)

        host.do_action("wp_enqueue_scripts")

        assert host.inline_styles == {
            "child-theme": ["a,.button{color:#abc}.overlay{background:rgba(170,187,204,0.5)}"]
        }

    def test_default_handle(self, host: InMemoryHost) -> None:
        """Without a theme name the handle is child-theme."""
        host.set_theme_mod("child_theme_primary_color", "#000000")
        CustomColors(PRIMARY).init(host)

        host.do_action("wp_enqueue_scripts")

        assert list(host.inline_styles) == ["child-theme"]

    def test_css_printed_late(self, host: InMemoryHost) -> None:
        """Inline CSS is added at priority 100."""
        subscriptions = CustomColors(PRIMARY).init(host)

        assert [(s.event, s.priority) for s in subscriptions] == [
            ("customize_register", 10),
            ("wp_enqueue_scripts", 100),
        ]


class TestKirki:
    """Tests for the Kirki component."""

    def test_config_and_objects(self, host: InMemoryHost) -> None:
        """The config exists before panels, sections and fields are added."""
        Kirki(
            {
                "handle": "business-pro",
                "config": {"capability": "edit_theme_options"},
                "panels": [{"id": "theme", "title": "Theme"}],
                "sections": [{"id": "header", "panel": "theme"}],
                "fields": [{"type": "toggle", "settings": "sticky_header", "section": "header"}],
            }
        ).init(host)

        host.do_action("after_setup_theme")

        assert [call.name for call in host.calls if call.name.startswith("kirki.")] == [
            "kirki.add_config",
            "kirki.add_panel",
            "kirki.add_section",
            "kirki.add_field",
        ]
        assert host.field_builder.configs == {"business-pro": {"capability": "edit_theme_options"}}
        assert host.field_builder.fields["business-pro"][0]["settings"] == "sticky_header"

    def test_handle_from_constant(self, host: InMemoryHost) -> None:
        """The handle falls back to CHILD_THEME_HANDLE, then child-theme."""
        host.define("CHILD_THEME_HANDLE", "business-pro")
        Kirki({}).init(host)
        host.do_action("after_setup_theme")

        other = InMemoryHost()
        Kirki({}).init(other)
        other.do_action("after_setup_theme")

        assert list(host.field_builder.configs) == ["business-pro"]
        assert list(other.field_builder.configs) == ["child-theme"]

    def test_method_and_loader(self, host: InMemoryHost) -> None:
        """Kirki's CSS method and loader settings are overridden."""
        Kirki({"method": "file", "loader": {"disable_loader": True}}).init(host)

        assert host.apply_filters("kirki/dynamic_css/method", "inline") == "file"
        assert host.apply_filters("kirki_config", {"disable_loader": False, "url_path": "/k"}) == {
            "disable_loader": True,
            "url_path": "/k",
        }

    def test_remove_defaults(self, host: InMemoryHost) -> None:
        """Default customizer objects are removed late."""
        host.customizer.add_section("static_front_page", {})
        host.customizer.add_control("blogdescription", {})
        Kirki({"remove": [["section", "static_front_page"], ["control", "blogdescription"]]}).init(host)

        host.do_action("customize_register", host.customizer)

        assert host.customizer.sections == {}
        assert host.customizer.controls == {}

    def test_remove_unknown_kind(self, host: InMemoryHost) -> None:
        """Only settings, controls, sections and panels can be removed."""
        Kirki({"remove": [["widget", "search"]]}).init(host)

        with pytest.raises(ValueError, match="widget"):
            host.do_action("customize_register", host.customizer)

    def test_control_styles_and_scripts(self, host: InMemoryHost) -> None:
        """Extra styles and scripts print in the customizer controls."""
        subscriptions = Kirki({"styles": "<style>.x{}</style>", "scripts": "<script></script>"}).init(host)

        host.do_action("customize_controls_print_styles")
        host.do_action("customize_controls_print_scripts")

        assert host.output_buffer == ["<style>.x{}</style>", "<script></script>"]
        assert ("customize_controls_print_scripts", 999) in [(s.event, s.priority) for s in subscriptions]
