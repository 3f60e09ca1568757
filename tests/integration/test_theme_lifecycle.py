"""End-to-end tests running a full theme configuration through a request.

The configuration is loaded from disk, set up on an in-memory host and the
host events of a front page request are fired in order.
"""

from pathlib import Path

import pytest

from themecore.application import Theme, load_config
from themecore.cli.commands.simulate import LIFECYCLE
from themecore.infrastructure import InMemoryHost, ThemeDirectory

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def fire_lifecycle(host: InMemoryHost) -> None:
    for event in LIFECYCLE:
        if event == "customize_register":
            host.do_action(event, host.customizer)
        else:
            host.do_action(event)


@pytest.fixture
def front_page_host() -> InMemoryHost:
    """Child theme host answering a front page request."""
    return InMemoryHost(
        theme=ThemeDirectory(template="genesis", is_child=True),
        conditions={"is_front_page": True},
    )


@pytest.fixture
def theme(front_page_host: InMemoryHost) -> Theme:
    """Theme set up from the full fixture configuration."""
    theme = Theme(front_page_host)
    theme.setup(load_config(FIXTURES_PATH / "valid_full.json"))
    return theme


class TestSetupEffects:
    """Effects applied while the theme is set up."""

    def test_unknown_component_skipped(self, theme: Theme) -> None:
        """Only registered component ids are constructed."""
        assert "analytics" not in theme.components
        assert "hero_section" in theme.components

    def test_constants_defined(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Constants are defined immediately."""
        assert front_page_host.constant("CHILD_THEME_NAME") == "Business Pro"
        assert front_page_host.constant("CHILD_THEME_HANDLE") == "business-pro"

    def test_text_domain_loaded(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Translations load from the stylesheet directory."""
        assert front_page_host.text_domains == {
            "business-pro": front_page_host.theme.path + "/languages"
        }

    def test_theme_supports(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Features are added, removed and the hero section declared."""
        supports = front_page_host.theme_supports
        assert supports["html5"] == ["caption", "gallery", "search-form"]
        assert supports["genesis-responsive-viewport"] is True
        assert supports["hero-section"] is True
        assert front_page_host.calls_to("remove_theme_support")[0].args == (
            "genesis-inpost-layouts",
        )

    def test_widget_areas(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Widget areas register without their display keys."""
        area = front_page_host.sidebars["front-page-1"]
        assert area["name"] == "Front Page 1"
        assert "location" not in area
        assert "conditional" not in area
        assert front_page_host.calls_to("unregister_sidebar")[0].args == ("sidebar-alt",)


class TestFilters:
    """Filters contributed by the configuration."""

    def test_genesis_settings(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Defaults and forced values reach Genesis option reads."""
        front_page_host.options["genesis-settings"] = {"site_layout": "content-sidebar"}

        assert front_page_host.genesis_option("blog_cat_num") == 6
        assert front_page_host.genesis_option("site_layout") == "full-width-content"

    def test_page_templates(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Templates are added and removed."""
        templates = front_page_host.apply_filters(
            "theme_page_templates", {"page_archive.php": "Archive"}
        )

        assert templates == {"page_blog.php": "Blog"}

    def test_breadcrumbs(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Configured labels replace the breadcrumb defaults."""
        args = front_page_host.apply_filters(
            "genesis_breadcrumb_args", {"home": "Start", "sep": " > ", "prefix": "<div>"}
        )

        assert args == {"home": "Home", "sep": " / ", "prefix": "<div>"}


class TestRequestLifecycle:
    """Effects of firing the request events."""

    def test_assets_enqueued(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Scripts, localized data and guarded styles load on the front page."""
        fire_lifecycle(front_page_host)

        assert front_page_host.scripts["business-pro"]["enqueued"] is True
        assert front_page_host.scripts["business-pro"]["footer"] is True
        assert front_page_host.localized["business-pro"] == {"businessPro": {"menu": "Menu"}}
        assert front_page_host.styles["business-pro-fonts"]["enqueued"] is True

    def test_guarded_style_skipped(self) -> None:
        """Guarded styles stay out on other requests."""
        host = InMemoryHost()
        Theme(host).setup(load_config(FIXTURES_PATH / "valid_full.json"))

        fire_lifecycle(host)

        assert "business-pro-fonts" not in host.styles
        assert host.rendered == ""

    def test_hooks_applied(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Hook entries are applied on the wp event."""
        assert "genesis_do_nav" not in front_page_host.callbacks("genesis_before")

        fire_lifecycle(front_page_host)

        assert "genesis_do_nav" in front_page_host.callbacks("genesis_before")
        assert front_page_host.calls_to("remove_filter")[0].args == (
            "genesis_after_header",
            "genesis_do_nav",
            10,
        )

    def test_widget_area_rendered(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """The front page widget area renders with its default wrapper."""
        fire_lifecycle(front_page_host)

        assert front_page_host.rendered == (
            '<div class="front-page-1 widget-area"><div class="wrap">'
            "<!-- front-page-1 -->"
            "</div></div>"
        )

    def test_custom_color_css(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Changed colors print minified CSS on the theme stylesheet."""
        front_page_host.set_theme_mod("child_theme_primary_color", "#123456")

        fire_lifecycle(front_page_host)

        assert front_page_host.inline_styles == {
            "business-pro": ["a,.button{color:#123456}"]
        }

    def test_customizer_settings(self, theme: Theme, front_page_host: InMemoryHost) -> None:
        """Color settings are added to the customizer."""
        fire_lifecycle(front_page_host)

        names = [call.name for call in front_page_host.calls]
        assert "customizer.add_setting" in names
        assert "customizer.add_control" in names

    def test_hero_not_shown_on_front_page(
        self, theme: Theme, front_page_host: InMemoryHost
    ) -> None:
        """The hero section is disabled for the front page."""
        fire_lifecycle(front_page_host)

        assert "has-hero-section" not in front_page_host.apply_filters("body_class", [])
