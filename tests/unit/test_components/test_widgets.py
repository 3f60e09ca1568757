"""Tests for the WidgetArea and Widgets components."""

from __future__ import annotations

from themecore.domain.components import WidgetArea, Widgets
from themecore.infrastructure import InMemoryHost

FRONT_PAGE = {
    "id": "front-page-1",
    "name": "Front Page 1",
    "description": "First front page section",
    "location": "genesis_before_content_sidebar_wrap",
    "priority": 12,
}


class TestWidgetAreaRegistration:
    """Tests for sidebar registration."""

    def test_genesis_registration_strips_display_keys(self, host: InMemoryHost) -> None:
        """Genesis themes register through Genesis without display keys."""
        WidgetArea({"register": [FRONT_PAGE]}).init(host)

        assert host.calls_to("genesis_register_widget_area")[0].args == (
            {"id": "front-page-1", "name": "Front Page 1", "description": "First front page section"},
        )
        assert host.calls_to("register_sidebar") == []

    def test_core_registration(self, core_host: InMemoryHost) -> None:
        """Other themes use the core sidebar registration."""
        WidgetArea({"register": [FRONT_PAGE]}).init(core_host)

        assert "front-page-1" in core_host.sidebars
        assert core_host.calls_to("genesis_register_widget_area") == []

    def test_unregister(self, host: InMemoryHost) -> None:
        """Listed sidebars are unregistered."""
        host.register_sidebar({"id": "sidebar-alt"})

        WidgetArea({"unregister": ["sidebar-alt"]}).init(host)

        assert "sidebar-alt" not in host.sidebars


class TestWidgetAreaDisplay:
    """Tests for rendering widget areas at their location."""

    def test_rendered_at_location_and_priority(self, host: InMemoryHost) -> None:
        """Areas subscribe to their location with their priority."""
        subscriptions = WidgetArea({"register": [FRONT_PAGE]}).init(host)

        assert [(s.event, s.priority) for s in subscriptions] == [
            ("genesis_before_content_sidebar_wrap", 12)
        ]

    def test_default_markup(self, host: InMemoryHost) -> None:
        """Without before/after the area gets the default wrapper."""
        WidgetArea({"register": [FRONT_PAGE]}).init(host)

        host.do_action("genesis_before_content_sidebar_wrap")

        assert host.calls_to("genesis_widget_area")[0].args == (
            "front-page-1",
            {
                "before": '<div class="front-page-1 widget-area"><div class="wrap">',
                "after": "</div></div>",
            },
        )
        assert host.rendered == (
            '<div class="front-page-1 widget-area"><div class="wrap">'
            "<!-- front-page-1 --></div></div>"
        )

    def test_dynamic_markup(self, host: InMemoryHost) -> None:
        """Markup can be computed when the area renders."""
        area = {**FRONT_PAGE, "before": lambda: "<aside>", "after": "</aside>"}
        WidgetArea({"register": [area]}).init(host)

        host.do_action("genesis_before_content_sidebar_wrap")

        assert host.rendered == "<aside><!-- front-page-1 --></aside>"

    def test_guard(self, host: InMemoryHost) -> None:
        """Areas only render when their guard holds."""
        area = {**FRONT_PAGE, "conditional": {"query": "is_front_page"}}
        WidgetArea({"register": [area]}).init(host)

        host.do_action("genesis_before_content_sidebar_wrap")
        assert host.rendered == ""

        host.conditions["is_front_page"] = True
        host.do_action("genesis_before_content_sidebar_wrap")
        assert "<!-- front-page-1 -->" in host.rendered

    def test_null_guard_renders(self, host: InMemoryHost) -> None:
        """A null conditional counts as no guard."""
        WidgetArea({"register": [{**FRONT_PAGE, "conditional": None}]}).init(host)

        host.do_action("genesis_before_content_sidebar_wrap")

        assert "<!-- front-page-1 -->" in host.rendered

    def test_area_without_location_not_displayed(self, host: InMemoryHost) -> None:
        """Areas without a location are registered but do not stop later areas."""
        hidden = {"id": "hidden", "name": "Hidden"}
        WidgetArea({"register": [hidden, FRONT_PAGE]}).init(host)

        host.do_action("genesis_before_content_sidebar_wrap")

        assert set(host.sidebars) == {"hidden", "front-page-1"}
        assert [call.args[0] for call in host.calls_to("genesis_widget_area")] == ["front-page-1"]

    def test_core_rendering(self, core_host: InMemoryHost) -> None:
        """Non-Genesis themes render through dynamic_sidebar."""
        WidgetArea({"register": [FRONT_PAGE]}).init(core_host)

        core_host.do_action("genesis_before_content_sidebar_wrap")

        assert len(core_host.calls_to("dynamic_sidebar")) == 1


class TestWidgets:
    """Tests for widget registration."""

    def test_register_and_unregister_on_widgets_init(self, host: InMemoryHost) -> None:
        """Widgets change on widgets_init at priority 15."""
        host.register_widget("WP_Widget_Meta")
        subscriptions = Widgets(
            {"register": ["Featured_Page_Widget"], "unregister": ["WP_Widget_Meta"]}
        ).init(host)

        assert {(s.event, s.priority) for s in subscriptions} == {("widgets_init", 15)}
        assert host.widgets == ["WP_Widget_Meta"]

        host.do_action("widgets_init")

        assert host.widgets == ["Featured_Page_Widget"]
