"""Widget area (sidebar) registration and rendering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from ..value_objects import evaluate_guard, resolve_value
from .base import ThemeComponent
from .registry import component_registry

logger = logging.getLogger(__name__)

HEADER_RIGHT = "header-right"
SIDEBAR = "sidebar"
SIDEBAR_ALT = "sidebar-alt"

# Keys consumed by this component rather than by sidebar registration
_DISPLAY_KEYS = frozenset({"location", "before", "after", "priority", "conditional"})


@component_registry.register("widget_area")
class WidgetArea(ThemeComponent):
    """Register widget areas and render them at configured locations.

    Configuration keys:
        register: Widget area entries. Each needs an ``id`` and may set
            ``name``, ``description``, ``before_title``, ``after_title``,
            ``location`` (event that renders the area), ``priority``
            (default 10), ``before``/``after`` wrapper markup (static or
            deferred) and a ``conditional`` guard.
        unregister: Sidebar ids to unregister.

    Genesis registration and rendering are used when the parent template
    is Genesis, the core sidebar functions otherwise.
    """

    def setup(self) -> None:
        if "register" in self.config:
            self.register(self.config["register"])
            self.display(self.config["register"])

        if "unregister" in self.config:
            for sidebar_id in self.config["unregister"]:
                self.host.unregister_sidebar(sidebar_id)

    def is_genesis(self) -> bool:
        return self.host.template() == "genesis"

    def register(self, areas: list[Mapping[str, Any]]) -> None:
        register = (
            self.host.genesis_register_widget_area
            if self.is_genesis()
            else self.host.register_sidebar
        )
        for args in areas:
            register({key: value for key, value in args.items() if key not in _DISPLAY_KEYS})

    def display(self, areas: list[Mapping[str, Any]]) -> None:
        for args in areas:
            if not args.get("location"):
                continue
            self.add_action(args["location"], self._renderer(args), args.get("priority", 10))

    def _renderer(self, args: Mapping[str, Any]) -> Callable[..., None]:
        def render(*event_args: Any) -> None:
            self.render(args)

        return render

    def render(self, args: Mapping[str, Any]) -> None:
        """Render one widget area wrapped in its before/after markup."""
        guard = args.get("conditional")
        if guard is not None and not evaluate_guard(guard, self.host):
            logger.debug(f"Widget area '{args['id']}' hidden: condition not met")
            return

        before = args.get("before")
        if before is None:
            before = f'<div class="{args["id"]} widget-area"><div class="wrap">'
        after = args.get("after")
        if after is None:
            after = "</div></div>"
        show = self.host.genesis_widget_area if self.is_genesis() else self.host.dynamic_sidebar
        show(
            args["id"],
            {
                "before": resolve_value(before, self.host),
                "after": resolve_value(after, self.host),
            },
        )
