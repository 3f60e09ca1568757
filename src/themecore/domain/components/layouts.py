"""Genesis page layout registration."""

from __future__ import annotations

from .base import ThemeComponent
from .registry import component_registry

FULL_WIDTH_CONTENT = "full-width-content"
CONTENT_SIDEBAR = "content-sidebar"
SIDEBAR_CONTENT = "sidebar-content"
CONTENT_SIDEBAR_SIDEBAR = "content-sidebar-sidebar"
SIDEBAR_CONTENT_SIDEBAR = "sidebar-content-sidebar"
SIDEBAR_SIDEBAR_CONTENT = "sidebar-sidebar-content"


@component_registry.register("page_layouts")
class PageLayouts(ThemeComponent):
    """Register and unregister layout choices at init time.

    Configuration keys:
        register: Mapping of layout name to layout arguments.
        unregister: Layout names to remove.
    """

    def setup(self) -> None:
        for name, args in self.config.get("register", {}).items():
            self.host.register_layout(name, dict(args))

        for name in self.config.get("unregister", ()):
            self.host.unregister_layout(name)
