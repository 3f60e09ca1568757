"""One-click demo import integration."""

from __future__ import annotations

import logging
from typing import Any

from ..callbacks import return_true
from .base import ThemeComponent, iter_entries
from .registry import component_registry

logger = logging.getLogger(__name__)

SHOW_ON_FRONT = "show_on_front"
PAGE_ON_FRONT = "page_on_front"
PAGE_FOR_POSTS = "page_for_posts"
WOOCOMMERCE_SHOP_PAGE_ID = "woocommerce_shop_page_id"


@component_registry.register("demo_import")
class DemoImport(ThemeComponent):
    """Provide demo content to the import plugin and wire up the result.

    Configuration keys:
        import_settings: Import file descriptor handed to the plugin
            (``import_file_name``, ``local_import_file``, ...).
        page_settings: Option name to page title; ``show_on_front`` is
            stored as given.
        menu_settings: Entries with ``menu_name`` and ``menu_location``.
    """

    def setup(self) -> None:
        if "import_settings" in self.config:
            self.add_filter("pt-ocdi/disable_pt_branding", return_true)
            self.add_filter("pt-ocdi/import_files", self.import_settings)

        if "page_settings" in self.config:
            self.add_action("pt-ocdi/after_all_import_execution", self.set_pages)
            self.add_action("pt-ocdi/after_all_import_execution", "flush_rewrite_rules")

        if "menu_settings" in self.config:
            self.add_action("pt-ocdi/after_all_import_execution", self.set_menus)

    def import_settings(self, *args: Any) -> list[dict[str, Any]]:
        return [dict(self.config["import_settings"])]

    def set_pages(self, *args: Any) -> None:
        for option, value in self.config["page_settings"].items():
            if option == SHOW_ON_FRONT:
                self.host.update_option(option, value)
                continue
            page = self.host.get_page_by_title(value)
            if page is None:
                logger.debug(f"No page titled '{value}', leaving '{option}' unchanged")
                continue
            self.host.update_option(option, page.id)

    def set_menus(self, *args: Any) -> None:
        locations = dict(self.host.get_theme_mod("nav_menu_locations", None) or {})
        changed = False
        for settings in iter_entries(self.config["menu_settings"]):
            menu_id = self.host.get_menu_by_name(settings["menu_name"])
            if menu_id is None:
                logger.debug(f"No menu named '{settings['menu_name']}'")
                continue
            locations[settings["menu_location"]] = menu_id
            changed = True
        if changed:
            self.host.set_theme_mod("nav_menu_locations", locations)
