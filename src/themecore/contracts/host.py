"""Host framework protocols for dependency injection.

Components never reach for ambient globals. Everything they need from the
surrounding theming runtime (event dispatch, option storage, the customizer,
asset and widget registries) is described here and handed to them at
``init`` time. Infrastructure implementations depend on these protocols,
which keeps components testable against an in-memory host.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Hashable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from themecore.domain.value_objects import Post

# Callbacks are either Python callables or names of functions owned by the
# host itself (e.g. "genesis_do_post_title").
Callback = Callable[..., Any] | str


@runtime_checkable
class EventBus(Protocol):
    """Named, prioritized callback registration and dispatch.

    Lower priorities run first; callbacks sharing a priority run in the
    order they were added. Filters thread a value through their callbacks,
    actions discard return values.
    """

    def add_filter(
        self, tag: str, callback: Callback, priority: int = 10, accepted_args: int = 1
    ) -> None: ...

    def remove_filter(self, tag: str, callback: Callback, priority: int = 10) -> bool: ...

    def add_action(
        self, tag: str, callback: Callback, priority: int = 10, accepted_args: int = 1
    ) -> None: ...

    def remove_action(self, tag: str, callback: Callback, priority: int = 10) -> bool: ...

    def has_filter(self, tag: str, callback: Callback | None = None) -> bool: ...

    def do_action(self, tag: str, *args: Any) -> None: ...

    def apply_filters(self, tag: str, value: Any, *args: Any) -> Any: ...


@runtime_checkable
class CustomizerManager(Protocol):
    """Registry of customizer settings, controls, sections and panels.

    The host passes its manager as the first argument of the
    ``customize_register`` event.
    """

    def add_setting(self, setting_id: str, args: dict[str, Any]) -> None: ...

    def add_control(self, control_id: str, args: dict[str, Any]) -> None: ...

    def add_section(self, section_id: str, args: dict[str, Any]) -> None: ...

    def add_panel(self, panel_id: str, args: dict[str, Any]) -> None: ...

    def remove_setting(self, setting_id: str) -> None: ...

    def remove_control(self, control_id: str) -> None: ...

    def remove_section(self, section_id: str) -> None: ...

    def remove_panel(self, panel_id: str) -> None: ...


@runtime_checkable
class FieldBuilder(Protocol):
    """Third-party customizer field builder (Kirki)."""

    def add_config(self, config_id: str, args: dict[str, Any]) -> None: ...

    def add_panel(self, panel_id: str, args: dict[str, Any]) -> None: ...

    def add_section(self, section_id: str, args: dict[str, Any]) -> None: ...

    def add_field(self, config_id: str, args: dict[str, Any]) -> None: ...


class Host(EventBus, Protocol):
    """The full host framework surface consumed by theme components."""

    @property
    def field_builder(self) -> FieldBuilder: ...

    # Conditional tags and other request-scoped queries, e.g.
    # query("is_singular", "page") or query("is_front_page").
    def query(self, name: str, *args: Any) -> Any: ...

    # Named global constants
    def is_defined(self, name: str) -> bool: ...

    def define(self, name: str, value: Any) -> None: ...

    def constant(self, name: str, default: Any = None) -> Any: ...

    # Options, theme mods and post meta
    def get_option(self, name: str, default: Any = None) -> Any: ...

    def update_option(self, name: str, value: Any) -> None: ...

    def get_theme_mod(self, name: str, default: Any = None) -> Any: ...

    def set_theme_mod(self, name: str, value: Any) -> None: ...

    def get_post_meta(self, post_id: int | None, key: str) -> Any: ...

    def update_post_meta(self, post_id: int, key: str, value: Any) -> None: ...

    # Content lookups
    def current_post(self) -> Post | None: ...

    def get_post(self, post_id: int) -> Post | None: ...

    def get_page_by_title(self, title: str, post_type: str = "page") -> Post | None: ...

    def get_page_by_path(self, path: str) -> Post | None: ...

    def get_menu_by_name(self, name: str) -> int | None: ...

    # Active theme
    def stylesheet_directory(self) -> str: ...

    def stylesheet_directory_uri(self) -> str: ...

    def is_child_theme(self) -> bool: ...

    def template(self) -> str: ...

    def file_exists(self, path: str) -> bool: ...

    # Theme features
    def add_theme_support(self, feature: str, args: Any = None) -> None: ...

    def remove_theme_support(self, feature: str) -> None: ...

    def current_theme_supports(self, feature: str) -> bool: ...

    def get_theme_support(self, feature: str, key: str | None = None) -> Any: ...

    # Translations
    def load_theme_textdomain(self, domain: str, path: str) -> bool: ...

    def load_child_theme_textdomain(self, domain: str, path: str) -> bool: ...

    # Scripts and styles
    def enqueue_script(
        self, handle: str, src: str, deps: list[str], version: str | bool, in_footer: bool
    ) -> None: ...

    def register_script(
        self, handle: str, src: str, deps: list[str], version: str | bool, in_footer: bool
    ) -> None: ...

    def localize_script(self, handle: str, name: str, data: dict[str, Any]) -> None: ...

    def enqueue_style(
        self, handle: str, src: str, deps: list[str], version: str | bool, media: str
    ) -> None: ...

    def register_style(
        self, handle: str, src: str, deps: list[str], version: str | bool, media: str
    ) -> None: ...

    def add_inline_style(self, handle: str, css: str) -> None: ...

    # Page layouts
    def register_layout(self, name: str, args: dict[str, Any]) -> None: ...

    def unregister_layout(self, name: str) -> None: ...

    # Sidebars and widgets
    def register_sidebar(self, args: dict[str, Any]) -> str: ...

    def genesis_register_widget_area(self, args: dict[str, Any]) -> str: ...

    def unregister_sidebar(self, sidebar_id: str) -> None: ...

    def dynamic_sidebar(self, sidebar_id: str, args: dict[str, Any]) -> None: ...

    def genesis_widget_area(self, sidebar_id: str, args: dict[str, Any]) -> None: ...

    def register_widget(self, widget: Hashable) -> None: ...

    def unregister_widget(self, widget: Hashable) -> None: ...

    # Admin meta boxes
    def add_meta_box(
        self,
        box_id: str,
        title: str,
        callback: Callback,
        screens: list[str],
        context: str,
        priority: str,
    ) -> None: ...

    def verify_nonce(self, nonce: str, action: str) -> bool: ...

    def nonce_field(self, action: str, name: str) -> str: ...

    def current_user_can(self, capability: str, object_id: int | None = None) -> bool: ...

    # Submitted form fields of the current request
    def request_data(self) -> Mapping[str, Any]: ...

    # Invoke a host-owned function by name, e.g. call("genesis_do_post_title")
    def call(self, function: str, *args: Any) -> Any: ...

    # Rendered output
    def output(self, text: str) -> None: ...
