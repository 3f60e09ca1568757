"""In-memory host framework.

A complete, dependency-free implementation of the host contracts used by
tests and by the ``simulate`` command. State lives in plain dictionaries
and every state-changing call is appended to a shared call log, so the
effect of a theme configuration can be inspected after firing events.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable

from themecore.contracts.host import Callback
from themecore.domain.services.text import slugify
from themecore.domain.value_objects import Post

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostCall:
    """One recorded call against the host.

    Attributes:
        name: Host method (or host function) that was called.
        args: Positional arguments of the call.
    """

    name: str
    args: tuple[Any, ...] = ()


@dataclass
class _Handler:
    callback: Callback
    priority: int
    accepted_args: int
    order: int


class InMemoryCustomizer:
    """Customizer manager storing objects by id."""

    def __init__(self, log: list[HostCall] | None = None) -> None:
        self.settings: dict[str, dict[str, Any]] = {}
        self.controls: dict[str, dict[str, Any]] = {}
        self.sections: dict[str, dict[str, Any]] = {}
        self.panels: dict[str, dict[str, Any]] = {}
        self._log = log if log is not None else []

    def add_setting(self, setting_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("customizer.add_setting", (setting_id, args)))
        self.settings[setting_id] = dict(args)

    def add_control(self, control_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("customizer.add_control", (control_id, args)))
        self.controls[control_id] = dict(args)

    def add_section(self, section_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("customizer.add_section", (section_id, args)))
        self.sections[section_id] = dict(args)

    def add_panel(self, panel_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("customizer.add_panel", (panel_id, args)))
        self.panels[panel_id] = dict(args)

    def remove_setting(self, setting_id: str) -> None:
        self._log.append(HostCall("customizer.remove_setting", (setting_id,)))
        self.settings.pop(setting_id, None)

    def remove_control(self, control_id: str) -> None:
        self._log.append(HostCall("customizer.remove_control", (control_id,)))
        self.controls.pop(control_id, None)

    def remove_section(self, section_id: str) -> None:
        self._log.append(HostCall("customizer.remove_section", (section_id,)))
        self.sections.pop(section_id, None)

    def remove_panel(self, panel_id: str) -> None:
        self._log.append(HostCall("customizer.remove_panel", (panel_id,)))
        self.panels.pop(panel_id, None)


class InMemoryFieldBuilder:
    """Kirki-style field builder storing configs, panels, sections and fields."""

    def __init__(self, log: list[HostCall] | None = None) -> None:
        self.configs: dict[str, dict[str, Any]] = {}
        self.panels: dict[str, dict[str, Any]] = {}
        self.sections: dict[str, dict[str, Any]] = {}
        self.fields: dict[str, list[dict[str, Any]]] = {}
        self._log = log if log is not None else []

    def add_config(self, config_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("kirki.add_config", (config_id, args)))
        self.configs[config_id] = dict(args)

    def add_panel(self, panel_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("kirki.add_panel", (panel_id, args)))
        self.panels[panel_id] = dict(args)

    def add_section(self, section_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("kirki.add_section", (section_id, args)))
        self.sections[section_id] = dict(args)

    def add_field(self, config_id: str, args: dict[str, Any]) -> None:
        self._log.append(HostCall("kirki.add_field", (config_id, args)))
        self.fields.setdefault(config_id, []).append(dict(args))


@dataclass
class ThemeDirectory:
    """The active theme as seen by the host.

    Attributes:
        path: Stylesheet directory on disk.
        uri: Public URL of the stylesheet directory.
        template: Parent theme (template) slug.
        is_child: Whether the active theme is a child theme.
        files: Paths that exist, for ``file_exists``.
    """

    path: str = "/var/www/wp-content/themes/child-theme"
    uri: str = "https://example.test/wp-content/themes/child-theme"
    template: str = "genesis"
    is_child: bool = True
    files: set[str] = field(default_factory=set)


class InMemoryHost:
    """Reference implementation of the ``Host`` protocol.

    Event dispatch follows the host framework's rules: callbacks run by
    ascending priority and then in insertion order, a callback added twice
    with the same priority is kept once, and each callback receives at most
    ``accepted_args`` arguments. Callbacks added to the event being
    dispatched still run when their priority has not been reached yet.

    String callbacks and ``call()`` resolve through ``functions``; unknown
    host functions are recorded and pass their first argument through.

    Conditional tags are answered from ``conditions``. A condition may be a
    plain value or a callable receiving the query arguments; unset
    conditions are False.

    Attributes:
        calls: Log of state-changing calls, in order.
        conditions: Answers for ``query``.
        functions: Host functions available by name.
        customizer: Manager passed to ``customize_register``.
    """

    def __init__(
        self,
        theme: ThemeDirectory | None = None,
        conditions: Mapping[str, Any] | None = None,
        capabilities: set[str] | None = None,
    ) -> None:
        self.calls: list[HostCall] = []
        self.theme = theme or ThemeDirectory()
        self.conditions: dict[str, Any] = dict(conditions or {})
        self.capabilities: set[str] = set(capabilities or ())
        self.functions: dict[str, Callable[..., Any]] = {"do_shortcode": lambda text: text}

        self.customizer = InMemoryCustomizer(self.calls)
        self._field_builder = InMemoryFieldBuilder(self.calls)

        self.constants: dict[str, Any] = {}
        self.options: dict[str, Any] = {}
        self.theme_mods: dict[str, Any] = {}
        self.post_meta: dict[tuple[int, str], Any] = {}
        self.posts: dict[int, Post] = {}
        self.menus: dict[str, int] = {}
        self.current_post_id: int | None = None

        self.theme_supports: dict[str, Any] = {}
        self.text_domains: dict[str, str] = {}
        self.scripts: dict[str, dict[str, Any]] = {}
        self.styles: dict[str, dict[str, Any]] = {}
        self.localized: dict[str, dict[str, dict[str, Any]]] = {}
        self.inline_styles: dict[str, list[str]] = {}
        self.layouts: dict[str, dict[str, Any]] = {}
        self.sidebars: dict[str, dict[str, Any]] = {}
        self.widgets: list[Hashable] = []
        self.meta_boxes: dict[str, dict[str, Any]] = {}

        self.request: dict[str, Any] = {}
        self.output_buffer: list[str] = []

        self._hooks: dict[str, list[_Handler]] = {}
        self._order = 0
        self._current: list[str] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(HostCall(name, args))

    def calls_to(self, name: str) -> list[HostCall]:
        """Recorded calls of one host method."""
        return [call for call in self.calls if call.name == name]

    @property
    def rendered(self) -> str:
        return "".join(self.output_buffer)

    # -------------------------------------------------------------------------
    # Event bus
    # -------------------------------------------------------------------------

    def add_filter(
        self, tag: str, callback: Callback, priority: int = 10, accepted_args: int = 1
    ) -> None:
        self._record("add_filter", tag, callback, priority, accepted_args)
        self._subscribe(tag, callback, priority, accepted_args)

    def add_action(
        self, tag: str, callback: Callback, priority: int = 10, accepted_args: int = 1
    ) -> None:
        self._record("add_action", tag, callback, priority, accepted_args)
        self._subscribe(tag, callback, priority, accepted_args)

    def _subscribe(self, tag: str, callback: Callback, priority: int, accepted_args: int) -> None:
        handlers = self._hooks.setdefault(tag, [])
        for handler in handlers:
            if handler.priority == priority and handler.callback == callback:
                handler.accepted_args = accepted_args
                return
        self._order += 1
        handlers.append(_Handler(callback, priority, accepted_args, self._order))

    def remove_filter(self, tag: str, callback: Callback, priority: int = 10) -> bool:
        self._record("remove_filter", tag, callback, priority)
        return self._unsubscribe(tag, callback, priority)

    def remove_action(self, tag: str, callback: Callback, priority: int = 10) -> bool:
        self._record("remove_action", tag, callback, priority)
        return self._unsubscribe(tag, callback, priority)

    def _unsubscribe(self, tag: str, callback: Callback, priority: int) -> bool:
        handlers = self._hooks.get(tag, [])
        for handler in handlers:
            if handler.priority == priority and handler.callback == callback:
                handlers.remove(handler)
                return True
        return False

    def has_filter(self, tag: str, callback: Callback | None = None) -> bool:
        handlers = self._hooks.get(tag, [])
        if callback is None:
            return bool(handlers)
        return any(handler.callback == callback for handler in handlers)

    def callbacks(self, tag: str) -> list[Callback]:
        """Callbacks subscribed to ``tag`` in dispatch order."""
        handlers = sorted(self._hooks.get(tag, []), key=lambda h: (h.priority, h.order))
        return [handler.callback for handler in handlers]

    def do_action(self, tag: str, *args: Any) -> None:
        self._dispatch(tag, args, is_filter=False)

    def apply_filters(self, tag: str, value: Any, *args: Any) -> Any:
        return self._dispatch(tag, (value, *args), is_filter=True)

    def doing(self, tag: str) -> bool:
        """Whether ``tag`` is currently being dispatched."""
        return tag in self._current

    def _dispatch(self, tag: str, args: tuple[Any, ...], is_filter: bool) -> Any:
        value = args[0] if args else None
        position: tuple[int, int] | None = None
        self._current.append(tag)
        try:
            while True:
                handler = self._next_handler(tag, position)
                if handler is None:
                    break
                position = (handler.priority, handler.order)
                call_args = (value, *args[1:]) if is_filter else args
                result = self._invoke(handler.callback, call_args[: handler.accepted_args])
                if is_filter:
                    value = result
        finally:
            self._current.pop()
        return value

    def _next_handler(self, tag: str, position: tuple[int, int] | None) -> _Handler | None:
        pending = [
            handler
            for handler in self._hooks.get(tag, [])
            if position is None or (handler.priority, handler.order) > position
        ]
        if not pending:
            return None
        return min(pending, key=lambda h: (h.priority, h.order))

    def _invoke(self, callback: Callback, args: tuple[Any, ...]) -> Any:
        if isinstance(callback, str):
            return self.call(callback, *args)
        return callback(*args)

    # -------------------------------------------------------------------------
    # Queries, functions and constants
    # -------------------------------------------------------------------------

    @property
    def field_builder(self) -> InMemoryFieldBuilder:
        return self._field_builder

    def query(self, name: str, *args: Any) -> Any:
        answer = self.conditions.get(name, False)
        if callable(answer):
            return answer(*args)
        return answer

    def call(self, function: str, *args: Any) -> Any:
        self._record("call", function, *args)
        if function in self.functions:
            return self.functions[function](*args)
        logger.debug(f"No host function '{function}', passing arguments through")
        return args[0] if args else None

    def is_defined(self, name: str) -> bool:
        return name in self.constants

    def define(self, name: str, value: Any) -> None:
        self._record("define", name, value)
        self.constants[name] = value

    def constant(self, name: str, default: Any = None) -> Any:
        return self.constants.get(name, default)

    # -------------------------------------------------------------------------
    # Options, theme mods and post meta
    # -------------------------------------------------------------------------

    def get_option(self, name: str, default: Any = None) -> Any:
        forced = self.apply_filters(f"pre_option_{name}", False)
        if forced is not False:
            return forced
        return self.options.get(name, default)

    def genesis_option(self, key: str) -> Any:
        """Read a Genesis theme setting the way ``genesis_get_option`` does."""
        forced = self.apply_filters(f"genesis_pre_get_option_{key}", None)
        if forced is not None:
            return forced
        defaults = self.apply_filters("genesis_theme_settings_defaults", {})
        settings = {**defaults, **(self.options.get("genesis-settings") or {})}
        return settings.get(key)

    def update_option(self, name: str, value: Any) -> None:
        self._record("update_option", name, value)
        self.options[name] = value

    def get_theme_mod(self, name: str, default: Any = None) -> Any:
        return self.theme_mods.get(name, default)

    def set_theme_mod(self, name: str, value: Any) -> None:
        self._record("set_theme_mod", name, value)
        self.theme_mods[name] = value

    def get_post_meta(self, post_id: int | None, key: str) -> Any:
        if post_id is None:
            post_id = self.current_post_id
        if post_id is None:
            return ""
        return self.post_meta.get((post_id, key), "")

    def update_post_meta(self, post_id: int, key: str, value: Any) -> None:
        self._record("update_post_meta", post_id, key, value)
        self.post_meta[(post_id, key)] = value

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def add_post(self, post: Post, current: bool = False) -> Post:
        self.posts[post.id] = post
        if current:
            self.current_post_id = post.id
        return post

    def add_menu(self, name: str) -> int:
        menu_id = len(self.menus) + 1
        self.menus[name] = menu_id
        return menu_id

    def current_post(self) -> Post | None:
        if self.current_post_id is None:
            return None
        return self.posts.get(self.current_post_id)

    def get_post(self, post_id: int) -> Post | None:
        return self.posts.get(post_id)

    def get_page_by_title(self, title: str, post_type: str = "page") -> Post | None:
        for post in self.posts.values():
            if post.title == title and post.post_type == post_type:
                return post
        return None

    def get_page_by_path(self, path: str) -> Post | None:
        for post in self.posts.values():
            if post.post_type == "page" and slugify(post.title) == path.strip("/"):
                return post
        return None

    def get_menu_by_name(self, name: str) -> int | None:
        return self.menus.get(name)

    # -------------------------------------------------------------------------
    # Active theme and features
    # -------------------------------------------------------------------------

    def stylesheet_directory(self) -> str:
        return self.theme.path

    def stylesheet_directory_uri(self) -> str:
        return self.theme.uri

    def is_child_theme(self) -> bool:
        return self.theme.is_child

    def template(self) -> str:
        return self.theme.template

    def file_exists(self, path: str) -> bool:
        return path in self.theme.files

    def add_theme_support(self, feature: str, args: Any = None) -> None:
        self._record("add_theme_support", feature, args)
        self.theme_supports[feature] = True if args is None else args

    def remove_theme_support(self, feature: str) -> None:
        self._record("remove_theme_support", feature)
        self.theme_supports.pop(feature, None)

    def current_theme_supports(self, feature: str) -> bool:
        return feature in self.theme_supports

    def get_theme_support(self, feature: str, key: str | None = None) -> Any:
        args = self.theme_supports.get(feature, False)
        if key is None:
            return args
        if isinstance(args, Mapping):
            return args.get(key, False)
        return False

    def load_theme_textdomain(self, domain: str, path: str) -> bool:
        self._record("load_theme_textdomain", domain, path)
        self.text_domains[domain] = path
        return True

    def load_child_theme_textdomain(self, domain: str, path: str) -> bool:
        self._record("load_child_theme_textdomain", domain, path)
        self.text_domains[domain] = path
        return True

    # -------------------------------------------------------------------------
    # Scripts and styles
    # -------------------------------------------------------------------------

    def register_script(
        self, handle: str, src: str, deps: list[str], version: str | bool, in_footer: bool
    ) -> None:
        self._record("register_script", handle, src, deps, version, in_footer)
        self.scripts.setdefault(handle, {"enqueued": False})
        self.scripts[handle].update(src=src, deps=list(deps), version=version, footer=in_footer)

    def enqueue_script(
        self, handle: str, src: str, deps: list[str], version: str | bool, in_footer: bool
    ) -> None:
        self._record("enqueue_script", handle, src, deps, version, in_footer)
        self.scripts[handle] = {
            "src": src,
            "deps": list(deps),
            "version": version,
            "footer": in_footer,
            "enqueued": True,
        }

    def localize_script(self, handle: str, name: str, data: dict[str, Any]) -> None:
        self._record("localize_script", handle, name, data)
        self.localized.setdefault(handle, {})[name] = dict(data)

    def register_style(
        self, handle: str, src: str, deps: list[str], version: str | bool, media: str
    ) -> None:
        self._record("register_style", handle, src, deps, version, media)
        self.styles.setdefault(handle, {"enqueued": False})
        self.styles[handle].update(src=src, deps=list(deps), version=version, media=media)

    def enqueue_style(
        self, handle: str, src: str, deps: list[str], version: str | bool, media: str
    ) -> None:
        self._record("enqueue_style", handle, src, deps, version, media)
        self.styles[handle] = {
            "src": src,
            "deps": list(deps),
            "version": version,
            "media": media,
            "enqueued": True,
        }

    def add_inline_style(self, handle: str, css: str) -> None:
        self._record("add_inline_style", handle, css)
        self.inline_styles.setdefault(handle, []).append(css)

    # -------------------------------------------------------------------------
    # Layouts, sidebars and widgets
    # -------------------------------------------------------------------------

    def register_layout(self, name: str, args: dict[str, Any]) -> None:
        self._record("register_layout", name, args)
        self.layouts[name] = dict(args)

    def unregister_layout(self, name: str) -> None:
        self._record("unregister_layout", name)
        self.layouts.pop(name, None)

    def register_sidebar(self, args: dict[str, Any]) -> str:
        self._record("register_sidebar", args)
        sidebar_id = args.get("id") or f"sidebar-{len(self.sidebars) + 1}"
        self.sidebars[sidebar_id] = dict(args)
        return sidebar_id

    def genesis_register_widget_area(self, args: dict[str, Any]) -> str:
        self._record("genesis_register_widget_area", args)
        sidebar_id = args.get("id") or slugify(str(args.get("name", "")))
        defaults = {
            "before_widget": '<section id="%1$s" class="widget %2$s"><div class="widget-wrap">',
            "after_widget": "</div></section>\n",
            "before_title": '<h3 class="widgettitle widget-title">',
            "after_title": "</h3>\n",
        }
        self.sidebars[sidebar_id] = {**defaults, **args, "id": sidebar_id}
        return sidebar_id

    def unregister_sidebar(self, sidebar_id: str) -> None:
        self._record("unregister_sidebar", sidebar_id)
        self.sidebars.pop(sidebar_id, None)

    def dynamic_sidebar(self, sidebar_id: str, args: dict[str, Any]) -> None:
        self._record("dynamic_sidebar", sidebar_id, args)
        self._render_sidebar(sidebar_id, args)

    def genesis_widget_area(self, sidebar_id: str, args: dict[str, Any]) -> None:
        self._record("genesis_widget_area", sidebar_id, args)
        self._render_sidebar(sidebar_id, args)

    def _render_sidebar(self, sidebar_id: str, args: Mapping[str, Any]) -> None:
        if sidebar_id not in self.sidebars:
            return
        before = args.get("before") or ""
        after = args.get("after") or ""
        self.output(f"{before}<!-- {sidebar_id} -->{after}")

    def register_widget(self, widget: Hashable) -> None:
        self._record("register_widget", widget)
        if widget not in self.widgets:
            self.widgets.append(widget)

    def unregister_widget(self, widget: Hashable) -> None:
        self._record("unregister_widget", widget)
        if widget in self.widgets:
            self.widgets.remove(widget)

    # -------------------------------------------------------------------------
    # Admin
    # -------------------------------------------------------------------------

    def add_meta_box(
        self,
        box_id: str,
        title: str,
        callback: Callback,
        screens: list[str],
        context: str,
        priority: str,
    ) -> None:
        self._record("add_meta_box", box_id, title, callback, screens, context, priority)
        self.meta_boxes[box_id] = {
            "title": title,
            "callback": callback,
            "screens": list(screens),
            "context": context,
            "priority": priority,
        }

    def create_nonce(self, action: str) -> str:
        return hashlib.sha1(f"nonce:{action}".encode()).hexdigest()[:10]

    def verify_nonce(self, nonce: str, action: str) -> bool:
        return nonce == self.create_nonce(action)

    def nonce_field(self, action: str, name: str) -> str:
        return (
            f'<input type="hidden" id="{name}" name="{name}" '
            f'value="{self.create_nonce(action)}" />'
        )

    def current_user_can(self, capability: str, object_id: int | None = None) -> bool:
        return capability in self.capabilities

    def request_data(self) -> Mapping[str, Any]:
        return self.request

    def output(self, text: str) -> None:
        self._record("output", text)
        self.output_buffer.append(text)
