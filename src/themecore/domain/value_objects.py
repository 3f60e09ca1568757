"""Value objects shared by theme components."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from themecore.contracts.host import Callback, Host

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Post:
    """A post, page or attachment as seen by theme components.

    Attributes:
        id: Host-assigned post id.
        title: Post title.
        post_type: Post type slug ("post", "page", "attachment", ...).
        excerpt: Manually written excerpt; empty when none was written.
        thumbnail_url: URL of the featured image, if any.
    """

    id: int
    title: str = ""
    post_type: str = "page"
    excerpt: str = ""
    thumbnail_url: str | None = None

    @property
    def has_excerpt(self) -> bool:
        return bool(self.excerpt)


# =============================================================================
# Tagged configuration values
# =============================================================================


@dataclass(frozen=True)
class StaticValue:
    """A literal configuration value."""

    value: Any

    def resolve(self, host: Host) -> Any:
        return self.value


@dataclass(frozen=True)
class DeferredValue:
    """Reference to a host query resolved at the point of use.

    Written in JSON configuration as ``{"query": "is_singular", "args": ["page"]}``.

    Attributes:
        query: Name of the host query (conditional tag).
        args: Positional arguments passed to the query.
    """

    query: str
    args: tuple[Any, ...] = ()

    def resolve(self, host: Host) -> Any:
        return host.query(self.query, *self.args)


@dataclass(frozen=True)
class CallableValue:
    """A Python callable supplied through programmatic configuration."""

    func: Callable[[], Any]

    def resolve(self, host: Host) -> Any:
        return self.func()


ConfigValue = Union[StaticValue, DeferredValue, CallableValue]


def is_deferred_reference(raw: Any) -> bool:
    """Check whether a raw mapping is a ``{"query": ..., "args": [...]}`` reference."""
    return (
        isinstance(raw, Mapping)
        and isinstance(raw.get("query"), str)
        and set(raw.keys()) <= {"query", "args"}
    )


def as_config_value(raw: Any) -> ConfigValue:
    """Convert a raw configuration value into its tagged form.

    Args:
        raw: Anything found in a configuration slice.

    Returns:
        The value unchanged if already tagged, a DeferredValue for query
        references, a CallableValue for callables, otherwise a StaticValue.
    """
    if isinstance(raw, (StaticValue, DeferredValue, CallableValue)):
        return raw
    if is_deferred_reference(raw):
        return DeferredValue(query=raw["query"], args=tuple(raw.get("args", ())))
    if callable(raw):
        return CallableValue(func=raw)
    return StaticValue(value=raw)


def resolve_value(raw: Any, host: Host) -> Any:
    """Resolve a raw configuration value against the host."""
    return as_config_value(raw).resolve(host)


def evaluate_guard(raw: Any, host: Host) -> bool:
    """Evaluate a guard predicate taken from configuration.

    A static guard must be a boolean; any other literal is not a predicate
    and the guarded action is skipped. Deferred and callable guards pass
    when their result is truthy.

    Args:
        raw: Guard value from configuration (already known to be present).
        host: Host used to resolve deferred queries.

    Returns:
        True if the guarded action should run.
    """
    value = as_config_value(raw)
    if isinstance(value, StaticValue):
        if isinstance(value.value, bool):
            return value.value
        logger.debug(f"Ignoring non-predicate guard value {value.value!r}")
        return False
    return bool(value.resolve(host))


# =============================================================================
# Registration descriptors
# =============================================================================


def _always() -> bool:
    return True


def _isset(entry: Mapping[str, Any], key: str, default: Any) -> Any:
    value = entry.get(key)
    return default if value is None else value


@dataclass(frozen=True)
class HookDescriptor:
    """One hook to add or remove.

    Attributes:
        tag: Event name.
        callback: Callable or host function name.
        priority: Dispatch priority (default 10).
        accepted_args: Number of arguments passed to the callback (default 1).
        conditional: Guard deciding whether the hook is applied
            (default always true).
    """

    tag: str
    callback: Callback
    priority: int = 10
    accepted_args: int = 1
    conditional: Any = _always

    @classmethod
    def from_config(cls, entry: Mapping[str, Any]) -> HookDescriptor:
        return cls(
            tag=entry["tag"],
            callback=entry["callback"],
            priority=entry.get("priority", 10),
            accepted_args=entry.get("args", 1),
            conditional=_isset(entry, "conditional", _always),
        )


@dataclass(frozen=True)
class Localization:
    """Data object attached to a script as a global JS variable."""

    variable: str
    data: Mapping[str, Any]


@dataclass(frozen=True)
class AssetDescriptor:
    """A script or stylesheet to enqueue or register.

    Attributes:
        handle: Unique handle per asset kind.
        src: Asset URL.
        deps: Handles this asset depends on.
        version: Version string, or False for none.
        footer: Scripts only, load in the footer.
        media: Styles only, media query the stylesheet applies to.
        enqueue: Enqueue immediately when True, register only otherwise.
        localize: Optional data object attached to a script.
        conditional: Guard deciding whether the asset is processed.
    """

    handle: str
    src: str
    deps: tuple[str, ...] = ()
    version: str | bool = False
    footer: bool = False
    media: str = "all"
    enqueue: bool = False
    localize: Localization | None = None
    conditional: Any = field(default=_always)

    @classmethod
    def from_config(cls, entry: Mapping[str, Any]) -> AssetDescriptor:
        localize = None
        if entry.get("localize") is not None:
            localize = Localization(
                variable=entry["localize"]["l10var"],
                data=entry["localize"].get("l10ndata") or {},
            )
        return cls(
            handle=entry["handle"],
            src=entry["src"],
            deps=tuple(_isset(entry, "deps", ())),
            version=_isset(entry, "version", False),
            footer=_isset(entry, "footer", False),
            media=_isset(entry, "media", "all"),
            enqueue=entry.get("enqueue") is True,
            localize=localize,
            conditional=_isset(entry, "conditional", _always),
        )
