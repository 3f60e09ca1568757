"""Domain layer: value objects, pure services and theme components."""

from .value_objects import (
    AssetDescriptor,
    CallableValue,
    ConfigValue,
    DeferredValue,
    HookDescriptor,
    Localization,
    Post,
    StaticValue,
    as_config_value,
    evaluate_guard,
    resolve_value,
)

__all__ = [
    "AssetDescriptor",
    "CallableValue",
    "ConfigValue",
    "DeferredValue",
    "HookDescriptor",
    "Localization",
    "Post",
    "StaticValue",
    "as_config_value",
    "evaluate_guard",
    "resolve_value",
]
