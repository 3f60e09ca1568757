"""Schemas for components acting at theme setup time.

Covers constants, text domain, theme support, Genesis settings and hooks.
"""

from typing import Any

from pydantic import Field

from themecore.application.config.schemas.base import (
    CallbackValue,
    GuardValue,
    SliceModel,
)


class ConstantsConfig(SliceModel):
    define: dict[str, Any] = Field(default_factory=dict)


class TextDomainConfig(SliceModel):
    """Translation loading.

    Attributes:
        domain: Text domain to load.
        path: Catalog directory; defaults to ``<stylesheet dir>/languages``.
    """

    domain: str = Field(default="", min_length=1)
    path: str | None = None


class ThemeSupportConfig(SliceModel):
    add: dict[str, Any] = Field(default_factory=dict)
    remove: list[str] = Field(default_factory=list)


class GenesisSettingsConfig(SliceModel):
    """Genesis theme settings.

    Attributes:
        defaults: Values overlaid on the settings defaults.
        force: Values forced for every read of the named options.
    """

    defaults: dict[str, Any] = Field(default_factory=dict)
    force: dict[str, Any] = Field(default_factory=dict)


class HookConfig(SliceModel):
    """One hook to add or remove.

    Attributes:
        tag: Event name.
        callback: Host function name or Python callable.
        priority: Dispatch priority.
        args: Number of accepted arguments.
        conditional: Guard deciding whether the hook is applied.
    """

    tag: str = Field(..., min_length=1)
    callback: CallbackValue
    priority: int = 10
    args: int = Field(default=1, ge=0)
    conditional: GuardValue | None = None


class HooksConfig(SliceModel):
    add: list[HookConfig] = Field(default_factory=list)
    remove: list[HookConfig] = Field(default_factory=list)
