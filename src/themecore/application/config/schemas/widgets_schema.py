"""Widget area and widget configuration schemas."""

from typing import Any

from pydantic import Field

from themecore.application.config.schemas.base import (
    DynamicString,
    GuardValue,
    OpenEntryModel,
    SliceModel,
)


class WidgetAreaEntryConfig(OpenEntryModel):
    """One widget area.

    Attributes:
        id: Sidebar id.
        location: Event rendering the area; not rendered when absent.
        priority: Priority of the rendering callback.
        before: Markup opening the area.
        after: Markup closing the area.
        conditional: Guard deciding whether the area renders.
    """

    id: str = Field(..., min_length=1)
    name: str | None = None
    description: str | None = None
    location: str | None = None
    priority: int = 10
    before: DynamicString | None = None
    after: DynamicString | None = None
    conditional: GuardValue | None = None


class WidgetAreaConfig(SliceModel):
    register_: list[WidgetAreaEntryConfig] = Field(default_factory=list, alias="register")
    unregister: list[str] = Field(default_factory=list)


class WidgetsConfig(SliceModel):
    """Widget classes or class names to register and unregister."""

    register_: list[Any] = Field(default_factory=list, alias="register")
    unregister: list[Any] = Field(default_factory=list)
