"""Customizer, custom color and Kirki configuration schemas."""

from typing import Any, Literal

from pydantic import Field, RootModel, field_validator

from themecore.application.config.schemas.base import OpenEntryModel, SliceModel

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class CustomizerFieldConfig(OpenEntryModel):
    """A setting and its control; other keys are split between the two."""

    settings: str = Field(..., min_length=1)


class CustomizerObjectConfig(OpenEntryModel):
    """A section or panel; all keys are passed to the host."""

    id: str = Field(..., min_length=1)


class CustomizerConfig(SliceModel):
    fields: list[CustomizerFieldConfig] | dict[str, CustomizerFieldConfig] = Field(
        default_factory=list
    )
    sections: list[CustomizerObjectConfig] | dict[str, CustomizerObjectConfig] = Field(
        default_factory=list
    )
    panels: list[CustomizerObjectConfig] | dict[str, CustomizerObjectConfig] = Field(
        default_factory=list
    )


class ColorOutputConfig(SliceModel):
    """One CSS rule generated for a color.

    Attributes:
        elements: Selectors.
        properties: CSS property to value pattern with a single ``%s``.
    """

    elements: list[str] = Field(..., min_length=1)
    properties: dict[str, str] = Field(..., min_length=1)

    @field_validator("properties")
    @classmethod
    def single_placeholder(cls, value: dict[str, str]) -> dict[str, str]:
        for prop, pattern in value.items():
            if pattern.count("%s") != 1:
                raise ValueError(f"pattern for '{prop}' must contain exactly one %s")
        return value


class ColorConfig(SliceModel):
    """A customizable theme color.

    Attributes:
        id: Color id, used in the setting name ``child_theme_<id>_color``.
        default: Default hex color (``#rrggbb``).
        output: Rules emitted when the color differs from the default.
    """

    id: str = Field(..., pattern=r"^[a-z0-9_]+$")
    default: str = Field(..., pattern=HEX_COLOR)
    output: list[ColorOutputConfig]


class CustomColorsConfig(RootModel[dict[str, ColorConfig]]):
    """Mapping of color name to color configuration."""


class KirkiFieldConfig(OpenEntryModel):
    type: str = Field(..., min_length=1)
    settings: str = Field(..., min_length=1)


class KirkiConfig(SliceModel):
    """Kirki field builder setup.

    Attributes:
        handle: Kirki config id.
        config: Kirki config arguments.
        method: Dynamic CSS output method.
        loader: Loader settings overriding Kirki's own.
        remove: ``[kind, id]`` pairs of customizer objects to remove.
        styles: Extra CSS for the customizer controls.
        scripts: Extra JS for the customizer controls.
    """

    handle: str | None = None
    config: dict[str, Any] = Field(default_factory=dict)
    method: Literal["inline", "file"] = "inline"
    loader: dict[str, Any] = Field(default_factory=dict)
    remove: list[tuple[Literal["setting", "control", "section", "panel"], str]] = Field(
        default_factory=list
    )
    styles: str = ""
    scripts: str = ""
    panels: list[CustomizerObjectConfig] | dict[str, CustomizerObjectConfig] = Field(
        default_factory=list
    )
    sections: list[CustomizerObjectConfig] | dict[str, CustomizerObjectConfig] = Field(
        default_factory=list
    )
    fields: list[KirkiFieldConfig] | dict[str, KirkiFieldConfig] = Field(default_factory=list)
