"""Script and stylesheet configuration schemas."""

from typing import Any

from pydantic import Field

from themecore.application.config.schemas.base import GuardValue, SliceModel


class LocalizeConfig(SliceModel):
    """Data object attached to a script.

    Attributes:
        l10var: Name of the global JS variable.
        l10ndata: Data exposed through the variable.
    """

    l10var: str = Field(..., min_length=1)
    l10ndata: dict[str, Any] = Field(default_factory=dict)


class ScriptConfig(SliceModel):
    """One script entry.

    Attributes:
        handle: Unique script handle.
        src: Script URL.
        deps: Handles of scripts this one depends on.
        version: Version string, or false for none.
        footer: Load the script in the footer.
        enqueue: Enqueue when true, only register otherwise.
        localize: Optional data object for the script.
        conditional: Guard deciding whether the script is processed.
    """

    handle: str = Field(..., min_length=1)
    src: str
    deps: list[str] | None = None
    version: str | bool | None = None
    footer: bool | None = None
    enqueue: bool = False
    localize: LocalizeConfig | None = None
    conditional: GuardValue | None = None


class StyleConfig(SliceModel):
    """One stylesheet entry.

    Attributes:
        media: Media the stylesheet applies to (default "all").
    """

    handle: str = Field(..., min_length=1)
    src: str
    deps: list[str] | None = None
    version: str | bool | None = None
    media: str | None = None
    enqueue: bool = False
    conditional: GuardValue | None = None


class AssetLoaderConfig(SliceModel):
    scripts: list[ScriptConfig] = Field(default_factory=list)
    styles: list[StyleConfig] = Field(default_factory=list)
