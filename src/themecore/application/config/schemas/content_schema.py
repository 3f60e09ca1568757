"""Schemas for components shaping page content.

Covers breadcrumbs, the hero section, page layouts and page templates.
"""

from typing import Any

from pydantic import Field, field_validator

from themecore.application.config.schemas.base import SliceModel
from themecore.domain.components.hero import CONDITIONS


class BreadcrumbsConfig(SliceModel):
    """Genesis breadcrumb arguments.

    The hierarchical keys keep the spelling Genesis uses.
    """

    home: str | None = None
    sep: str | None = None
    list_sep: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    heirarchial_attachments: bool | None = None
    heirarchial_categories: bool | None = None
    labels: dict[str, str] = Field(default_factory=dict)


class HeroSectionConfig(SliceModel):
    """Page types the hero section is enabled for."""

    enable: dict[str, bool] = Field(default_factory=dict)

    @field_validator("enable")
    @classmethod
    def known_page_types(cls, value: dict[str, bool]) -> dict[str, bool]:
        unknown = sorted(set(value) - set(CONDITIONS))
        if unknown:
            raise ValueError(
                f"unknown page types {unknown}; expected one of {sorted(CONDITIONS)}"
            )
        return value


class PageLayoutsConfig(SliceModel):
    register_: dict[str, dict[str, Any]] = Field(default_factory=dict, alias="register")
    unregister: list[str] = Field(default_factory=list)


class PageTemplateConfig(SliceModel):
    """Page templates.

    Attributes:
        register: Template path to label.
        unregister: Template paths to remove.
    """

    register_: dict[str, str] = Field(default_factory=dict, alias="register")
    unregister: list[str] = Field(default_factory=list)
