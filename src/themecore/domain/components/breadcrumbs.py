"""Breadcrumb argument overrides."""

from __future__ import annotations

from typing import Any

from ..services.merge import replace_recursive
from .base import ThemeComponent
from .registry import component_registry


@component_registry.register("breadcrumbs")
class Breadcrumbs(ThemeComponent):
    """Merge the configuration into the Genesis breadcrumb arguments.

    The whole slice (``home``, ``sep``, ``list_sep``, ``prefix``,
    ``suffix``, ``heirarchial_attachments``, ``heirarchial_categories``,
    ``labels``) is merged over the arguments Genesis passes to the
    ``genesis_breadcrumb_args`` filter. Nested ``labels`` merge key by key.
    """

    def setup(self) -> None:
        self.add_filter("genesis_breadcrumb_args", self.breadcrumb_args)

    def breadcrumb_args(self, args: dict[str, Any]) -> dict[str, Any]:
        return replace_recursive(args, dict(self.config))
