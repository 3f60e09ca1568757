"""Global constant definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .base import ThemeComponent
from .registry import component_registry

logger = logging.getLogger(__name__)


@component_registry.register("constants")
class Constants(ThemeComponent):
    """Define named constants on the host, unless already defined.

    Configuration keys:
        define: Mapping of constant name to value.
    """

    def setup(self) -> None:
        if "define" in self.config:
            self.define_constants(self.config["define"])

    def define_constants(self, constants: Mapping[str, Any]) -> None:
        for name, value in constants.items():
            if self.host.is_defined(name):
                logger.debug(f"Constant '{name}' already defined, keeping existing value")
                continue
            self.host.define(name, value)
