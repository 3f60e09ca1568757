"""Configurable hook additions and removals."""

from __future__ import annotations

import logging

from ..value_objects import HookDescriptor, evaluate_guard
from .base import ThemeComponent
from .registry import component_registry

logger = logging.getLogger(__name__)


@component_registry.register("hooks")
class Hooks(ThemeComponent):
    """Add or remove filters once the request is set up.

    Configuration keys:
        add: Hook entries to add.
        remove: Hook entries to remove.

    Each entry carries ``tag`` and ``callback`` and may set ``priority``
    (default 10), ``args`` (default 1) and ``conditional`` (default
    always true, also when null). Entries are applied on the ``wp`` event
    so conditional tags are available to the guards.
    """

    def setup(self) -> None:
        if "add" in self.config or "remove" in self.config:
            self.add_action("wp", self.apply_hooks)

    def apply_hooks(self, *args: object) -> None:
        for entry in self.config.get("add", ()):
            hook = HookDescriptor.from_config(entry)
            if self._passes(hook):
                self.host.add_filter(hook.tag, hook.callback, hook.priority, hook.accepted_args)

        for entry in self.config.get("remove", ()):
            hook = HookDescriptor.from_config(entry)
            if self._passes(hook):
                self.host.remove_filter(hook.tag, hook.callback, hook.priority)

    def _passes(self, hook: HookDescriptor) -> bool:
        if evaluate_guard(hook.conditional, self.host):
            return True
        logger.debug(f"Skipping hook '{hook.tag}': condition not met")
        return False
