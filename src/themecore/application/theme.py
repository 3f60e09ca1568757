"""Theme orchestrator.

Walks a theme configuration once, constructing each known component with
its slice and initializing it against the host.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from themecore.application.config import ThemeConfiguration, load_config_from_dict
from themecore.contracts.host import Host
from themecore.domain.components import (
    Component,
    ComponentRegistry,
    Subscription,
    component_registry,
)

logger = logging.getLogger(__name__)


class Theme:
    """Sets up theme components from configuration.

    Component ids that name no registered component are ignored. Each known
    component is constructed once with its own configuration slice and
    initialized once, in document order.

    Attributes:
        host: Host framework handed to every component.
        registry: Registry mapping component ids to classes.
        components: Initialized components by id.

    Example:
        >>> theme = Theme(InMemoryHost())
        >>> theme.setup({"text_domain": {"domain": "child-theme"}})
    """

    def __init__(self, host: Host, registry: ComponentRegistry = component_registry) -> None:
        self.host = host
        self.registry = registry
        self.components: dict[str, Component] = {}

    def setup(
        self, config: ThemeConfiguration | Mapping[str, Any]
    ) -> dict[str, tuple[Subscription, ...]]:
        """Construct and initialize every configured component.

        Args:
            config: A loaded configuration, or a raw mapping which is
                validated first.

        Returns:
            Subscriptions made during initialization, by component id.

        Raises:
            ConfigError: If a raw mapping fails validation.
            RuntimeError: If a component id was already set up.
        """
        if not isinstance(config, ThemeConfiguration):
            config = load_config_from_dict(config, self.registry)

        subscriptions: dict[str, tuple[Subscription, ...]] = {}
        for component_id, component_config in config.components.items():
            if component_id not in self.registry:
                logger.warning(f"Ignoring unknown component '{component_id}'")
                continue
            if component_id in self.components:
                raise RuntimeError(f"Component '{component_id}' is already set up")

            component_cls = self.registry.get(component_id)
            component = component_cls(component_config)
            subscriptions[component_id] = component.init(self.host)
            self.components[component_id] = component
            logger.debug(
                f"Set up '{component_id}' with {len(subscriptions[component_id])} subscriptions"
            )

        return subscriptions


def setup_theme(
    host: Host, config: ThemeConfiguration | Mapping[str, Any]
) -> Theme:
    """Create a Theme for ``host`` and set it up from ``config``."""
    theme = Theme(host)
    theme.setup(config)
    return theme
