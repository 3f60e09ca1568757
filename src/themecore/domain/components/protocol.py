"""Protocol definition for theme components."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from themecore.contracts.host import Host

from .results import Subscription


class Component(Protocol):
    """Protocol for theme components.

    A component is constructed with its configuration slice and then
    initialized exactly once against a host. Initialization registers
    callbacks on the host event bus; the real work happens later, when
    the host fires those events.

    Components are registered with the ComponentRegistry under the id
    that selects them in a theme configuration.

    Example:
        @component_registry.register("constants")
        class Constants(ThemeComponent):
            def setup(self) -> None:
                ...
    """

    config: Mapping[str, Any]

    def __init__(self, config: Mapping[str, Any]) -> None: ...

    def init(self, host: Host) -> tuple[Subscription, ...]:
        """Register this component's capabilities on the host.

        Args:
            host: Host framework the component talks to.

        Returns:
            The subscriptions added while initializing.
        """
        ...
