"""Component registry for managing theme component types."""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from .protocol import Component

C = TypeVar("C", bound=Component)

_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


class ComponentRegistry:
    """Singleton registry for component types.

    The ComponentRegistry is the static table mapping configuration keys
    to component classes. Components register themselves at import time
    through the decorator; the Theme orchestrator looks them up by the
    keys of a theme configuration.

    Component IDs are lowercase snake_case words:
    - 'asset_loader' - Scripts and stylesheets
    - 'widget_area' - Sidebar registration and rendering

    Example:
        @component_registry.register("constants")
        class Constants(ThemeComponent):
            def setup(self):
                ...

        # Later, retrieve the component class
        constants_cls = component_registry.get("constants")
        constants = constants_cls(config)
    """

    _instance: ComponentRegistry | None = None
    _components: dict[str, type[Component]]

    def __new__(cls) -> ComponentRegistry:
        """Create or return the singleton instance.

        Returns:
            The singleton ComponentRegistry instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._components = {}
        return cls._instance

    def register(self, component_id: str) -> Callable[[type[C]], type[C]]:
        """Decorator to register a component class.

        Args:
            component_id: Unique identifier for the component type.

        Returns:
            A decorator function that registers the class and returns it unchanged.

        Raises:
            ValueError: If component_id is already registered or has invalid format.
        """

        def decorator(cls: type[C]) -> type[C]:
            if component_id in self._components:
                raise ValueError(f"Component '{component_id}' already registered")
            self._validate_id(component_id)
            self._components[component_id] = cls
            return cls

        return decorator

    def get(self, component_id: str) -> type[Component]:
        """Get a component class by ID.

        Raises:
            KeyError: If no component is registered with the given ID.
        """
        if component_id not in self._components:
            raise KeyError(f"Unknown component: {component_id}")
        return self._components[component_id]

    def list(self) -> list[str]:
        """List all registered component IDs.

        Returns:
            A sorted list of all registered component IDs.
        """
        return sorted(self._components.keys())

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def _validate_id(self, component_id: str) -> None:
        """Validate component ID format.

        Raises:
            ValueError: If the ID is not lowercase snake_case.
        """
        if not _ID_PATTERN.match(component_id):
            raise ValueError(
                f"Invalid component ID '{component_id}': "
                "must be lowercase words separated by underscores"
            )

    def clear(self) -> None:
        """Clear all registered components.

        This method is intended for testing only. It removes all registered
        components from the registry, allowing tests to start with a clean
        state.

        Warning:
            Do not use in production code. This will break any code that
            depends on registered components.
        """
        self._components = {}

    def snapshot(self) -> dict[str, type[Component]]:
        """Copy of the current registrations, for restoring after tests."""
        return dict(self._components)

    def restore(self, components: dict[str, type[Component]]) -> None:
        self._components = dict(components)


# Singleton instance for convenient access
component_registry = ComponentRegistry()
