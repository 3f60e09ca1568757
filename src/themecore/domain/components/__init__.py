"""Component registry architecture for theme components.

This package provides the infrastructure for registering theme components
(assets, customizer settings, widget areas, hero section, ...) and the
components themselves. Each component translates one configuration slice
into registrations on an injected host framework.

Core infrastructure:
- Component: Protocol defining the component interface
- ThemeComponent: Base class holding the read-only configuration slice
- Subscription: A callback registered during initialization
- ComponentRegistry: Singleton registry for component types
- component_registry: The singleton registry instance
"""

from .base import ThemeComponent, iter_entries
from .protocol import Component
from .registry import ComponentRegistry, component_registry
from .results import Subscription, SubscriptionKind

# Import components to trigger registration
from .assets import AssetLoader, asset_path
from .breadcrumbs import Breadcrumbs
from .colors import CustomColors
from .constants import Constants
from .customizer import Customizer
from .demo_import import DemoImport
from .genesis_settings import GenesisSettings
from .hero import HeroSection, custom_header
from .hooks import Hooks
from .kirki import Kirki
from .layouts import PageLayouts
from .templates import PageTemplate
from .text_domain import TextDomain
from .theme_support import ThemeSupport
from .widget_areas import WidgetArea
from .widgets import Widgets

__all__ = [
    # Core component infrastructure
    "Component",
    "ComponentRegistry",
    "Subscription",
    "SubscriptionKind",
    "ThemeComponent",
    "component_registry",
    "iter_entries",
    # Components
    "AssetLoader",
    "Breadcrumbs",
    "Constants",
    "CustomColors",
    "Customizer",
    "DemoImport",
    "GenesisSettings",
    "HeroSection",
    "Hooks",
    "Kirki",
    "PageLayouts",
    "PageTemplate",
    "TextDomain",
    "ThemeSupport",
    "WidgetArea",
    "Widgets",
    # Helpers
    "asset_path",
    "custom_header",
]
