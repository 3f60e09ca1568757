"""Protocols describing the host framework consumed by theme components.

Public API:
    - Callback: A Python callable or the name of a host-owned function
    - EventBus: Prioritized action/filter registration and dispatch
    - CustomizerManager: Customizer settings, controls, sections and panels
    - FieldBuilder: Third-party customizer field builder
    - Host: The complete host framework surface
"""

from themecore.contracts.host import (
    Callback,
    CustomizerManager,
    EventBus,
    FieldBuilder,
    Host,
)

__all__ = [
    "Callback",
    "CustomizerManager",
    "EventBus",
    "FieldBuilder",
    "Host",
]
