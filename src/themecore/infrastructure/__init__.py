"""Infrastructure layer: in-memory host and output formatting."""

from themecore.infrastructure.formatters import CallLogFormatter, describe
from themecore.infrastructure.memory_host import (
    HostCall,
    InMemoryCustomizer,
    InMemoryFieldBuilder,
    InMemoryHost,
    ThemeDirectory,
)

__all__ = [
    "CallLogFormatter",
    "HostCall",
    "InMemoryCustomizer",
    "InMemoryFieldBuilder",
    "InMemoryHost",
    "ThemeDirectory",
    "describe",
]
