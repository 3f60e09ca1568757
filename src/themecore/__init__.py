"""Configuration-driven theme setup for WordPress/Genesis style hosts.

A theme configuration maps component ids to configuration slices. The
``Theme`` orchestrator builds the matching components and lets each one
register its callbacks on an injected host framework.
"""

__version__ = "0.1.0"
