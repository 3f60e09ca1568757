"""Pytest configuration and shared fixtures for themecore tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from themecore.domain.components import ComponentRegistry, component_registry
from themecore.domain.value_objects import Post
from themecore.infrastructure import InMemoryHost, ThemeDirectory

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "cli: tests invoking the typer application")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def host() -> InMemoryHost:
    """In-memory host for a Genesis child theme with no conditions set."""
    return InMemoryHost(theme=ThemeDirectory(template="genesis", is_child=True))


@pytest.fixture
def core_host() -> InMemoryHost:
    """In-memory host for a standalone theme that is not built on Genesis."""
    return InMemoryHost(theme=ThemeDirectory(template="twentytwentyfour", is_child=False))


@pytest.fixture
def page(host: InMemoryHost) -> Post:
    """A page with an excerpt and a featured image, set as the current post."""
    return host.add_post(
        Post(
            id=7,
            title="About",
            post_type="page",
            excerpt="Who we are",
            thumbnail_url="https://example.test/uploads/about.jpg",
        ),
        current=True,
    )


@pytest.fixture
def isolated_registry() -> Iterator[ComponentRegistry]:
    """Registry that can be modified freely; restored after the test."""
    saved = component_registry.snapshot()
    try:
        yield component_registry
    finally:
        component_registry.restore(saved)


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
