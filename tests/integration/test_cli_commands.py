"""Integration tests for the components and simulate CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from themecore.cli.commands.simulate import parse_condition
from themecore.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

pytestmark = pytest.mark.cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestComponentsCommand:
    """Tests for the components command."""

    def test_lists_registered_components(self, runner: CliRunner) -> None:
        """Every component id is listed with its summary."""
        result = runner.invoke(app, ["components"])

        assert result.exit_code == 0
        for component_id in ("asset_loader", "hero_section", "widget_area", "widgets"):
            assert component_id in result.output
        assert "Register and unregister widgets" in result.output


class TestParseCondition:
    """Tests for --condition parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("is_front_page", ("is_front_page", True)),
            ("is_home=false", ("is_home", False)),
            ("page_on_front=4", ("page_on_front", 4)),
            ("get_search_query=shoes", ("get_search_query", "shoes")),
        ],
    )
    def test_values(self, text: str, expected: tuple[str, object]) -> None:
        """Booleans and integers are converted, other values kept."""
        assert parse_condition(text) == expected


class TestSimulateCommand:
    """Tests for the simulate command."""

    def test_full_config(self, runner: CliRunner) -> None:
        """The lifecycle fires and host calls are printed."""
        result = runner.invoke(
            app,
            [
                "simulate",
                str(FIXTURES_PATH / "valid_full.json"),
                "--condition",
                "is_front_page=true",
                "--child-theme",
            ],
        )

        assert result.exit_code == 0
        assert "HOST CALLS" in result.output
        assert "load_child_theme_textdomain('business-pro'" in result.output
        assert "enqueue_style('business-pro-fonts'" in result.output
        assert "genesis_widget_area('front-page-1'" in result.output
        assert '<div class="front-page-1 widget-area">' in result.output

    def test_front_page_guard_off(self, runner: CliRunner) -> None:
        """Guards see the simulated conditions."""
        result = runner.invoke(
            app, ["simulate", str(FIXTURES_PATH / "valid_full.json"), "--effects-only"]
        )

        assert result.exit_code == 0
        assert "enqueue_style('business-pro-fonts'" not in result.output
        assert "add_action(" not in result.output

    def test_parent_theme_loader(self, runner: CliRunner) -> None:
        """Without --child-theme the theme loader is used."""
        result = runner.invoke(app, ["simulate", str(FIXTURES_PATH / "minimal.json")])

        assert result.exit_code == 0
        assert "load_theme_textdomain('child-theme'" in result.output

    def test_invalid_config(self, runner: CliRunner) -> None:
        """Configuration errors exit with code 1."""
        result = runner.invoke(app, ["simulate", str(FIXTURES_PATH / "missing_required.json")])

        assert result.exit_code == 1
        assert "hooks.add[0].tag" in result.output
