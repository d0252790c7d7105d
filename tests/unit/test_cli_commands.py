"""
Tests for CLI command handling and argument parsing.
"""

import json
import pytest
from unittest.mock import patch, MagicMock

from suggestbox import __version__
from suggestbox.catalog import default_catalog
from suggestbox.cli_commands import (
    handle_cli_commands, main, print_catalog_info, print_search_summary, print_suggestions
)
from suggestbox.config import ENV_AUTO_REFRESH, ENV_CATALOG, ENV_GRACE_DELAY, SuggestBoxSettings
from test_helpers import create_minimal_catalog, create_test_catalog, FRANCE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (ENV_AUTO_REFRESH, ENV_CATALOG, ENV_GRACE_DELAY):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def log_args(tmp_path):
    return ['--log-file', str(tmp_path / 'debug.log')]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / 'catalog.json'
    path.write_text(json.dumps({
        "topics": ["Health", "Trade", "Transport"],
        "countries": [{"name": "France", "flag": "🇫🇷"}],
        "popular_searches": ["Trade deals"],
    }), encoding='utf-8')
    return str(path)


class TestPrintCatalogInfo:
    """Test catalog information printing."""

    def test_summary(self, capsys):
        print_catalog_info(create_test_catalog(), SuggestBoxSettings())

        out = capsys.readouterr().out
        assert f"SuggestBox v{__version__} - Catalog" in out
        assert "Source: built-in" in out
        assert "Topics: 9" in out
        assert "Countries: 4" in out
        assert "Popular searches: 3" in out
        assert "Auto refresh: off" in out
        assert "Blur grace delay: 150ms" in out
        assert "TOPICS:" not in out

    def test_detailed(self, capsys):
        print_catalog_info(create_minimal_catalog(), SuggestBoxSettings(auto_refresh=True), detailed=True)

        out = capsys.readouterr().out
        assert "Auto refresh: on" in out
        assert "TOPICS:" in out
        assert "  Trade" in out
        assert "🇫🇷 France" in out
        assert "  Trade deals" in out


class TestPrintSuggestions:
    """Test the non-interactive suggestion preview."""

    def test_query_with_matches(self, capsys):
        print_suggestions(create_minimal_catalog(), SuggestBoxSettings(), "tra")

        out = capsys.readouterr().out
        assert "Suggestions for 'tra':" in out
        assert "Categories: topic, search" in out
        assert "Topics: Trade" in out
        assert "Countries: (none)" in out
        assert 'Action: Search for "tra"' in out
        assert "Popular:" not in out

    def test_empty_query_shows_popular(self, capsys):
        print_suggestions(create_minimal_catalog(), SuggestBoxSettings(), "")

        out = capsys.readouterr().out
        assert "Categories: popularSearch" in out
        assert "Popular: Trade deals" in out
        assert "Action:" not in out


class TestPrintSearchSummary:
    """Test the summary printed after the TUI exits."""

    def test_full_summary(self, capsys):
        controller = MagicMock()
        controller.submitted_query = "energy"
        controller.selected_topics = ("Trade",)
        controller.selected_countries = (FRANCE,)

        print_search_summary(controller)

        out = capsys.readouterr().out
        assert "Search: energy" in out
        assert "Topics: Trade" in out
        assert "Countries: France" in out

    def test_nothing_selected(self, capsys):
        controller = MagicMock()
        controller.submitted_query = None
        controller.selected_topics = ()
        controller.selected_countries = ()

        print_search_summary(controller)

        assert capsys.readouterr().out == ""


class TestHandleCliCommands:
    """Test argument handling."""

    def test_info(self, capsys, log_args):
        assert handle_cli_commands(['--info'] + log_args) is None

        out = capsys.readouterr().out
        assert f"Topics: {len(default_catalog().topics)}" in out

    def test_suggest_with_catalog(self, capsys, log_args, catalog_file):
        assert handle_cli_commands(['--suggest', 'tra', '--catalog', catalog_file] + log_args) is None

        out = capsys.readouterr().out
        assert "Topics: Trade, Transport" in out

    def test_version(self, capsys, log_args):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_commands(['--version'] + log_args)

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_missing_catalog_exits(self, capsys, log_args, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_commands(['--catalog', str(tmp_path / 'missing.json')] + log_args)

        assert exc_info.value.code == 1
        assert "❌" in capsys.readouterr().err

    def test_negative_grace_delay_exits(self, capsys, log_args):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_commands(['--grace-delay=-1'] + log_args)

        assert exc_info.value.code == 2
        assert "--grace-delay" in capsys.readouterr().err

    def test_interactive_returns_settings(self, log_args, catalog_file):
        args, catalog, settings = handle_cli_commands(
            ['--catalog', catalog_file, '--auto-refresh', '--grace-delay', '0.3'] + log_args
        )

        assert catalog.topics == ("Health", "Trade", "Transport")
        assert settings.auto_refresh is True
        assert settings.blur_grace_delay == 0.3
        assert settings.catalog_path == catalog_file

    def test_environment_settings(self, monkeypatch, log_args, catalog_file):
        monkeypatch.setenv(ENV_AUTO_REFRESH, "1")
        monkeypatch.setenv(ENV_CATALOG, catalog_file)

        _args, catalog, settings = handle_cli_commands(log_args)

        assert settings.auto_refresh is True
        assert catalog.popular_searches == ("Trade deals",)


class TestMain:
    """Test the entry point."""

    def test_runs_ui_and_prints_summary(self, capsys, log_args):
        controller = MagicMock()
        controller.submitted_query = "health"
        controller.selected_topics = ()
        controller.selected_countries = ()

        with patch('suggestbox.suggest_tui.run_ui', return_value=controller) as mock_run_ui:
            main(log_args)

        mock_run_ui.assert_called_once()
        assert "Search: health" in capsys.readouterr().out

    def test_ui_failure_prints_nothing(self, capsys, log_args):
        with patch('suggestbox.suggest_tui.run_ui', return_value=None):
            main(log_args)

        assert capsys.readouterr().out == ""

    def test_info_skips_ui(self, log_args):
        with patch('suggestbox.suggest_tui.run_ui') as mock_run_ui:
            main(['--info'] + log_args)

        mock_run_ui.assert_not_called()
