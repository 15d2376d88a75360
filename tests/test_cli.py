"""Tests for the dotpager CLI."""

import json

import pytest
from typer.testing import CliRunner

from dotpager import __version__
from dotpager.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "indicator.json"
    monkeypatch.setattr("dotpager.config.indicator_config.get_config_path", lambda: path)
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "tiers" in result.stdout
        assert "demo" in result.stdout

    def test_cli_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestTiersCommand:
    """Test the tiers command."""

    def test_json_overflow(self):
        result = runner.invoke(app, ["tiers", "20", "--selected", "6", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 1
        entry = data[0]
        assert entry["overflow"] is True
        assert entry["window_start"] == 1
        assert entry["pinned"] is False
        assert entry["tiers"][:4] == ["gone", "smallest", "small", "normal"]
        assert entry["scales"][6] == 1.0

    def test_json_simple(self):
        result = runner.invoke(app, ["tiers", "3", "-s", "1", "-f", "json"])

        assert result.exit_code == 0
        entry = json.loads(result.stdout)[0]
        assert entry["overflow"] is False
        assert entry["tiers"] == ["normal", "selected", "normal"]
        assert "window_start" not in entry

    def test_every_position_by_default(self):
        result = runner.invoke(app, ["tiers", "12", "-f", "json"])

        assert result.exit_code == 0
        assert [entry["selected"] for entry in json.loads(result.stdout)] == list(range(12))

    def test_max_visible_option(self):
        result = runner.invoke(app, ["tiers", "8", "-s", "0", "-m", "5", "-f", "json"])

        entry = json.loads(result.stdout)[0]
        assert entry["tiers"] == ["selected", "normal", "normal", "small", "smallest", "gone", "gone", "gone"]

    def test_max_visible_from_config(self, config_path):
        config_path.write_text(json.dumps({"max_visible": 5}))

        result = runner.invoke(app, ["tiers", "8", "-s", "0", "-f", "json"])

        assert json.loads(result.stdout)[0]["overflow"] is True

    def test_invalid_max_visible(self):
        result = runner.invoke(app, ["tiers", "20", "-m", "3"])

        assert result.exit_code == 1
        assert "max_visible" in result.stdout

    def test_ignored_selection(self):
        result = runner.invoke(app, ["tiers", "5", "-s", "9"])

        assert result.exit_code == 1
        assert "ignored" in result.stdout

    def test_table_output(self):
        result = runner.invoke(app, ["tiers", "4", "-s", "2"])

        assert result.exit_code == 0
        assert "4 pages, max 9" in result.stdout
        assert "Mode: simple" in result.stdout

    def test_table_output_overflow(self):
        result = runner.invoke(app, ["tiers", "12", "-s", "0"])

        assert result.exit_code == 0
        assert "Mode: overflow" in result.stdout

    @pytest.mark.parametrize("pages", ["0", "-3"])
    def test_rejects_page_count_below_one(self, pages):
        result = runner.invoke(app, ["tiers", "--", pages])

        assert result.exit_code == 1
        assert "at least one page" in result.stdout

    def test_rejects_unknown_format(self):
        result = runner.invoke(app, ["tiers", "4", "-f", "xml"])

        assert result.exit_code == 1
        assert "Unknown format" in result.stdout


class TestConfigCommands:
    """Test config show/set."""

    def test_show_json(self):
        result = runner.invoke(app, ["config", "show", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["max_visible"] == 9

    def test_show_rejects_unknown_format(self):
        result = runner.invoke(app, ["config", "show", "-f", "yaml"])

        assert result.exit_code == 1
        assert "Unknown format" in result.stdout

    def test_set_persists(self, config_path):
        result = runner.invoke(app, ["config", "set", "max_visible", "11"])

        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["max_visible"] == 11

    def test_set_unknown_option(self):
        result = runner.invoke(app, ["config", "set", "shape", "round"])

        assert result.exit_code == 1
        assert "Unknown option" in result.stdout

    def test_set_invalid_value(self, config_path):
        result = runner.invoke(app, ["config", "set", "fill_color", "nope"])

        assert result.exit_code == 1
        assert not config_path.exists()
