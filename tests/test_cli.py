"""Tests for the command-line interface.

**Feature: passion-hub-journal**
"""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import toml
from click.testing import CliRunner

from passionhub.api.base import CreateRejectedError, TransportError
from passionhub.cli import cli
from passionhub.config import ClientConfig

from conftest import FakeEntriesApi


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def service():
    """Patch the CLI to talk to a fake entries service with default config."""
    api = FakeEntriesApi({
        "music": [
            {"_id": "1", "category": "music", "title": "Riff",
             "content": "Line one\nLine two", "mood": "hyped"},
        ],
        "football": [
            {"_id": "2", "category": "football", "title": "Goal!", "content": "Great match"},
        ],
    })
    built_with = []

    def fake_build_api(config):
        built_with.append(config)
        return api

    with patch("passionhub.cli.common.load_config", return_value=ClientConfig()), \
            patch("passionhub.cli.common.build_api", side_effect=fake_build_api):
        api.built_with = built_with
        yield api


class TestCategoriesCommand:
    def test_lists_all_categories(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["categories"])

        assert result.exit_code == 0
        for label in ("Football", "Star Wars", "Coding", "Drawing", "Music", "Art", "Hacking"):
            assert label in result.output


class TestEntriesCommand:
    def test_shows_category_entries(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["entries", "--category", "music"])

        assert result.exit_code == 0
        assert service.list_calls == ["music"]
        assert "Riff" in result.output
        assert "Line one" in result.output
        assert "Line two" in result.output
        assert "Mood: hyped" in result.output
        assert "Goal!" not in result.output

    def test_default_category(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["entries"])

        assert result.exit_code == 0
        assert service.list_calls == ["football"]
        assert "Goal!" in result.output
        assert "Mood:" not in result.output

    def test_empty_state(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["entries", "-c", "hacking"])

        assert result.exit_code == 0
        assert "No entries yet" in result.output

    def test_fetch_failure_is_not_fatal(self, runner: CliRunner, service: FakeEntriesApi):
        service.list_error = TransportError("connection refused")

        result = runner.invoke(cli, ["entries", "-c", "music"])

        assert result.exit_code == 0
        assert "No entries yet" in result.output

    def test_backend_url_override(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["--backend-url", "https://hub.example.com", "entries"])

        assert result.exit_code == 0
        assert service.built_with[0].api_base == "https://hub.example.com"


class TestAddCommand:
    def test_creates_and_refreshes(self, runner: CliRunner, service: FakeEntriesApi):
        service.store_on_create = True

        result = runner.invoke(cli, [
            "add", "-c", "coding", "-t", "Refactor", "--content", "Cleaned up module",
        ])

        assert result.exit_code == 0
        assert len(service.create_calls) == 1
        assert service.create_calls[0].mood == ""
        assert service.list_calls == ["coding"]
        assert "Saved entry to coding" in result.output
        assert "Refactor" in result.output

    def test_blank_title_sends_nothing(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["add", "-c", "coding", "-t", "  ", "--content", "x"])

        assert result.exit_code == 1
        assert service.create_calls == []
        assert "Title and content are required" in result.output

    def test_rejected_create(self, runner: CliRunner, service: FakeEntriesApi):
        service.create_error = CreateRejectedError(500)

        result = runner.invoke(cli, ["add", "-t", "Derby", "--content", "Late winner"])

        assert result.exit_code == 1
        assert service.list_calls == []
        assert "Save Failed" in result.output


class TestBrowseCommand:
    def test_switch_category_and_quit(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["browse"], input="5\nq\n")

        assert result.exit_code == 0
        assert service.list_calls == ["football", "music"]
        assert "Riff" in result.output

    def test_compose_entry(self, runner: CliRunner, service: FakeEntriesApi):
        service.store_on_create = True

        result = runner.invoke(cli, ["browse", "-c", "art"], input="n\nSunset\nWatercolour\ncalm\nq\n")

        assert result.exit_code == 0
        assert len(service.create_calls) == 1
        sent = service.create_calls[0]
        assert (sent.category, sent.title, sent.content, sent.mood) == (
            "art", "Sunset", "Watercolour", "calm",
        )
        assert "Saved" in result.output

    def test_end_of_input_exits_cleanly(self, runner: CliRunner, service: FakeEntriesApi):
        result = runner.invoke(cli, ["browse"], input="")

        assert result.exit_code == 0


class TestInitCommand:
    def test_writes_template(self, runner: CliRunner):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "passionhub" / "config.toml"

            with patch("passionhub.cli.init.CONFIG_PATH", config_path):
                result = runner.invoke(cli, ["init"])
                again = runner.invoke(cli, ["init"])

            assert result.exit_code == 0
            assert config_path.exists()
            assert "backend" in toml.load(config_path)
            assert "already exists" in again.output
