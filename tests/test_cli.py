"""Tests for the daylog command line."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from daylog.cli import main
from daylog.config import Config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def notes(tmp_path):
    (tmp_path / "todo.md").write_text(
        "- [ ] Buy milk\n"
        "  - 2024-01-01: went to store\n"
        "- [x] Write report\n"
        "  - 2024-01-02: sent\n"
        "- [ ] Fix bike\n"
    )
    return tmp_path


@pytest.fixture(autouse=True)
def default_config():
    with patch("daylog.cli.load_config", return_value=Config()) as mock_load:
        yield mock_load


class TestToday:
    def test_text_report(self, runner, notes):
        result = runner.invoke(main, ["today", "--date", "2024-01-01", "--dir", str(notes)])
        assert result.exit_code == 0
        assert "Tasks for 2024-01-01" in result.output
        assert "## todo.md" in result.output
        assert "[ ] Buy milk" in result.output
        assert "went to store" in result.output
        assert "Write report" not in result.output

    def test_json(self, runner, notes):
        result = runner.invoke(main, ["today", "-d", "2024-01-02", "--dir", str(notes), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == [
            {
                "fileName": "todo.md",
                "path": str(notes / "todo.md"),
                "tasks": [{"isCompleted": True, "text": "Write report", "line": 2, "log": "sent"}],
            }
        ]

    def test_nothing_found(self, runner, notes):
        result = runner.invoke(main, ["today", "--date", "1999-01-01", "--dir", str(notes)])
        assert result.exit_code == 0
        assert "No tasks logged for 1999-01-01." in result.output

    def test_invalid_date(self, runner, notes):
        result = runner.invoke(main, ["today", "--date", "2024-02-30", "--dir", str(notes)])
        assert result.exit_code == 1
        assert "invalid date" in result.output

    def test_defaults_to_today(self, runner, notes):
        with patch("daylog.cli.local_date_string", return_value="2024-01-01"):
            result = runner.invoke(main, ["today", "--dir", str(notes)])
        assert result.exit_code == 0
        assert "Buy milk" in result.output

    def test_explicit_files(self, runner, notes, tmp_path_factory):
        empty_dir = tmp_path_factory.mktemp("empty")
        result = runner.invoke(
            main,
            ["today", "--date", "2024-01-01", "--dir", str(empty_dir), str(notes / "todo.md")],
        )
        assert result.exit_code == 0
        assert "Buy milk" in result.output

    def test_uses_configured_notes_dir(self, runner, notes, default_config):
        default_config.return_value = Config(notes_dir=str(notes))
        result = runner.invoke(main, ["today", "--date", "2024-01-01"])
        assert result.exit_code == 0
        assert "Buy milk" in result.output


class TestHistory:
    def test_text_report(self, runner, notes):
        result = runner.invoke(main, ["history", "--dir", str(notes)])
        assert result.exit_code == 0
        assert result.output.index("### 2024-01-01") < result.output.index("### 2024-01-02")
        assert "Fix bike" not in result.output

    def test_include_unlogged(self, runner, notes):
        result = runner.invoke(main, ["history", "--dir", str(notes), "--include-unlogged"])
        assert result.exit_code == 0
        assert "### (no log entries)" in result.output
        assert "[ ] Fix bike  (todo.md:5)" in result.output

    def test_json(self, runner, notes):
        result = runner.invoke(main, ["history", "--dir", str(notes), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert list(data) == ["2024-01-01", "2024-01-02"]
        assert data["2024-01-02"][0]["text"] == "Write report"
        assert data["2024-01-02"][0]["file"] == str(notes / "todo.md")


class TestParse:
    def test_all_dates(self, runner, notes):
        result = runner.invoke(main, ["parse", str(notes / "todo.md")])
        assert result.exit_code == 0
        assert [r["date"] for r in json.loads(result.output)] == ["2024-01-01", "2024-01-02"]

    def test_single_date(self, runner, notes):
        result = runner.invoke(main, ["parse", "--date", "2024-01-01", str(notes / "todo.md")])
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"isCompleted": False, "text": "Buy milk", "line": 0, "log": "went to store"}
        ]

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["parse", str(tmp_path / "missing.md")])
        assert result.exit_code != 0


def test_debug_flag(runner, notes):
    with patch("daylog.cli.logging.basicConfig") as mock_basic:
        result = runner.invoke(main, ["--debug", "today", "--date", "2024-01-01", "--dir", str(notes)])
    assert result.exit_code == 0
    mock_basic.assert_called_once()
