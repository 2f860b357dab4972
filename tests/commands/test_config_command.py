"""Tests for the config sub-commands (view, get, set, reset)."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from pomodo_cli.commands.config import _parse_value, app
from pomodo_cli.config import get_config_manager
from pomodo_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

runner = CliRunner()


class TestParseValue:
    def test_bool(self):
        assert _parse_value("True") is True
        assert _parse_value("false") is False

    def test_numbers(self):
        assert _parse_value("50") == 50
        assert _parse_value("0.5") == 0.5

    def test_string(self):
        assert _parse_value("~/state.bin") == "~/state.bin"


class TestView:
    def test_table(self):
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0
        assert "timer.work_minutes" in result.output

    def test_json(self):
        result = runner.invoke(app, ["view", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["timer"]["work_minutes"] == 25
        assert data["ui"]["bell"] is True


class TestGet:
    def test_known_key(self):
        result = runner.invoke(app, ["get", "timer.pomodoros_before_long_break"])
        assert result.exit_code == 0
        assert "4" in result.output

    def test_unknown_key(self):
        result = runner.invoke(app, ["get", "timer.nope"])
        assert result.exit_code == ERROR_NOT_FOUND


class TestSet:
    def test_persists_value(self):
        result = runner.invoke(app, ["set", "timer.work_minutes", "50"])
        assert result.exit_code == 0

        config_file = get_config_manager().config_file
        assert json.loads(config_file.read_text())["timer"]["work_minutes"] == 50

    def test_unknown_key(self):
        result = runner.invoke(app, ["set", "timer.nope", "1"])
        assert result.exit_code == ERROR_NOT_FOUND

    def test_invalid_value(self):
        result = runner.invoke(app, ["set", "timer.work_minutes", "0"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert get_config_manager().config.timer.work_minutes == 25

    def test_method_name_is_not_a_key(self):
        result = runner.invoke(app, ["set", "timer.durations", "5"])
        assert result.exit_code == ERROR_NOT_FOUND
        assert "not found" in result.output


class TestReset:
    def test_single_key(self):
        runner.invoke(app, ["set", "ui.bell", "false"])
        result = runner.invoke(app, ["reset", "ui.bell", "--yes"])
        assert result.exit_code == 0
        assert get_config_manager().config.ui.bell is True

    def test_everything(self):
        runner.invoke(app, ["set", "timer.work_minutes", "50"])
        result = runner.invoke(app, ["reset", "--yes"])
        assert result.exit_code == 0
        assert get_config_manager().config.timer.work_minutes == 25

    def test_unknown_key(self):
        result = runner.invoke(app, ["reset", "nope", "--yes"])
        assert result.exit_code == ERROR_NOT_FOUND

    def test_declined_confirmation_keeps_config(self):
        runner.invoke(app, ["set", "timer.work_minutes", "50"])
        result = runner.invoke(app, ["reset"], input="n\n")
        assert result.exit_code == 0
        assert get_config_manager().config.timer.work_minutes == 50
