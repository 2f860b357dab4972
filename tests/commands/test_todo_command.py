"""Tests for the todo sub-commands, against a state file in a temp dir."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from pomodo_cli.commands.todo import app
from pomodo_cli.commands.utils import get_log_service, get_state_store
from pomodo_cli.config import get_config_manager
from pomodo_cli.models.focus.state import DEFAULT_TODO, State, Todo
from pomodo_cli.services.state_service import today
from pomodo_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def store():
    return get_state_store(get_config_manager())


@pytest.fixture()
def seeded(store):
    store.save(State(day=today(), todos=[Todo("A"), Todo("B"), Todo("C")]))
    return store


def _texts(store) -> list[str]:
    return [t.text for t in store.load().todos]


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


class TestList:
    def test_fresh_state_shows_default(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert DEFAULT_TODO in result.output

    def test_numbers_items(self, seeded):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "1. A" in result.output
        assert "3. C" in result.output


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestAdd:
    def test_appends(self, seeded):
        result = runner.invoke(app, ["add", "D"])
        assert result.exit_code == 0
        assert _texts(seeded) == ["A", "B", "C", "D"]

    def test_front(self, seeded):
        result = runner.invoke(app, ["add", "--front", "Z"])
        assert result.exit_code == 0
        assert _texts(seeded)[0] == "Z"

    def test_strips_text(self, seeded):
        runner.invoke(app, ["add", "  D  "])
        assert _texts(seeded)[-1] == "D"

    def test_empty_text_rejected(self, seeded):
        result = runner.invoke(app, ["add", "   "])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert _texts(seeded) == ["A", "B", "C"]


# ---------------------------------------------------------------------------
# done / delete
# ---------------------------------------------------------------------------


class TestDone:
    def test_removes_and_archives(self, seeded):
        result = runner.invoke(app, ["done", "2"])
        assert result.exit_code == 0
        assert "Completed 'B'" in result.output
        assert _texts(seeded) == ["A", "C"]

        log = get_log_service(get_config_manager()).todo_log_path.read_text()
        assert " x B" in log

    def test_out_of_range(self, seeded):
        result = runner.invoke(app, ["done", "4"])
        assert result.exit_code == ERROR_NOT_FOUND
        assert _texts(seeded) == ["A", "B", "C"]

    def test_zero_is_out_of_range(self, seeded):
        result = runner.invoke(app, ["done", "0"])
        assert result.exit_code == ERROR_NOT_FOUND


class TestDelete:
    def test_deletes_without_archiving(self, seeded):
        result = runner.invoke(app, ["delete", "1"])
        assert result.exit_code == 0
        assert _texts(seeded) == ["B", "C"]
        assert not get_log_service(get_config_manager()).todo_log_path.exists()

    def test_deleting_last_item_reseeds_default(self, store):
        store.save(State(day=today(), todos=[Todo("only")]))
        runner.invoke(app, ["delete", "1"])
        assert _texts(store) == [DEFAULT_TODO]

    def test_out_of_range(self, seeded):
        result = runner.invoke(app, ["delete", "9"])
        assert result.exit_code == ERROR_NOT_FOUND


class TestSaveFailure:
    def test_save_error_exits_with_general_error(self, seeded, mocker):
        mocker.patch(
            "pomodo_cli.services.state_service.StateStore.save",
            side_effect=PermissionError("read-only"),
        )
        result = runner.invoke(app, ["add", "D"])
        assert result.exit_code == 1
        assert "Failed to save state" in result.output
