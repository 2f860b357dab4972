"""Append-only text logs: the day's work blocks and the todo archive."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pomodo_cli.models.focus.phase_timer import CompletedPhase, PhaseKind
from pomodo_cli.models.focus.state import Todo


def format_history_line(done: CompletedPhase) -> str:
    """``start end minutes todo`` for one work block."""
    return f"{done.start_time} {done.end_time} {done.duration_minutes} {done.todo}"


def format_todo_line(todo: Todo) -> str:
    """`` x text`` for done todos, ``   text`` for open ones."""
    return f" {'x' if todo.done else ' '} {todo.text}"


class LogService:
    """Appends human-readable records to the two text logs."""

    def __init__(self, todo_log_path: Path, history_log_path: Path):
        self.todo_log_path = Path(todo_log_path)
        self.history_log_path = Path(history_log_path)

    @staticmethod
    def _append(path: Path, day: str, lines: list[str]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"\n{day}\n")
            for line in lines:
                f.write(line + "\n")

    def append_history(self, day: str, history: Iterable[CompletedPhase]) -> int:
        """
        Append the work blocks of ``day`` under a day header.

        Returns:
            Number of lines written (0 if there was no work to log)
        """
        lines = [
            format_history_line(done) for done in history if done.kind == PhaseKind.WORK
        ]
        if not lines:
            return 0
        self._append(self.history_log_path, day, lines)
        return len(lines)

    def append_todos(self, day: str, todos: Iterable[Todo]) -> int:
        """Archive the todo list of ``day``, done and open items alike."""
        lines = [format_todo_line(todo) for todo in todos]
        self._append(self.todo_log_path, day, lines)
        return len(lines)
