"""Session state: the todo list and the day's history of completed phases."""

from __future__ import annotations

from dataclasses import dataclass

from . import schema
from .phase_timer import CompletedPhase, PhaseKind

DEFAULT_TODO = "Make TODO list"

_KIND_TO_PROTO = {
    PhaseKind.UNSPECIFIED: schema.DONE_TYPE_UNSPECIFIED,
    PhaseKind.WORK: schema.DONE_TYPE_WORK,
    PhaseKind.BREAK: schema.DONE_TYPE_BREAK,
}
_PROTO_TO_KIND = {value: kind for kind, value in _KIND_TO_PROTO.items()}


@dataclass
class Todo:
    """A single todo entry."""

    text: str
    done: bool = False


class State:
    """Owns the todo list and the completed phases of ``day``.

    Todo mutations take a position; positions outside the list are ignored.
    """

    def __init__(
        self,
        day: str = "",
        todos: list[Todo] | None = None,
        history: list[CompletedPhase] | None = None,
    ):
        self._day = day
        self._todos: list[Todo] = list(todos or [])
        self._history: list[CompletedPhase] = list(history or [])
        if not self._todos:
            self.add_todo(DEFAULT_TODO)

    @classmethod
    def empty(cls, day: str) -> State:
        return cls(day=day)

    @property
    def day(self) -> str:
        return self._day

    @property
    def todos(self) -> list[Todo]:
        return self._todos

    @property
    def history(self) -> list[CompletedPhase]:
        return self._history

    # Todo list

    def add_todo(self, text: str) -> None:
        self._todos.append(Todo(text=text))

    def add_todo_front(self, text: str) -> None:
        self._todos.insert(0, Todo(text=text))

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._todos)

    def toggle_todo(self, index: int) -> None:
        if not self._in_range(index):
            return
        self._todos[index].done = not self._todos[index].done

    def delete_todo(self, index: int) -> None:
        if not self._in_range(index):
            return
        del self._todos[index]

    # History

    def set_day(self, day: str) -> None:
        self._day = day

    def clear_history(self) -> None:
        self._history.clear()

    def add_done(self, done: CompletedPhase) -> None:
        self._history.append(done)

    def roll_over(self, day: str) -> bool:
        """Start a new day if ``day`` differs from the stored one.

        Returns True when the history was cleared.
        """
        if self._day == day:
            return False
        self.clear_history()
        self.set_day(day)
        return True

    # Persisted form

    def to_proto(self):
        """Build a ``StateProto`` message. Done todos are not persisted."""
        proto = schema.StateProto()
        proto.history.day = self._day
        for todo in self._todos:
            if not todo.done:
                proto.todo.append(todo.text)
        for done in self._history:
            proto.history.done.add(
                done_type=_KIND_TO_PROTO[done.kind],
                start_time=done.start_time,
                end_time=done.end_time,
                duration_seconds=done.duration_seconds,
                todo=done.todo,
            )
        return proto

    @classmethod
    def from_proto(cls, proto) -> State:
        todos = [Todo(text=text) for text in proto.todo]
        history = [
            CompletedPhase(
                kind=_PROTO_TO_KIND.get(done.done_type, PhaseKind.UNSPECIFIED),
                start_time=done.start_time,
                end_time=done.end_time,
                duration_seconds=done.duration_seconds,
                todo=done.todo,
            )
            for done in proto.history.done
        ]
        return cls(day=proto.history.day, todos=todos, history=history)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return (
            f"State(day={self._day!r}, todos={len(self._todos)}, "
            f"history={len(self._history)})"
        )
