"""Wiring of state, cursor and timer for one interactive run."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pomodo_cli.models.focus.cursor import TodoCursor
from pomodo_cli.models.focus.keyboard import KEY_DOWN, KEY_UP
from pomodo_cli.models.focus.pomodoro import Pomodoro, PomodoroDurations
from pomodo_cli.models.focus.state import State
from pomodo_cli.services.log_service import LogService
from pomodo_cli.services.state_service import StateStore
from pomodo_cli.utils.logger import get_logger


class KeyAction(str, Enum):
    """Result of handling one keypress."""

    NONE = "none"
    HANDLED = "handled"
    QUIT = "quit"


class FocusSession:
    """Owns the objects of one run and the exit sequence.

    The driver feeds keys to ``handle_key``, calls ``tick`` once per loop
    iteration and calls ``shutdown`` when leaving, however it leaves.
    """

    def __init__(
        self,
        store: StateStore,
        logs: LogService,
        durations: PomodoroDurations | None = None,
        acceleration: float = 1.0,
        on_ring: Callable[[], None] | None = None,
        day: str | None = None,
        **timer_kwargs,
    ):
        self.store = store
        self.logs = logs
        self.state: State = store.load(day)
        self.cursor = TodoCursor(self.state)
        self.pomodoro = Pomodoro(
            self.state,
            current_todo=self.cursor.current_text,
            durations=durations,
            acceleration=acceleration,
            on_ring=on_ring,
            **timer_kwargs,
        )
        self._history_start = len(self.state.history)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def handle_key(self, key: str | None, read_line: Callable[[], str]) -> KeyAction:
        """Apply one keypress. ``read_line`` blocks for the new-todo text."""
        if key is None:
            return KeyAction.NONE
        if key == "q":
            return KeyAction.QUIT

        actions: dict[str, Callable[[], None]] = {
            "s": self.pomodoro.start,
            "x": self.pomodoro.stop,
            "r": self.pomodoro.reset,
            "j": self.cursor.down,
            "k": self.cursor.up,
            KEY_DOWN: self.cursor.down,
            KEY_UP: self.cursor.up,
            "D": self.cursor.delete,
            " ": self.cursor.toggle,
        }
        if key == "n":
            text = read_line()
            if text:
                self.cursor.new(text)
            return KeyAction.HANDLED
        action = actions.get(key)
        if action is None:
            return KeyAction.NONE
        action()
        return KeyAction.HANDLED

    def tick(self) -> bool:
        return self.pomodoro.tick()

    def shutdown(self) -> list[OSError]:
        """Finalize the open phase, save state and append the text logs.

        Runs once; later calls do nothing and return no errors. An I/O error
        does not stop the remaining steps; errors are logged and returned so
        the caller can report them.
        """
        if self._closed:
            return []
        self._closed = True
        logger = get_logger()
        errors: list[OSError] = []

        self.pomodoro.finalize()
        new_phases = self.state.history[self._history_start :]

        try:
            self.store.save(self.state)
        except OSError as e:
            logger.error("Failed to save state to %s: %s", self.store.path, e)
            errors.append(e)

        try:
            self.logs.append_todos(self.state.day, self.state.todos)
        except OSError as e:
            logger.error("Failed to append todo log: %s", e)
            errors.append(e)

        try:
            self.logs.append_history(self.state.day, new_phases)
        except OSError as e:
            logger.error("Failed to append history log: %s", e)
            errors.append(e)

        return errors
