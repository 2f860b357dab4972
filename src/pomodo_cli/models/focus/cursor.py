"""Selection cursor over the todo list."""

from .state import State


class TodoCursor:
    """Keeps track of the selected todo and applies edits at that position."""

    def __init__(self, state: State):
        self._state = state
        self.current = 0

    def up(self) -> None:
        self.current = max(self.current - 1, 0)

    def down(self) -> None:
        self.current = min(self.current + 1, len(self._state.todos) - 1)
        self.current = max(self.current, 0)

    def clamp(self) -> None:
        """Pull the cursor back inside the list after it shrank."""
        self.current = max(min(self.current, len(self._state.todos) - 1), 0)

    def toggle(self) -> None:
        self._state.toggle_todo(self.current)

    def delete(self) -> None:
        self._state.delete_todo(self.current)
        self.clamp()

    def new(self, text: str) -> None:
        """Insert ``text`` at the top and select it."""
        self.current = 0
        self._state.add_todo_front(text)

    def current_text(self) -> str:
        todos = self._state.todos
        if 0 <= self.current < len(todos):
            return todos[self.current].text
        return ""
