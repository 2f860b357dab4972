"""Todo list commands operating on the saved state."""

import typer

from pomodo_cli.config import get_config_manager
from pomodo_cli.ui.formatters import format_error, format_success
from pomodo_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
)
from pomodo_cli.utils.typer_helpers import SuggestingGroup
from pomodo_cli.utils.ui.console import get_console

from .utils import get_log_service, get_state_store

app = typer.Typer(cls=SuggestingGroup, help="Todo list management")
console = get_console()


def _save(store, state) -> None:
    try:
        store.save(state)
    except OSError as e:
        format_error(f"Failed to save state: {e}")
        raise typer.Exit(ERROR_GENERAL) from e


def _check_index(state, index: int) -> int:
    """Convert a 1-based CLI index, exiting if it is out of range."""
    position = index - 1
    if not 0 <= position < len(state.todos):
        format_error(f"No todo #{index} (list has {len(state.todos)})")
        raise typer.Exit(ERROR_NOT_FOUND)
    return position


@app.command("list")
def list_todos(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List open todos. The first one is the current item."""
    state = get_state_store(get_config_manager(profile)).load()
    for i, todo in enumerate(state.todos, start=1):
        marker = "[bold]>[/bold]" if i == 1 else " "
        console.print(f"{marker} {i:>2}. {todo.text}", highlight=False)


@app.command("add")
def add_todo(
    text: str = typer.Argument(..., help="Todo text"),
    front: bool = typer.Option(
        False, "--front", "-f", help="Insert at the top as the current item"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Add a todo to the end (or the front) of the list."""
    text = text.strip()
    if not text:
        format_error("Todo text cannot be empty")
        raise typer.Exit(ERROR_INVALID_ARGS)

    store = get_state_store(get_config_manager(profile))
    state = store.load()
    if front:
        state.add_todo_front(text)
    else:
        state.add_todo(text)
    _save(store, state)
    format_success(f"Added '{text}'")


@app.command("done")
def complete_todo(
    index: int = typer.Argument(..., help="Todo number as shown by 'todo list'"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Mark a todo as done and archive it."""
    config_manager = get_config_manager(profile)
    store = get_state_store(config_manager)
    state = store.load()
    position = _check_index(state, index)

    state.toggle_todo(position)
    todo = state.todos[position]
    try:
        get_log_service(config_manager).append_todos(state.day, [todo])
    except OSError as e:
        format_error(f"Failed to archive todo: {e}")
        raise typer.Exit(ERROR_GENERAL) from e
    # Done todos are not persisted, so saving removes it from the list.
    _save(store, state)
    format_success(f"Completed '{todo.text}'")


@app.command("delete")
def delete_todo(
    index: int = typer.Argument(..., help="Todo number as shown by 'todo list'"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Delete a todo without archiving it."""
    store = get_state_store(get_config_manager(profile))
    state = store.load()
    position = _check_index(state, index)

    text = state.todos[position].text
    state.delete_todo(position)
    _save(store, state)
    format_success(f"Deleted '{text}'")
