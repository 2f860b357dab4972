"""Main entry point for pomodo-cli."""

import typer

from pomodo_cli import __version__
from pomodo_cli.commands import config, focus, todo
from pomodo_cli.utils.typer_helpers import SuggestingGroup
from pomodo_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="pomodo",
    cls=SuggestingGroup,
    help="Pomodoro timer with a todo list, in your terminal",
    no_args_is_help=True,
)

console = get_console()

# Add subcommands
app.add_typer(todo.app, name="todo", help="Todo list management")
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("run")(focus.run_focus)
app.command("today")(focus.show_today)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]pomodo[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
