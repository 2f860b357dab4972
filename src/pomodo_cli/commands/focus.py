"""Interactive Pomodoro timer and today's summary."""

import typer
from rich.live import Live

from pomodo_cli.config import get_config_manager
from pomodo_cli.models.focus.keyboard import KeyboardHandler
from pomodo_cli.models.focus.phase_timer import PhaseKind
from pomodo_cli.models.focus.ui import PomodoroDisplay
from pomodo_cli.services.session_service import FocusSession, KeyAction
from pomodo_cli.ui.formatters import format_error, format_output
from pomodo_cli.utils.exit_codes import ERROR_GENERAL
from pomodo_cli.utils.logger import get_logger
from pomodo_cli.utils.ui.console import get_console

from .utils import get_log_service, get_state_store

console = get_console()


def build_session(profile: str = "default") -> FocusSession:
    """Create a FocusSession from the profile's configuration."""
    config_manager = get_config_manager(profile)
    config = config_manager.config
    return FocusSession(
        get_state_store(config_manager),
        get_log_service(config_manager),
        durations=config.timer.durations(),
        acceleration=config.timer.time_acceleration,
        on_ring=console.bell if config.ui.bell else None,
    )


def run_focus(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Run the full-screen timer with the todo list."""
    logger = get_logger()
    config = get_config_manager(profile).config
    session = build_session(profile)
    display = PomodoroDisplay(console)
    keyboard = KeyboardHandler()
    logger.info("Session started for %s", session.state.day)

    def frame():
        return display.render(session.pomodoro, session.state, session.cursor)

    try:
        with Live(frame(), console=console, screen=True, auto_refresh=False) as live:

            def read_new_todo() -> str:
                # Blocks the loop; the timer keeps measuring meanwhile.
                live.stop()
                try:
                    return keyboard.read_line("New todo: ")
                finally:
                    live.start()

            while True:
                key = keyboard.get_key(timeout=config.ui.poll_interval)
                if session.handle_key(key, read_new_todo) == KeyAction.QUIT:
                    break
                session.tick()
                live.update(frame(), refresh=True)
    except KeyboardInterrupt:
        logger.info("Interrupted, saving session")
    finally:
        keyboard.stop()
        errors = session.shutdown()

    if errors:
        for error in errors:
            format_error(f"Could not save: {error}")
        raise typer.Exit(ERROR_GENERAL)

    done = sum(1 for d in session.state.history if d.kind == PhaseKind.WORK)
    console.print(
        f"[green]✓[/green] Saved {session.state.day}: {done} pomodoro(s) today"
    )


def show_today(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show the phases completed today."""
    config_manager = get_config_manager(profile)
    state = get_state_store(config_manager).load()

    rows = [
        {
            "kind": done.kind.value,
            "start": done.start_time,
            "end": done.end_time,
            "minutes": done.duration_minutes,
            "todo": done.todo,
        }
        for done in state.history
    ]
    if not rows:
        console.print(f"[yellow]Nothing completed on {state.day} yet[/yellow]")
        return
    if output == "table":
        console.print(f"[bold]{state.day}[/bold]")
    format_output(rows, output)
