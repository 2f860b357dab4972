"""Full-screen rendering of the timer, today's blocks and the todo list."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .cursor import TodoCursor
from .phase_timer import CompletedPhase, PhaseKind
from .pomodoro import Pomodoro, WorkState
from .state import State

BAR_WIDTH = 40

# Bar style per state
_STATUS_STYLE = {
    WorkState.WORKING: "black on green",
    WorkState.WORK_DONE: "black on blue",
    WorkState.PAUSE: "black on blue",
    WorkState.PAUSE_DONE: "black on yellow",
}

KEY_HINTS = (
    "s start  •  x stop  •  r reset  •  n new  •  space toggle  •  "
    "D delete  •  j/k ↑/↓ move  •  q quit"
)


def format_clock(seconds: float) -> str:
    """Format seconds as M:SS, minutes padded to two columns."""
    total = max(0, round(seconds))
    return f"{total // 60:2d}:{total % 60:02d}"


def status_label(pomodoro: Pomodoro) -> str:
    state = pomodoro.work_state
    if state == WorkState.WORKING:
        return f"work {format_clock(pomodoro.timer.remaining_seconds())}"
    if state == WorkState.WORK_DONE:
        overtime = format_clock(pomodoro.timer.overtime_seconds()).strip()
        return f"work DONE (+{overtime})"
    if state == WorkState.PAUSE:
        return f"pause {format_clock(pomodoro.timer.remaining_seconds())}"
    return "pause OVER"


def bar_fraction(pomodoro: Pomodoro) -> float:
    """Share of the status bar to fill, in [0, 1]."""
    if not pomodoro.running:
        return 1.0
    target = pomodoro.timer.target_duration_seconds
    if target <= 0:
        return 1.0
    return min(max(pomodoro.timer.elapsed_fraction(), 0.0), 1.0)


def _minute_of_day(hhmm: str) -> int | None:
    try:
        hours, minutes = hhmm.split(":")
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return None


def today_blocks(history: list[CompletedPhase]) -> list[tuple[PhaseKind, int]]:
    """Work minutes per block, with the minutes between consecutive work blocks."""
    work = [done for done in history if done.kind == PhaseKind.WORK]
    blocks: list[tuple[PhaseKind, int]] = []
    for i, done in enumerate(work):
        blocks.append((PhaseKind.WORK, int(done.duration_seconds // 60)))
        if i + 1 < len(work):
            end = _minute_of_day(done.end_time)
            next_start = _minute_of_day(work[i + 1].start_time)
            if end is None or next_start is None:
                continue
            blocks.append((PhaseKind.BREAK, (next_start - end) % (24 * 60)))
    return blocks


class PomodoroDisplay:
    """Builds the renderable shown by the interactive loop."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def status_bar(self, pomodoro: Pomodoro) -> Text:
        label = status_label(pomodoro)
        filled = max(1, int(BAR_WIDTH * bar_fraction(pomodoro)))
        line = f" {label}".ljust(BAR_WIDTH - 2) + f"{pomodoro.pomodoros_done:>2}"
        text = Text(line)
        text.stylize(_STATUS_STYLE[pomodoro.work_state], 0, filled)
        return text

    def today_strip(self, history: list[CompletedPhase]) -> Text:
        text = Text()
        for kind, minutes in today_blocks(history):
            style = "black on green" if kind == PhaseKind.WORK else "white"
            text.append(f" {minutes} ", style=style)
        return text

    def todo_list(self, state: State, cursor: TodoCursor) -> Text:
        text = Text()
        for i, todo in enumerate(state.todos):
            style = ""
            if i == cursor.current:
                style += " bold"
            if todo.done:
                style += " dim"
            mark = "x" if todo.done else " "
            text.append(f"[{mark}] {todo.text}\n", style=style.strip() or None)
        return text

    def render(self, pomodoro: Pomodoro, state: State, cursor: TodoCursor) -> Group:
        return Group(
            self.status_bar(pomodoro),
            Text(""),
            self.today_strip(state.history),
            Text(""),
            Panel(self.todo_list(state, cursor), title=state.day, border_style="dim"),
            Text(KEY_HINTS, style="dim"),
        )
