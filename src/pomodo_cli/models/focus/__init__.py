"""Focus mode - Pomodoro timer and todo list."""

from .clock import Timer
from .codec import StateDecodeError, decode_state, encode_state
from .cursor import TodoCursor
from .phase_timer import CompletedPhase, PhaseKind, PhaseTimer
from .pomodoro import Pomodoro, PomodoroDurations, WorkState
from .state import DEFAULT_TODO, State, Todo

__all__ = [
    "DEFAULT_TODO",
    "CompletedPhase",
    "PhaseKind",
    "PhaseTimer",
    "Pomodoro",
    "PomodoroDurations",
    "State",
    "StateDecodeError",
    "Timer",
    "Todo",
    "TodoCursor",
    "WorkState",
    "decode_state",
    "encode_state",
]
