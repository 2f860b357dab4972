"""Pomodoro state machine alternating work and break phases."""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .phase_timer import CompletedPhase, PhaseKind, PhaseTimer
from .state import State

logger = logging.getLogger("pomodo_cli.pomodoro")


@dataclass
class PomodoroDurations:
    """Phase lengths in seconds."""

    work: float = 25 * 60
    short_break: float = 5 * 60
    long_break: float = 15 * 60
    pomodoros_before_long_break: int = 4


class WorkState(str, Enum):
    """Where the cycle currently stands."""

    WORKING = "working"
    WORK_DONE = "work_done"
    PAUSE = "pause"
    PAUSE_DONE = "pause_done"


RUNNING_STATES = frozenset({WorkState.WORKING, WorkState.PAUSE})

# State reached when the running phase ends, by ring or by stop().
_FINISHED = {
    WorkState.WORKING: WorkState.WORK_DONE,
    WorkState.PAUSE: WorkState.PAUSE_DONE,
}

# State reached when the current phase is discarded by reset().
_RESET_TO = {
    WorkState.WORKING: WorkState.PAUSE_DONE,
    WorkState.WORK_DONE: WorkState.PAUSE_DONE,
    WorkState.PAUSE: WorkState.WORK_DONE,
    WorkState.PAUSE_DONE: WorkState.PAUSE_DONE,
}


def _no_todo() -> str:
    return ""


class Pomodoro:
    """Drives WORKING -> WORK_DONE -> PAUSE -> PAUSE_DONE -> WORKING ...

    Every operation is defined in every state; transitions that make no
    sense in the current state are ignored. Completed phases are appended to
    ``state.history`` when they are finalized.

    Args:
        state: Receives the completed phases.
        current_todo: Returns the text of the selected todo, used to label
            work phases.
        durations: Phase lengths.
        acceleration: Time acceleration factor of the phase timer.
        on_ring: Called once each time a phase reaches its target.
    """

    def __init__(
        self,
        state: State,
        current_todo: Callable[[], str] = _no_todo,
        durations: PomodoroDurations | None = None,
        acceleration: float = 1.0,
        on_ring: Callable[[], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ):
        self._state = state
        self._current_todo = current_todo
        self.durations = durations or PomodoroDurations()
        self._on_ring = on_ring
        self.timer = PhaseTimer(acceleration=acceleration, clock=clock, now=now)
        self.work_state = WorkState.PAUSE_DONE
        self.pomodoros_done = 0

    @property
    def pomodoros_before_long_break(self) -> int:
        return self.durations.pomodoros_before_long_break

    @property
    def running(self) -> bool:
        return self.work_state in RUNNING_STATES

    def start(self) -> None:
        """Start the next work or break phase. No-op while a phase is running."""
        if self.work_state == WorkState.WORK_DONE:
            self.finish_work()
            if self.pomodoros_done >= self.pomodoros_before_long_break:
                self.pomodoros_done = 0
                target = self.durations.long_break
            else:
                target = self.durations.short_break
            self._begin(WorkState.PAUSE, target)
        elif self.work_state == WorkState.PAUSE_DONE:
            self.finish_pause()
            self._begin(WorkState.WORKING, self.durations.work)

    def _begin(self, work_state: WorkState, target: float) -> None:
        self.work_state = work_state
        self.timer.start(target)
        logger.debug("Started %s phase (%.0fs)", work_state.value, target)

    def stop(self) -> None:
        """End the running phase now, as if its timer had run out."""
        if self.work_state in RUNNING_STATES:
            self.work_state = _FINISHED[self.work_state]
            logger.debug("Stopped early, now %s", self.work_state.value)

    def reset(self) -> None:
        """Throw away the current phase without recording it."""
        if self.work_state == WorkState.PAUSE_DONE:
            return
        self.timer.stop()
        self.work_state = _RESET_TO[self.work_state]
        logger.debug("Reset, now %s", self.work_state.value)

    def tick(self) -> bool:
        """Poll the phase timer. Returns True if the phase ended on this call."""
        if self.work_state not in RUNNING_STATES:
            return False
        if not self.timer.is_ringing():
            return False
        self.work_state = _FINISHED[self.work_state]
        logger.debug("Phase complete, now %s", self.work_state.value)
        if self._on_ring is not None:
            self._on_ring()
        return True

    def finish_work(self) -> CompletedPhase | None:
        """Record the finished work phase. Idempotent."""
        if self.work_state != WorkState.WORK_DONE or not self.timer.active:
            return None
        self.pomodoros_done += 1
        done = dataclasses.replace(
            self.timer.stop(), kind=PhaseKind.WORK, todo=self._current_todo()
        )
        self._state.add_done(done)
        return done

    def finish_pause(self) -> CompletedPhase | None:
        """Record the finished break. Idempotent."""
        if self.work_state != WorkState.PAUSE_DONE or not self.timer.active:
            return None
        done = dataclasses.replace(self.timer.stop(), kind=PhaseKind.BREAK)
        self._state.add_done(done)
        return done

    def finalize(self) -> CompletedPhase | None:
        """Flush whichever finished phase has not been recorded yet."""
        return self.finish_work() or self.finish_pause()
