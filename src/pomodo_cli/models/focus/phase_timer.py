"""Timing of a single work or break phase."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .clock import Timer

TIME_OF_DAY_FORMAT = "%H:%M"


class PhaseKind(str, Enum):
    """Kind of a completed phase."""

    UNSPECIFIED = "unspecified"
    WORK = "work"
    BREAK = "break"


@dataclass(frozen=True)
class CompletedPhase:
    """A finished phase as recorded in the day's history."""

    kind: PhaseKind = PhaseKind.UNSPECIFIED
    start_time: str = ""  # HH:MM, local time
    end_time: str = ""  # HH:MM, local time
    duration_seconds: float = 0.0
    todo: str = ""  # only set for work phases

    @property
    def is_empty(self) -> bool:
        """True for the placeholder record of a timer that never ran."""
        return not self.start_time and not self.end_time

    @property
    def duration_minutes(self) -> int:
        return round(self.duration_seconds / 60)


class PhaseTimer:
    """Tracks elapsed time of one phase against its target duration."""

    def __init__(
        self,
        acceleration: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ):
        self._timer = Timer(acceleration=acceleration, clock=clock)
        self._now = now
        self.target_duration_seconds = 0.0
        self.has_rung = False
        self.start_time: datetime | None = None

    @property
    def active(self) -> bool:
        """Whether a phase is currently being timed."""
        return self.start_time is not None

    def start(self, target_duration_seconds: float) -> None:
        self.target_duration_seconds = float(target_duration_seconds)
        self.has_rung = False
        self.start_time = self._now()
        self._timer.start()

    def stop(self) -> CompletedPhase:
        """Deactivate the timer and return the measured phase.

        Returns an empty record if the timer was not running, so calling
        ``stop()`` twice is harmless.
        """
        if self.start_time is None:
            return CompletedPhase()

        done = CompletedPhase(
            start_time=self.start_time.strftime(TIME_OF_DAY_FORMAT),
            end_time=self._now().strftime(TIME_OF_DAY_FORMAT),
            duration_seconds=self._timer.elapsed_seconds(),
        )
        self.start_time = None
        self._timer.reset()
        return done

    def elapsed_seconds(self) -> float:
        return self._timer.elapsed_seconds()

    def elapsed_fraction(self) -> float:
        """Elapsed time over target. Callers must not use this with a zero target."""
        return self._timer.elapsed_seconds() / self.target_duration_seconds

    def remaining_seconds(self) -> float:
        return max(0.0, self.target_duration_seconds - self._timer.elapsed_seconds())

    def overtime_seconds(self) -> float:
        return max(0.0, self._timer.elapsed_seconds() - self.target_duration_seconds)

    def is_ringing(self) -> bool:
        """Return True exactly once, on the first call after the target is reached."""
        if self.has_rung:
            return False
        if self._timer.running and self.elapsed_seconds() >= self.target_duration_seconds:
            self.has_rung = True
            return True
        return False
