"""Monotonic stopwatch with a time-acceleration factor."""

import time
from collections.abc import Callable


class Timer:
    """Measures elapsed seconds since ``start()``.

    The measured wall-clock delta is multiplied by ``acceleration`` so a test
    run can simulate minutes of elapsed time in milliseconds. Production uses
    an acceleration of 1.
    """

    def __init__(
        self,
        acceleration: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.acceleration = acceleration
        self._clock = clock
        self._start: float | None = None

    @property
    def running(self) -> bool:
        """Whether the timer has been started and not reset."""
        return self._start is not None

    def start(self) -> None:
        self._start = self._clock()

    def elapsed_seconds(self) -> float:
        """Seconds since start, scaled by the acceleration factor (0 if unstarted)."""
        if self._start is None:
            return 0.0
        return (self._clock() - self._start) * self.acceleration

    def reset(self) -> None:
        self._start = None
