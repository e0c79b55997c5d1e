"""A polled countdown timer that copes with clock rollover."""

from __future__ import annotations

import enum
import math
import time
from typing import Callable, Optional

# Durations above this many milliseconds are timed in milliseconds,
# shorter ones in microseconds.
MAX_MICROS = 4_000_000

_MASK = 0xFFFFFFFF


def _default_clock() -> int:
    return time.monotonic_ns() // 1000


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


class _State(enum.Enum):
    PRE_START = enum.auto()
    RUNNING = enum.auto()
    EXPIRED = enum.auto()


class TimeObj:
    """Set a time, start it, and poll :meth:`ding` until it expires.

    ``clock`` returns elapsed microseconds as an integer. Tick counts wrap at
    32 bits, as on the boards this timer was made for, and the arithmetic
    survives that wrap.
    """

    def __init__(
        self,
        ms: float = 10,
        start_now: bool = True,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._clock = clock or _default_clock
        self._start_time = 0
        self._end_time = 0
        self._wait_time = 0
        self._use_milli = False
        self._state = _State.PRE_START
        self.set_time(ms, start_now)

    def _now(self) -> int:
        micros = self._clock()
        if self._use_milli:
            return (micros // 1000) & _MASK
        return micros & _MASK

    def set_time(self, ms: float, start_now: bool = True) -> None:
        """Set the duration in milliseconds and optionally start right away."""
        if ms > MAX_MICROS:
            self._wait_time = _round(ms)
            self._use_milli = True
        elif ms > 0:
            self._wait_time = _round(1000 * ms)
            self._use_milli = False
        else:
            self._wait_time = 0
            self._use_milli = False
        self._state = _State.PRE_START
        if start_now:
            self.start()

    def start(self) -> None:
        """Start timing from now."""
        self._start_time = self._now()
        self._end_time = (self._start_time + self._wait_time) & _MASK
        self._state = _State.RUNNING

    def step_time(self) -> None:
        """Restart from the previous end time, so timing error does not build up."""
        if self._state is _State.EXPIRED:
            if self._wait_time > 0:
                self._start_time = self._end_time
                self._end_time = (self._start_time + self._wait_time) & _MASK
                self._state = _State.RUNNING
            else:
                self._state = _State.PRE_START
        else:
            self.start()

    def ding(self) -> bool:
        """True once the time has run out, and from then on until restarted."""
        if self._state is _State.PRE_START:
            return False
        if self._state is _State.RUNNING:
            if ((self._now() - self._start_time) & _MASK) > self._wait_time:
                self._state = _State.EXPIRED
                return True
            return False
        return True

    def duration(self) -> float:
        """The set duration in milliseconds."""
        if self._use_milli:
            return float(self._wait_time)
        return self._wait_time / 1000.0

    def fraction(self) -> float:
        """Fraction of the time still left: 1 before start, 0 once expired."""
        if self._state is _State.PRE_START:
            return 1.0
        if self._state is _State.RUNNING:
            if self._wait_time == 0:
                return 0.0
            remaining = (self._end_time - self._now()) & _MASK
            return remaining / self._wait_time
        return 0.0

    def reset(self) -> None:
        """Back to the not-started state, keeping the duration."""
        self._state = _State.PRE_START