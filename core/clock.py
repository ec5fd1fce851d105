"""core/clock.py — Wall-clock timestamps and the simulation clock.

Timestamps are integer *ticks* (100 ns units counted from
0001-01-01 00:00 local time), the same scale the save file stores.

The host calls ``SimulationClock.advance()`` once per frame and gets
back the real seconds since the previous call.  Frames can be seconds
(or, across restarts, days) apart; the growth engine copes with that.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Callable

from core.constants import TICKS_PER_SECOND

_EPOCH = datetime(1, 1, 1)


def system_ticks() -> int:
    """Current local wall-clock time in ticks."""
    return (datetime.now() - _EPOCH) // timedelta(microseconds=1) * 10


def ticks_to_seconds(ticks: int) -> float:
    return ticks / TICKS_PER_SECOND


def seconds_to_ticks(seconds: float) -> int:
    return int(round(seconds * TICKS_PER_SECOND))


class SimulationClock:
    """Turns successive wall-clock reads into elapsed-time deltas.

    ``now`` is injectable so tests can drive time by hand::

        t = [0]
        clock = SimulationClock(now=lambda: t[0])
        t[0] += seconds_to_ticks(1.5)
        clock.advance()   # -> 1.5
    """

    def __init__(self, now: Callable[[], int] = system_ticks) -> None:
        self.now = now
        self.last_tick: int = now()

    def reset(self, last_tick: int) -> None:
        """Pretend the previous frame happened at *last_tick*."""
        self.last_tick = int(last_tick)

    def advance(self, now: int | None = None) -> float:
        """Move to *now* and return the elapsed seconds.

        A clock that jumped backwards (system time changed) yields 0.0
        elapsed rather than negative growth; ``last_tick`` still moves
        to *now* so the next frame measures from the new reading.
        """
        if now is None:
            now = self.now()
        delta = now - self.last_tick
        self.last_tick = now
        if delta <= 0:
            return 0.0
        return ticks_to_seconds(delta)
