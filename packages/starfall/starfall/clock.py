"""Millisecond clocks for driving the simulation loop."""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    """Wall-independent milliseconds since an arbitrary origin."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    def __init__(self, start: float = 0.0) -> None:
        if start < 0:
            raise ValueError("start must not be negative")
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("ms must not be negative")
        self._now += ms
        return self._now
