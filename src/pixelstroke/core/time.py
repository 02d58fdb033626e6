"""Time abstraction for real-time and simulated frame pacing.

The slideshow loop measures frame time with ``monotonic()`` and waits out
the remaining frame budget with ``sleep()``. Swapping in
:class:`SimTimeSource` makes headless runs and tests deterministic and
instant.

Usage examples:

Real-time usage:
    ts = RealTimeSource()
    start = ts.monotonic()
    await ts.sleep(1 / 60)

Simulated time usage:
    ts = SimTimeSource(start=0.0)
    await ts.sleep(0.5)
    ts.monotonic()  # 0.5, returned immediately
"""

from __future__ import annotations

import asyncio
import time
from typing import Protocol

__all__ = [
    "TimeSource",
    "RealTimeSource",
    "SimTimeSource",
]


class TimeSource(Protocol):
    """Protocol for clocks that can measure and wait out frame time."""

    def monotonic(self) -> float:
        """Return monotonic time in seconds."""
        ...

    async def sleep(self, seconds: float) -> None:
        """Sleep for the specified number of seconds."""
        ...


class RealTimeSource:
    """Real-time implementation using time.monotonic and asyncio.sleep."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(max(0.0, seconds))


class SimTimeSource:
    """Deterministic simulated clock.

    ``sleep`` advances the simulated time by the requested amount and yields
    once to the event loop, so cooperative tasks still interleave. ``advance``
    moves time forward without sleeping.
    """

    def __init__(self, *, start: float = 0.0) -> None:
        self._now: float = float(start)

    def monotonic(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("Cannot advance time by negative amount")
        self._now += seconds

    async def sleep(self, seconds: float) -> None:
        if seconds > 0:
            self._now += seconds
        await asyncio.sleep(0)
