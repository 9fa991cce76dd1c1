"""
Clock abstractions.

The store stamps every saved row with the current time. Timestamps must not
go backwards between saves, so the default clock is monotonic rather than
a plain wall-clock read.

Dependencies: time, datetime (stdlib)
System role: Time source for row timestamps
"""

import time
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Time source returning timezone-aware datetimes."""

    def now(self) -> datetime: ...


class MonotonicClock:
    """
    Wall-clock anchored once, advanced by the monotonic timer.

    The wall-clock time is read at construction; later readings add the
    elapsed monotonic time to it. System clock adjustments after construction
    therefore never make `now()` regress.
    """

    def __init__(self) -> None:
        self._origin_wall = time.time()
        self._origin_monotonic = time.monotonic()

    def now(self) -> datetime:
        elapsed = time.monotonic() - self._origin_monotonic
        return datetime.fromtimestamp(self._origin_wall + elapsed, tz=timezone.utc)
