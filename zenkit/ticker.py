"""Microsecond time keeping."""

from __future__ import annotations

import time

MICROS_PER_SECOND = 1_000_000


def to_seconds(microseconds) -> float:
    return microseconds / MICROS_PER_SECOND


def to_microseconds(seconds) -> int:
    return int(seconds * MICROS_PER_SECOND)


def now() -> int:
    """Wall-clock time since the epoch in microseconds."""
    return time.time_ns() // 1000


class Ticker:
    """Measures elapsed microseconds since a start mark."""

    def __init__(self):
        self._start = now()

    def duration(self) -> int:
        return now() - self._start

    def tick(self) -> int:
        """Return the time since the start mark and move the mark to now."""
        current = now()
        interval = current - self._start
        self._start = current
        return interval

    def delay(self, move) -> None:
        """Move the start mark back by the given microseconds."""
        self._start -= move