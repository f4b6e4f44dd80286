import threading
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol


class Clock(Protocol):
    """Time source used for deadlines and profiling."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock:
    """Manually advanced clock for deterministic deadline tests.

    Safe to read and advance from several threads at once.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._lock = threading.Lock()
        self._now = start if start is not None else datetime(2000, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def advance(self, delta: timedelta) -> None:
        if delta < timedelta(0):
            raise ValueError("cannot move a clock backwards")
        with self._lock:
            self._now = self._now + delta

    def set(self, value: datetime) -> None:
        with self._lock:
            self._now = value


def format_duration(duration: timedelta) -> str:
    """Render a duration as ``XmYsZms``-style text, e.g. ``1m 2s 30ms``."""
    total_ms = duration // timedelta(milliseconds=1)
    minutes, rest = divmod(total_ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes}m {seconds}s {millis}ms"
