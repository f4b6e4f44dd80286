import threading
from datetime import timedelta
from typing import Dict, List, Tuple

from wordcrawl.utils.clock import format_duration


class ProfilingState:
    """Thread-safe running totals of time spent per (class, method)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._data: Dict[Tuple[str, str], timedelta] = {}

    @staticmethod
    def method_key(klass: type, method_name: str) -> Tuple[str, str]:
        return (f"{klass.__module__}.{klass.__qualname__}", method_name)

    def record(self, klass: type, method_name: str, elapsed: timedelta) -> None:
        if elapsed < timedelta(0):
            raise ValueError("negative elapsed time")
        key = self.method_key(klass, method_name)
        with self._lock:
            self._data[key] = self._data.get(key, timedelta(0)) + elapsed

    def get(self, klass: type, method_name: str) -> timedelta:
        with self._lock:
            return self._data.get(self.method_key(klass, method_name), timedelta(0))

    def lines(self) -> List[str]:
        """Formatted entries, sorted by method key."""
        with self._lock:
            items = sorted(self._data.items())
        return [f"{cls}#{method} took {format_duration(elapsed)}" for (cls, method), elapsed in items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
