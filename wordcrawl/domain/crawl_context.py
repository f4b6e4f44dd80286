from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_accumulator import WordAccumulator
from wordcrawl.utils.clock import Clock


class SeedBoundary:
    """Completion and failure tracking for everything spawned from one seed URL.

    Every task is registered with `enter()` before it is submitted and
    reports back with `leave()` when it has finished, so the seed is
    quiescent exactly when the pending count drops to zero. Only the
    first failure under the seed is kept.
    """

    def __init__(self, seed_url: str):
        self.seed_url = seed_url
        self._cond = threading.Condition()
        self._pending = 0
        self._error: Optional[BaseException] = None

    def enter(self) -> None:
        with self._cond:
            self._pending += 1

    def leave(self) -> None:
        with self._cond:
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    def fail(self, error: BaseException) -> bool:
        """Record `error`. Returns True if it was the first failure."""
        with self._cond:
            if self._error is not None:
                return False
            self._error = error
            return True

    @property
    def error(self) -> Optional[BaseException]:
        with self._cond:
            return self._error

    def wait(self) -> None:
        """Block until no task of this seed is pending."""
        with self._cond:
            while self._pending > 0:
                self._cond.wait()

    def is_quiescent(self) -> bool:
        with self._cond:
            return self._pending == 0


@dataclass(frozen=True)
class CrawlContext:
    """State shared by every task of one crawl invocation."""

    deadline: datetime
    clock: Clock
    ignored_urls: Tuple[re.Pattern[str], ...]
    visited: VisitedTracker
    words: WordAccumulator
    abort_event: threading.Event
    fail_fast: bool = False

    def is_aborted(self) -> bool:
        return self.abort_event.is_set()
