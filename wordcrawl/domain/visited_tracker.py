import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been claimed during a crawl.

    This is the single source of truth for "already visited": a URL enters
    the tracker exactly once, even when several worker threads try to claim
    it at the same moment from different branches of the crawl.

    Unbounded: evicting an entry would let its URL be claimed again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def claim(self, url: str) -> bool:
        """Atomically insert `url` if absent.

        Returns True when this call claimed the URL, False when it was
        already present.
        """
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been claimed."""
        with self._lock:
            return url in self._visited

    def snapshot(self) -> frozenset:
        with self._lock:
            return frozenset(self._visited)

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
