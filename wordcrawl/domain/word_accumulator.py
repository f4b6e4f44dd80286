import threading
from typing import Dict, Mapping


class WordAccumulator:
    """Thread-safe word -> cumulative count map.

    Merging is plain count addition, so the final totals do not depend on
    the order in which pages were merged.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}

    def merge(self, word_counts: Mapping[str, int]) -> None:
        """Add every count in `word_counts` to the running totals."""
        for word, count in word_counts.items():
            if count < 0:
                raise ValueError(f"negative count for {word!r}: {count}")
        with self._lock:
            for word, count in word_counts.items():
                self._counts[word] = self._counts.get(word, 0) + int(count)

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of the current totals."""
        with self._lock:
            return dict(self._counts)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
