import threading
from collections import Counter
from datetime import timedelta

import pytest

from wordcrawl.domain.page import PageParseResult
from wordcrawl.exceptions import ParseFailure


class GraphPageParser:
    """Test parser over a {url: (word_counts, links)} graph.

    Records how often each URL was parsed. URLs in `failing` raise
    ParseFailure; `clock`/`step` advance a FakeClock on every parse.
    """

    def __init__(self, graph, failing=(), clock=None, step=timedelta(0), delay=None):
        self.graph = graph
        self.failing = set(failing)
        self.clock = clock
        self.step = step
        self.delay = delay
        self._lock = threading.Lock()
        self.calls = Counter()

    def parse(self, url):
        with self._lock:
            self.calls[url] += 1
        if self.delay is not None:
            self.delay(url)
        if self.clock is not None and self.step:
            self.clock.advance(self.step)
        if url in self.failing:
            raise ParseFailure(url, "boom")
        words, links = self.graph.get(url, ({}, []))
        return PageParseResult(word_counts=dict(words), links=list(links))


@pytest.fixture
def diamond_graph():
    # A -> B, C ; B, C -> D
    return {
        "A": ({"apple": 1, "shared": 1}, ["B", "C"]),
        "B": ({"banana": 2, "shared": 1}, ["D"]),
        "C": ({"cherry": 3, "shared": 1}, ["D"]),
        "D": ({"date": 4, "shared": 1}, []),
    }


@pytest.fixture
def graph_parser_factory():
    return GraphPageParser
