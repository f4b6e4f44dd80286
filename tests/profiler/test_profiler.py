import io
import threading
from datetime import datetime, timedelta, timezone

import pytest

from wordcrawl.profiler import Profiler, ProfilingProxy, profiled
from wordcrawl.services.parallel_crawler import ParallelCrawler
from wordcrawl.utils.clock import FakeClock


class Worker:
    def __init__(self, clock):
        self.clock = clock
        self.name = "worker"

    @profiled
    def slow(self, ms):
        self.clock.advance(timedelta(milliseconds=ms))
        return ms * 2

    @profiled
    def explode(self):
        self.clock.advance(timedelta(milliseconds=7))
        raise KeyError("missing")

    def fast(self):
        self.clock.advance(timedelta(milliseconds=50))
        return "fast"


class Plain:
    def method(self):
        return 1


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, tzinfo=timezone.utc))


def test_profiled_call_is_timed_and_forwarded(clock):
    profiler = Profiler(clock=clock)
    proxy = profiler.wrap(Worker(clock))

    assert proxy.slow(5) == 10
    assert proxy.slow(3) == 6
    assert profiler.state.get(Worker, "slow") == timedelta(milliseconds=8)


def test_unprofiled_calls_and_attributes_pass_through(clock):
    profiler = Profiler(clock=clock)
    proxy = profiler.wrap(Worker(clock))

    assert proxy.fast() == "fast"
    assert proxy.name == "worker"
    assert profiler.state.get(Worker, "fast") == timedelta(0)
    assert len(profiler.state) == 0


def test_failure_is_reraised_unchanged_and_still_timed(clock):
    profiler = Profiler(clock=clock)
    proxy = profiler.wrap(Worker(clock))

    with pytest.raises(KeyError) as excinfo:
        proxy.explode()
    assert excinfo.value.args == ("missing",)
    assert profiler.state.get(Worker, "explode") == timedelta(milliseconds=7)


def test_wrapping_type_without_profiled_methods_fails(clock):
    with pytest.raises(ValueError):
        Profiler(clock=clock).wrap(Plain())


def test_explicit_method_names_override_markers(clock):
    profiler = Profiler(clock=clock)
    proxy = profiler.wrap(Plain(), methods=["method"])
    assert proxy.method() == 1
    assert len(profiler.state) == 1


def test_explicit_method_must_exist(clock):
    with pytest.raises(ValueError):
        Profiler(clock=clock).wrap(Plain(), methods=["nope"])


def test_proxy_compares_equal_to_delegate(clock):
    worker = Worker(clock)
    proxy = Profiler(clock=clock).wrap(worker)
    assert isinstance(proxy, ProfilingProxy)
    assert proxy == worker
    assert hash(proxy) == hash(worker)


def test_concurrent_calls_accumulate(clock):
    profiler = Profiler(clock=clock)
    proxy = profiler.wrap(Worker(clock))
    threads = [threading.Thread(target=proxy.slow, args=(1,)) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    # each call sees at least its own advance
    assert profiler.state.get(Worker, "slow") >= timedelta(milliseconds=10)


def test_write_to_renders_run_header_and_lines(clock):
    profiler = Profiler(clock=clock)
    proxy = profiler.wrap(Worker(clock))
    proxy.slow(1005)

    out = io.StringIO()
    profiler.write_to(out)
    text = out.getvalue()
    assert text.startswith("Run at 2024-05-01T00:00:00+00:00\n")
    assert f"{Worker.__module__}.Worker#slow took 0m 1s 5ms" in text


def test_write_data_appends(tmp_path, clock):
    profiler = Profiler(clock=clock)
    profiler.wrap(Worker(clock)).slow(1)
    target = tmp_path / "profile.txt"
    profiler.write_data(target)
    profiler.write_data(target)
    assert target.read_text(encoding="utf-8").count("Run at") == 2


def test_crawler_can_be_wrapped_without_knowing_it(clock, diamond_graph, graph_parser_factory):
    profiler = Profiler(clock=clock)
    crawler = profiler.wrap(ParallelCrawler(parser=graph_parser_factory(diamond_graph), clock=clock))

    result = crawler.crawl(["A"], max_depth=2, timeout=timedelta(seconds=5), popular_word_count=3)

    assert result.urls_visited == 3
    assert crawler.get_max_parallelism() >= 1
    lines = profiler.state.lines()
    assert len(lines) == 1
    assert "ParallelCrawler#crawl took" in lines[0]
