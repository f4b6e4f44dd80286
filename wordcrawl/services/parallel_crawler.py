import logging
import os
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from datetime import timedelta
from typing import Callable, Iterable, List, Optional, Union

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext, SeedBoundary
from wordcrawl.domain.crawl_result import CrawlResult, SeedFailure
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_accumulator import WordAccumulator
from wordcrawl.exceptions import CrawlInterruptedError
from wordcrawl.profiler import profiled
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.crawl_task import CrawlTask
from wordcrawl.services.protocols import PageParser
from wordcrawl.services.word_ranker import rank_words
from wordcrawl.utils.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


def _as_timedelta(timeout: Union[timedelta, float, int]) -> timedelta:
    if isinstance(timeout, timedelta):
        return timeout
    return timedelta(seconds=float(timeout))


class ParallelCrawler:
    """Crawls seed URLs on a bounded thread pool and ranks the words it finds.

    Every `crawl` call gets its own visited set, word counts and pool; nothing
    is shared between calls.
    """

    def __init__(
        self,
        *,
        parser: PageParser,
        clock: Optional[Clock] = None,
        parallelism: Optional[int] = None,
        fail_fast: bool = False,
        policy: Optional[CrawlPolicy] = None,
        executor_factory: Optional[Callable[[int], Executor]] = None,
    ):
        self.parser = parser
        self.clock = clock or SystemClock()
        self.parallelism = parallelism
        self.fail_fast = bool(fail_fast)
        self.policy = policy or CrawlPolicy()
        self.executor_factory = executor_factory or (
            lambda workers: ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordcrawl")
        )

    def get_max_parallelism(self) -> int:
        return os.cpu_count() or 1

    def pool_size(self, parallelism: Optional[int] = None) -> int:
        hint = parallelism if parallelism is not None else self.parallelism
        limit = self.get_max_parallelism()
        if hint is None:
            return limit
        return max(1, min(int(hint), limit))

    def _spawn(self, executor: Executor, task: CrawlTask) -> None:
        task.boundary.enter()
        try:
            executor.submit(task.run)
        except RuntimeError:
            # executor already shut down after an interrupted wait
            logger.debug("Dropping %s; pool is shut down", task.url)
            task.boundary.leave()

    @profiled
    def crawl(
        self,
        starting_urls: Iterable[str],
        *,
        max_depth: int,
        timeout: Union[timedelta, float, int],
        popular_word_count: int,
        ignored_urls: Iterable = (),
        parallelism: Optional[int] = None,
        fail_fast: Optional[bool] = None,
    ) -> CrawlResult:
        """Crawl from every seed and return the top `popular_word_count` words.

        The deadline is fixed once, here, and shared by every branch. Tasks
        check it when they start; this method itself waits without a timeout
        until all of them have finished.

        With `fail_fast` a parse failure stops the whole crawl and is re-raised.
        Otherwise the failed page contributes nothing, the crawl carries on,
        and the first failure per seed is reported in `CrawlResult.failures`.
        """
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if popular_word_count < 0:
            raise ValueError("popular_word_count must be >= 0")

        deadline = self.clock.now() + _as_timedelta(timeout)
        context = CrawlContext(
            deadline=deadline,
            clock=self.clock,
            ignored_urls=CrawlerConfig.compile_patterns(ignored_urls),
            visited=VisitedTracker(),
            words=WordAccumulator(),
            abort_event=threading.Event(),
            fail_fast=self.fail_fast if fail_fast is None else bool(fail_fast),
        )

        workers = self.pool_size(parallelism)
        seeds = list(starting_urls)
        logger.info("Crawl starting: %d seed(s), depth=%s, deadline=%s, workers=%d", len(seeds), max_depth, deadline.isoformat(), workers)

        executor = self.executor_factory(workers)
        boundaries: List[SeedBoundary] = []
        completed = False

        def spawn(task: CrawlTask) -> None:
            self._spawn(executor, task)

        try:
            for url in seeds:
                boundary = SeedBoundary(url)
                boundaries.append(boundary)
                self._spawn(
                    executor,
                    CrawlTask(url, max_depth, context=context, boundary=boundary, parser=self.parser, policy=self.policy, spawn=spawn),
                )
            for boundary in boundaries:
                boundary.wait()
            completed = True
        except KeyboardInterrupt as e:
            logger.error("Crawl interrupted after %d URL(s)", len(context.visited))
            raise CrawlInterruptedError(len(context.visited)) from e
        finally:
            if not completed:
                context.abort_event.set()
            executor.shutdown(wait=completed, cancel_futures=not completed)

        failures = tuple(SeedFailure(b.seed_url, b.error) for b in boundaries if b.error is not None)
        if failures and context.fail_fast:
            raise failures[0].error

        urls_visited = len(context.visited)
        if context.words.is_empty():
            logger.info("Crawl finished: %d URL(s) visited, no words counted", urls_visited)
            return CrawlResult(word_counts={}, urls_visited=urls_visited, failures=failures)

        ranked = rank_words(context.words.snapshot(), popular_word_count)
        logger.info("Crawl finished: %d URL(s) visited, %d failed seed(s)", urls_visited, len(failures))
        return CrawlResult(word_counts=ranked, urls_visited=urls_visited, failures=failures)

    @profiled
    def crawl_config(self, config: CrawlerConfig) -> CrawlResult:
        """Run `crawl` with the settings of a loaded `CrawlerConfig`."""
        if config is None:
            raise ValueError("config is required for crawl")
        return self.crawl(
            config.start_pages,
            max_depth=config.max_depth,
            timeout=config.timeout,
            popular_word_count=config.popular_word_count,
            ignored_urls=config.ignored_urls,
            parallelism=config.parallelism,
            fail_fast=config.fail_fast,
        )
