from __future__ import annotations

import logging
from typing import Callable

from wordcrawl.domain.crawl_context import CrawlContext, SeedBoundary
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.protocols import PageParser

logger = logging.getLogger(__name__)


class CrawlTask:
    """Visits one URL at one remaining depth and schedules a child per outgoing link.

    A task never waits for its children. The seed's `SeedBoundary` counts
    every task of the subtree instead, so the subtree is done when that
    count reaches zero and a bounded pool cannot deadlock on nested joins.

    A failed page only loses its own links; every other page under the same
    seed keeps expanding. Only fail-fast mode stops the crawl.
    """

    def __init__(
        self,
        url: str,
        depth: int,
        *,
        context: CrawlContext,
        boundary: SeedBoundary,
        parser: PageParser,
        policy: CrawlPolicy,
        spawn: Callable[["CrawlTask"], None],
    ):
        self.url = url
        self.depth = depth
        self.context = context
        self.boundary = boundary
        self.parser = parser
        self.policy = policy
        self.spawn = spawn

    def child(self, url: str) -> "CrawlTask":
        return CrawlTask(
            url,
            self.depth - 1,
            context=self.context,
            boundary=self.boundary,
            parser=self.parser,
            policy=self.policy,
            spawn=self.spawn,
        )

    def _is_aborted(self) -> bool:
        return self.context.is_aborted()

    def run(self) -> None:
        """Entry point for a worker thread. Always releases the boundary slot."""
        try:
            self.compute()
        except Exception as e:
            self._on_failure(e)
        finally:
            self.boundary.leave()

    def compute(self) -> None:
        if self.policy.should_skip(self.url, self.depth, self.context):
            return
        if self._is_aborted():
            logger.debug("Skipping (crawl aborted) %s", self.url)
            return
        if not self.context.visited.claim(self.url):
            logger.debug("Skipping (visited) %s", self.url)
            return

        result = self.parser.parse(self.url)
        self.context.words.merge(result.word_counts)
        logger.debug("Parsed %s: %d word(s), %d link(s)", self.url, len(result.word_counts), len(result.links))

        for link in result.links:
            if self._is_aborted():
                return
            self.spawn(self.child(link))

    def _on_failure(self, error: Exception) -> None:
        if not self.boundary.fail(error):
            logger.debug("Additional failure under seed %s at %s: %s", self.boundary.seed_url, self.url, error)
            return
        logger.error("Crawl of seed %s failed at %s: %s", self.boundary.seed_url, self.url, error, exc_info=error)
        if self.context.fail_fast:
            self.context.abort_event.set()
