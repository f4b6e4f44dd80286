import logging

from wordcrawl.domain.crawl_context import CrawlContext

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl entry rules: depth limits, the deadline, and ignored URLs.

    Every check runs when a task starts, not when it is scheduled, since a
    task may sit in the queue long after its parent decided to spawn it.
    """

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if URL should be skipped because no hops remain."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_deadline(self, url: str, context: CrawlContext) -> bool:
        """Check if the crawl deadline has been reached."""
        if context.clock.now() >= context.deadline:
            logger.debug("Skipping (deadline passed) %s", url)
            return True
        return False

    def should_skip_due_to_ignore(self, url: str, context: CrawlContext) -> bool:
        """Check if URL fully matches one of the ignore patterns."""
        for pattern in context.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False

    def should_skip(self, url: str, depth: int, context: CrawlContext) -> bool:
        return (
            self.should_skip_due_to_depth(depth)
            or self.should_skip_due_to_deadline(url, context)
            or self.should_skip_due_to_ignore(url, context)
        )
