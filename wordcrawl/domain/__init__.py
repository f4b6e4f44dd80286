"""Domain objects for wordcrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_context import CrawlContext as CrawlContext
from .crawl_context import SeedBoundary as SeedBoundary
from .crawl_result import CrawlResult as CrawlResult
from .crawl_result import SeedFailure as SeedFailure
from .page import PageParseResult as PageParseResult
from .visited_tracker import VisitedTracker as VisitedTracker
from .word_accumulator import WordAccumulator as WordAccumulator

__all__ = [
    "CrawlerConfig",
    "CrawlContext",
    "SeedBoundary",
    "CrawlResult",
    "SeedFailure",
    "PageParseResult",
    "VisitedTracker",
    "WordAccumulator",
]
