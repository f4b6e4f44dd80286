"""Crawl result data model."""
from typing import Dict, NamedTuple, Tuple


class SeedFailure(NamedTuple):
    """A seed URL under which a page failed to parse."""

    seed_url: str
    error: BaseException


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Built once after every task has finished; treat it as read-only.
    """
    word_counts: Dict[str, int]
    """Top-N words, iteration order is rank order"""

    urls_visited: int
    """Number of distinct URLs claimed during the crawl"""

    failures: Tuple[SeedFailure, ...] = ()
    """Seeds with a failed page when per-seed isolation is active"""
