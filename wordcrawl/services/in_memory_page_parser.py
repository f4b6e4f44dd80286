import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from wordcrawl.domain.page import PageParseResult
from wordcrawl.exceptions import CrawlConfigError, ParseFailure

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\w+")


@dataclass(frozen=True)
class StaticPage:
    text: str = ""
    links: List[str] = field(default_factory=list)


class InMemoryPageParser:
    """Page parser backed by a fixed url -> page mapping.

    Words are lower-cased runs of word characters; words that fully match any
    `ignored_words` pattern are dropped. Unknown URLs raise `ParseFailure`.
    """

    def __init__(self, pages: Mapping[str, StaticPage], ignored_words: Iterable = ()):
        self.pages: Dict[str, StaticPage] = dict(pages)
        self.ignored_words = tuple(
            p if isinstance(p, re.Pattern) else re.compile(p) for p in ignored_words
        )

    @classmethod
    def from_site_map(cls, data: Optional[dict], ignored_words: Iterable = ()) -> "InMemoryPageParser":
        """Build a parser from a ``{"pages": {url: {"text": ..., "links": [...]}}}`` dict."""
        pages = {}
        entries = (data or {}).get("pages") or {}
        if not isinstance(entries, dict):
            raise CrawlConfigError("pages", "expected a mapping of url to page")
        for url, entry in entries.items():
            entry = entry or {}
            if not isinstance(entry, dict):
                raise CrawlConfigError("pages", f"entry for {url!r} must be a mapping with text and links")
            pages[url] = StaticPage(
                text=str(entry.get("text", "") or ""),
                links=[str(link) for link in (entry.get("links") or [])],
            )
        return cls(pages, ignored_words=ignored_words)

    def _is_ignored(self, word: str) -> bool:
        return any(p.fullmatch(word) for p in self.ignored_words)

    def tokenize(self, text: str) -> Dict[str, int]:
        words = (w for w in _WORD_RE.findall(text.lower()) if not self._is_ignored(w))
        return dict(Counter(words))

    def parse(self, url: str) -> PageParseResult:
        page = self.pages.get(url)
        if page is None:
            raise ParseFailure(url, "not found in site map")
        return PageParseResult(word_counts=self.tokenize(page.text), links=list(page.links))
