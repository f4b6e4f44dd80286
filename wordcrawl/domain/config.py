from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Tuple


@dataclass(frozen=True)
class CrawlerConfig:
    """Settings for a single crawl invocation.

    `ignored_urls` and `ignored_words` hold compiled patterns; both are
    matched against the whole string.
    """

    start_pages: Tuple[str, ...] = ()
    ignored_urls: Tuple[re.Pattern[str], ...] = ()
    ignored_words: Tuple[re.Pattern[str], ...] = ()
    parallelism: Optional[int] = None
    max_depth: int = 0
    timeout: timedelta = timedelta(0)
    popular_word_count: int = 0
    fail_fast: bool = False
    result_path: Optional[str] = None
    profile_output_path: Optional[str] = None
    config_path: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if self.popular_word_count < 0:
            raise ValueError("popular_word_count must be >= 0")
        if self.timeout < timedelta(0):
            raise ValueError("timeout must not be negative")
        if self.parallelism is not None and self.parallelism < 1:
            raise ValueError("parallelism must be >= 1")

    @staticmethod
    def compile_patterns(patterns) -> Tuple[re.Pattern[str], ...]:
        return tuple(p if isinstance(p, re.Pattern) else re.compile(p) for p in (patterns or ()))

    def __repr__(self):
        return (
            f"<CrawlerConfig path={self.config_path} seeds={len(self.start_pages)} "
            f"depth={self.max_depth} timeout={self.timeout}>"
        )
