import os
import re
from datetime import timedelta
from typing import Optional

from wordcrawl import config as env
from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import CrawlConfigError

KNOWN_KEYS = frozenset({
    "start_pages",
    "ignored_urls",
    "ignored_words",
    "parallelism",
    "max_depth",
    "timeout_seconds",
    "popular_word_count",
    "fail_fast",
    "result_path",
    "profile_output_path",
})


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlerConfig.

    Responsibility: schema/validation for YAML config files.
    It does NOT perform filesystem IO. Keys left out fall back to the
    environment defaults in `wordcrawl.config`.
    """

    def _string_list(self, data: dict, key: str) -> list[str]:
        value = data.get(key) or []
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise CrawlConfigError(key, "expected a list of strings")
        return [str(v) for v in value]

    def _int(self, data: dict, key: str, default: Optional[int], minimum: int) -> Optional[int]:
        value = data.get(key, default)
        if value is None:
            return None
        if isinstance(value, bool):
            raise CrawlConfigError(key, f"expected an integer, got {value!r}")
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise CrawlConfigError(key, f"expected an integer, got {value!r}")
        if number < minimum:
            raise CrawlConfigError(key, f"must be >= {minimum}")
        return number

    def _bool(self, data: dict, key: str, default: bool) -> bool:
        value = data.get(key, default)
        if not isinstance(value, bool):
            raise CrawlConfigError(key, f"expected true or false, got {value!r}")
        return value

    def _timeout(self, data: dict) -> timedelta:
        value = data.get("timeout_seconds", env.DEFAULT_TIMEOUT_SECONDS)
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            raise CrawlConfigError("timeout_seconds", f"expected a number, got {value!r}")
        if seconds < 0:
            raise CrawlConfigError("timeout_seconds", "must be >= 0")
        return timedelta(seconds=seconds)

    def parse(self, *, data: dict, config_path: Optional[str] = None) -> CrawlerConfig:
        if not isinstance(data, dict):
            raise CrawlConfigError("<root>", "expected a mapping")
        unknown = sorted(set(data) - KNOWN_KEYS - {"pages"})
        if unknown:
            raise CrawlConfigError(unknown[0], "unknown key")

        start_pages = self._string_list(data, "start_pages")
        try:
            ignored_urls = CrawlerConfig.compile_patterns(self._string_list(data, "ignored_urls"))
            ignored_words = CrawlerConfig.compile_patterns(self._string_list(data, "ignored_words"))
        except re.error as e:
            raise CrawlConfigError("ignored_urls/ignored_words", f"bad pattern: {e}")

        return CrawlerConfig(
            start_pages=tuple(start_pages),
            ignored_urls=ignored_urls,
            ignored_words=ignored_words,
            parallelism=self._int(data, "parallelism", env.DEFAULT_PARALLELISM, 1),
            max_depth=self._int(data, "max_depth", env.DEFAULT_DEPTH, 0),
            timeout=self._timeout(data),
            popular_word_count=self._int(data, "popular_word_count", env.DEFAULT_POPULAR_WORD_COUNT, 0),
            fail_fast=self._bool(data, "fail_fast", env.DEFAULT_FAIL_FAST),
            result_path=data.get("result_path"),
            profile_output_path=data.get("profile_output_path"),
            config_path=os.path.basename(config_path) if config_path else None,
        )
