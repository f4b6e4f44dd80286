"""Custom exceptions for wordcrawl."""


class ParseFailure(Exception):
    """Raised by a page parser when a page cannot be fetched or tokenized."""

    def __init__(self, url: str, reason: str = "could not be parsed"):
        self.url = url
        self.reason = reason
        super().__init__(f"Page '{url}' {reason}")


class CrawlConfigError(Exception):
    """Raised when a crawl configuration value is missing or invalid."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid crawl config '{key}': {reason}")


class CrawlInterruptedError(Exception):
    """Raised when the wait for crawl quiescence is interrupted.

    The crawl cannot guarantee complete counts at that point, so no partial
    result is returned.
    """

    def __init__(self, urls_visited: int):
        self.urls_visited = urls_visited
        super().__init__(f"Crawl interrupted after visiting {urls_visited} URL(s)")
