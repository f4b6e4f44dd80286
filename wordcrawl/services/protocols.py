"""Protocol (interface) definitions for services."""

from typing import Protocol

from wordcrawl.domain.page import PageParseResult


class PageParser(Protocol):
    """Turns one URL into its word counts and outgoing links.

    Implementations may be slow and may raise (conventionally
    `wordcrawl.exceptions.ParseFailure`); callers do not retry.
    """

    def parse(self, url: str) -> PageParseResult:
        ...
