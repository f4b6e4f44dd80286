import json
import logging
from pathlib import Path
from typing import TextIO, Union

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Serializes a CrawlResult as JSON.

    Word counts keep their rank order. Seed failures are written as
    ``{"seedUrl": ..., "error": ...}`` entries.
    """

    def __init__(self, result: CrawlResult):
        self.result = result

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
            "failures": [
                {"seedUrl": f.seed_url, "error": str(f.error)} for f in self.result.failures
            ],
        }

    def write_to(self, stream: TextIO) -> None:
        json.dump(self.to_dict(), stream, indent=2)
        stream.write("\n")

    def write(self, path: Union[str, Path]) -> None:
        """Write the result to `path`, replacing any previous content."""
        with open(path, "w", encoding="utf-8") as f:
            self.write_to(f)
        logger.info("Crawl result written to %s", path)
