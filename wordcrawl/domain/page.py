from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class PageParseResult:
    """Outcome of parsing a single page: its word counts and outgoing links."""

    word_counts: Dict[str, int] = field(default_factory=dict)
    links: List[str] = field(default_factory=list)
