from typing import Dict, Mapping, Tuple


def _rank_key(item: Tuple[str, int]):
    word, count = item
    return (-count, -len(word), word)


def rank_words(word_counts: Mapping[str, int], limit: int) -> Dict[str, int]:
    """Return the `limit` most popular words, most popular first.

    Ties on count go to the longer word, then to the alphabetically first
    one, so equal inputs always produce the same ordering. The returned
    dict iterates in rank order.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    ranked = sorted(word_counts.items(), key=_rank_key)[:limit]
    return dict(ranked)
