"""
Merge per-source result lists into one ranked list.

Unlike rank fusion, scores are already comparable across sources (every
builder uses the same scorer), so merging is:

1. Walk the lists in the order given, items in their own order
2. Keep the first item seen for each (type, id), drop later duplicates
3. Stable sort by score descending (ties keep merge order)

"First seen wins": callers that want a specific copy of a record to
survive must put its source first. Field-level data of duplicates is
not combined.
"""

from typing import Iterable, List, Set, Tuple

from .models import SearchResultItem


def merge_search_results(result_lists: Iterable[Iterable[SearchResultItem]]) -> List[SearchResultItem]:
    """
    Merge and deduplicate search results.

    Args:
        result_lists: Per-source result lists, most trusted source first

    Returns:
        Deduplicated results sorted by score (descending)

    Example:
        >>> merged = merge_search_results([meeting_results, minutes_results])
        >>> [r.score for r in merged]
        [0.9, 0.75, 0.5]
    """
    seen: Set[Tuple[str, str]] = set()
    merged: List[SearchResultItem] = []

    for results in result_lists:
        for result in results:
            key = (result.type, result.id)
            if key in seen:
                continue
            seen.add(key)
            merged.append(result)

    # sorted() is stable, so equal scores keep merge order
    return sorted(merged, key=lambda r: r.score, reverse=True)
