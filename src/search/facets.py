"""
Facet counts over a merged result set, for filter UI.

Dimensions:
- type:        result type (meeting, minutes, transcript, action_item)
- participant: meeting host, minutes attendees, transcript speaker, action item assignee
- date:        calendar month (YYYY-MM) of the result date

Buckets with no results are never emitted.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .models import FacetCount, SearchFacets, SearchResultItem, result_date
from .options import DEFAULT_TYPE_LABELS, FACET_DIMENSIONS

logger = logging.getLogger(__name__)


def get_result_type_label(result_type: str, labels: Optional[Mapping[str, str]] = None) -> str:
    """Display label for a result type, falling back to the raw type"""
    labels = DEFAULT_TYPE_LABELS if labels is None else labels
    return labels.get(result_type, result_type)


def result_participants(result: SearchResultItem) -> List[str]:
    """Distinct participant names attached to a result, in display order"""
    if result.type == "meeting":
        names = [result.host_name]
    elif result.type == "minutes":
        names = list(result.attendee_names)
    elif result.type == "transcript":
        names = [result.speaker_name]
    elif result.type == "action_item":
        names = [result.assignee_name] if result.assignee_name else []
    else:
        raise ValueError(f"Unknown search result type: {result.type}")

    # dict keeps insertion order, so this dedupes without reordering
    return list(dict.fromkeys(name for name in names if name))


def _count(values: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def _facet_list(counts: Mapping[str, int], labels: Optional[Mapping[str, str]]) -> List[FacetCount]:
    labels = labels or {}
    return [
        FacetCount(value=value, count=count, label=labels.get(value, value))
        for value, count in counts.items()
        if count > 0
    ]


def calculate_facets(
    results: Sequence[SearchResultItem],
    dimensions: Sequence[str] = ("type",),
    type_labels: Optional[Mapping[str, str]] = None,
    participant_labels: Optional[Mapping[str, str]] = None,
    date_labels: Optional[Mapping[str, str]] = None,
) -> SearchFacets:
    """
    Tally results along the requested dimensions.

    Args:
        results: Deduplicated results (the full set, not one page)
        dimensions: Any of "type", "participant", "date"; by_type is always present
        type_labels: Label per result type (defaults to English labels)
        participant_labels: Label per participant name (defaults to the name)
        date_labels: Label per month bucket (defaults to "YYYY-MM")

    Returns:
        SearchFacets; by_participant/by_date_range stay None unless requested

    Ordering:
        by_type in first-seen order, by_participant by count descending
        (ties in first-seen order), by_date_range newest month first.
    """
    unknown = set(dimensions) - set(FACET_DIMENSIONS)
    if unknown:
        raise ValueError(f"Unknown facet dimensions: {sorted(unknown)}. Valid options: {', '.join(FACET_DIMENSIONS)}")

    type_counts = _count(result.type for result in results)
    by_type = _facet_list(type_counts, DEFAULT_TYPE_LABELS if type_labels is None else type_labels)

    by_participant = None
    if "participant" in dimensions:
        participant_counts = _count(name for result in results for name in result_participants(result))
        ranked = sorted(participant_counts.items(), key=lambda item: item[1], reverse=True)
        by_participant = _facet_list(dict(ranked), participant_labels)

    by_date_range = None
    if "date" in dimensions:
        month_counts = _count(result_date(result).strftime("%Y-%m") for result in results)
        newest_first = sorted(month_counts.items(), key=lambda item: item[0], reverse=True)
        by_date_range = _facet_list(dict(newest_first), date_labels)

    logger.debug(f"Facets over {len(results)} results: dimensions={list(dimensions)}, types={type_counts}")

    return SearchFacets(
        by_type=by_type,
        by_participant=by_participant,
        by_date_range=by_date_range,
    )
