"""
Search service: runs the builders for the requested targets, merges,
filters, sorts, facets and paginates.

The service holds the candidate records and options only; every call to
search() is independent and has no side effects beyond logging.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .builders import search_action_items, search_meetings, search_minutes, search_transcripts
from .facets import calculate_facets
from .fusion import merge_search_results
from .models import SearchQuery, SearchResponse, SearchResultItem, result_date
from .options import SearchOptions
from .records import Meeting, Minutes, Transcript
from .response import assemble_search_response, create_empty_search_response

logger = logging.getLogger(__name__)

ALL_TARGETS = ("meetings", "minutes", "transcripts", "action_items")


class SearchServiceError(Exception):
    """Search failure with a code and HTTP status for the calling layer"""

    def __init__(self, message: str, code: str, status_code: int = 500, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


@dataclass(frozen=True)
class SearchDataSources:
    """Candidate records loaded by the data-access layer"""
    meetings: Sequence[Meeting] = ()
    minutes: Sequence[Minutes] = ()
    transcripts: Sequence[Transcript] = ()


def resolve_targets(targets: Sequence[str]) -> List[str]:
    """Expand "all" and return targets in fixed execution order"""
    if not targets or "all" in targets:
        return list(ALL_TARGETS)
    return [target for target in ALL_TARGETS if target in targets]


def sort_results(
    results: Sequence[SearchResultItem],
    sort_by: str = "relevance",
    sort_order: str = "desc",
) -> List[SearchResultItem]:
    """
    Order results by relevance or date.

    Both orders are stable: results with equal keys keep their merge order.
    """
    reverse = sort_order == "desc"
    if sort_by == "relevance":
        return sorted(results, key=lambda r: r.score, reverse=reverse)
    if sort_by == "date":
        return sorted(results, key=result_date, reverse=reverse)
    raise ValueError(f"Unknown sort field: {sort_by}. Valid options: relevance, date")


class SearchService:
    """
    Full-text search over meetings, minutes, transcripts and action items.

    Example:
        >>> service = SearchService(SearchDataSources(meetings=meetings, minutes=minutes))
        >>> response = service.search(SearchQuery(query="budget", targets=["meetings", "minutes"]))
        >>> response.total, response.has_more
        (2, False)
    """

    def __init__(self, data_sources: SearchDataSources, options: Optional[SearchOptions] = None):
        self.data_sources = data_sources
        self.options = options or SearchOptions()

    def search(self, query: SearchQuery) -> SearchResponse:
        """
        Execute a search query.

        Args:
            query: Validated search query

        Returns:
            One page of results plus totals and facets

        Raises:
            SearchServiceError: If anything unexpected fails while searching
        """
        started_at = time.perf_counter()

        if not query.query or not query.query.strip():
            return create_empty_search_response(query.query)

        try:
            results = self._collect(query)
            results = [r for r in results if r.score >= self.options.min_score_threshold]
            results = sort_results(results, query.sort_by, query.sort_order)

            facets = calculate_facets(
                results,
                dimensions=self.options.facet_dimensions,
                type_labels=self.options.type_labels,
            )

            response = assemble_search_response(
                query=query.query,
                results=results,
                page=query.page,
                limit=query.limit,
                started_at=started_at,
                facets=facets,
            )
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            logger.error(f"Search failed for query '{query.query}': {e}")
            raise SearchServiceError(
                "Search failed",
                code="SEARCH_ERROR",
                status_code=500,
                details={"original_error": str(e), "execution_time_ms": elapsed_ms},
            ) from e

        logger.info(
            f"Search '{query.query}': {response.total} results, "
            f"page {response.page}/{response.total_pages}, {response.execution_time_ms:.1f}ms"
        )
        return response

    def _collect(self, query: SearchQuery) -> List[SearchResultItem]:
        text = query.query.strip()
        filters = query.filters
        sources = self.data_sources
        per_source = []

        for target in resolve_targets(query.targets):
            if target == "meetings":
                found = search_meetings(sources.meetings, text, self.options, filters, minutes=sources.minutes)
            elif target == "minutes":
                found = search_minutes(sources.minutes, text, self.options, filters)
            elif target == "transcripts":
                found = search_transcripts(sources.transcripts, sources.meetings, text, self.options, filters)
            else:
                found = search_action_items(sources.minutes, sources.meetings, text, self.options, filters)
            logger.debug(f"Target {target}: {len(found)} matches")
            per_source.append(found)

        return merge_search_results(per_source)


def create_search_service(
    data_sources: SearchDataSources,
    options: Optional[SearchOptions] = None,
) -> SearchService:
    """Factory for SearchService"""
    return SearchService(data_sources, options)
