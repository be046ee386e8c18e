"""Pagination and response envelope assembly"""

import math
import time
from typing import Optional, Sequence, Tuple

from .models import SearchFacets, SearchResponse, SearchResultItem

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def normalize_pagination(page: int, limit: int) -> Tuple[int, int]:
    """
    Clamp page and limit into their valid ranges (page >= 1, 1 <= limit <= 100).
    """
    page = max(page, 1)
    limit = min(max(limit, 1), MAX_LIMIT)
    return page, limit


def assemble_search_response(
    query: str,
    results: Sequence[SearchResultItem],
    page: int,
    limit: int,
    started_at: float,
    facets: Optional[SearchFacets] = None,
) -> SearchResponse:
    """
    Slice one page out of the merged results and build the response.

    Args:
        query: Query text echoed back to the caller
        results: Merged, deduplicated, ordered results (all pages)
        page: 1-based page number
        limit: Page size
        started_at: time.perf_counter() value taken when processing began
        facets: Facet counts over the full result set (optional)

    Returns:
        SearchResponse; a page past the end has empty results, not an error
    """
    page, limit = normalize_pagination(page, limit)

    total = len(results)
    total_pages = math.ceil(total / limit) if total else 0
    start = (page - 1) * limit
    page_results = list(results[start:start + limit])

    execution_time_ms = max(0.0, (time.perf_counter() - started_at) * 1000)

    return SearchResponse(
        query=query,
        results=page_results,
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_more=page * limit < total,
        facets=facets,
        execution_time_ms=execution_time_ms,
    )


def create_empty_search_response(query: str) -> SearchResponse:
    """Response for early exits (blank query, no candidate records)"""
    return SearchResponse(
        query=query,
        results=[],
        total=0,
        page=DEFAULT_PAGE,
        limit=DEFAULT_LIMIT,
        total_pages=0,
        has_more=False,
        execution_time_ms=0.0,
    )
