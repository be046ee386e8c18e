"""
Full-text search across meeting records.

Scans caller-supplied records (meetings, minutes, transcript segments,
action items); there is no persistent index.

Components:
- matcher: match locator, builds highlight contexts around each occurrence
- scorer: tiered relevance heuristic (exact > prefix > substring > word overlap)
- builders: per-source scoring of record fields, plus record filters
- fusion: first-seen-wins deduplication and stable score ordering
- facets: result counts by type, participant and month
- response: pagination and the response envelope
- service: SearchService tying the pipeline together

Everything is synchronous and side-effect free; callers own caching and
timeouts.
"""

from .matcher import create_search_contexts
from .scorer import calculate_relevance_score
from .fusion import merge_search_results
from .facets import calculate_facets, get_result_type_label
from .response import assemble_search_response, create_empty_search_response, normalize_pagination
from .options import FieldWeights, SearchOptions
from .models import (
    MatchContext,
    SearchFacets,
    SearchFilters,
    SearchQuery,
    SearchResponse,
    validate_search_query,
    validate_search_response,
)
from .service import SearchDataSources, SearchService, SearchServiceError, create_search_service

__all__ = [
    "create_search_contexts",
    "calculate_relevance_score",
    "merge_search_results",
    "calculate_facets",
    "get_result_type_label",
    "assemble_search_response",
    "create_empty_search_response",
    "normalize_pagination",
    "FieldWeights",
    "SearchOptions",
    "MatchContext",
    "SearchFacets",
    "SearchFilters",
    "SearchQuery",
    "SearchResponse",
    "validate_search_query",
    "validate_search_response",
    "SearchDataSources",
    "SearchService",
    "SearchServiceError",
    "create_search_service",
]
