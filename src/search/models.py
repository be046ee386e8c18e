"""
Query, result and response envelopes for meeting search.

Attributes are snake_case; the camelCase wire names of the JSON contract
(totalPages, hasMore, executionTimeMs, sortBy, ...) are accepted on input
and emitted with model_dump(by_alias=True).
"""

from datetime import date, datetime
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.utils import to_utc_datetime


SearchTarget = Literal["meetings", "minutes", "transcripts", "action_items", "all"]
ResultType = Literal["meeting", "minutes", "transcript", "action_item"]
MeetingStatus = Literal["scheduled", "in_progress", "ended", "cancelled"]
MinutesStatus = Literal["not_created", "draft", "pending_approval", "approved"]
ActionItemStatus = Literal["pending", "in_progress", "completed"]
Priority = Literal["high", "medium", "low"]


class SearchModel(BaseModel):
    """Base model: snake_case attributes, camelCase aliases"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenSearchModel(SearchModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# Query

class DateFilter(SearchModel):
    # "from" is a keyword, so the attribute is from_date with wire name "from"
    from_date: Optional[datetime] = Field(default=None, alias="from")
    to_date: Optional[datetime] = Field(default=None, alias="to")


class ParticipantFilter(SearchModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class SearchFilters(SearchModel):
    date_range: Optional[DateFilter] = None
    participants: Optional[List[ParticipantFilter]] = None
    tags: Optional[List[str]] = None
    meeting_status: Optional[MeetingStatus] = None
    minutes_status: Optional[MinutesStatus] = None
    action_item_status: Optional[ActionItemStatus] = None
    priority: Optional[Priority] = None


class SearchQuery(SearchModel):
    query: str = Field(..., description="Search text", min_length=1, max_length=500)
    targets: List[SearchTarget] = Field(default_factory=lambda: ["all"])
    filters: Optional[SearchFilters] = None
    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    limit: int = Field(default=20, ge=1, le=100, description="Items per page")
    sort_by: Literal["relevance", "date"] = "relevance"
    sort_order: Literal["asc", "desc"] = "desc"


# Results

class MatchContext(FrozenSearchModel):
    """Text around a single match, for highlighting"""
    before: str
    match: str
    after: str
    field: str


class MeetingSearchResult(FrozenSearchModel):
    type: Literal["meeting"] = "meeting"
    id: str
    title: str
    date: datetime
    host_name: str
    participant_count: int = 0
    has_minutes: bool = False
    contexts: List[MatchContext] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0)


class MinutesSearchResult(FrozenSearchModel):
    type: Literal["minutes"] = "minutes"
    id: str
    meeting_id: str
    title: str
    date: date
    summary_snippet: str = ""
    attendee_names: List[str] = Field(default_factory=list)
    contexts: List[MatchContext] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0)


class TranscriptSearchResult(FrozenSearchModel):
    type: Literal["transcript"] = "transcript"
    id: str
    meeting_id: str
    meeting_title: str
    segment_id: str
    speaker_name: str
    timestamp: int = Field(..., description="Segment start in milliseconds")
    date: datetime = Field(..., description="Start time of the parent meeting")
    contexts: List[MatchContext] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0)


class ActionItemSearchResult(FrozenSearchModel):
    type: Literal["action_item"] = "action_item"
    id: str
    meeting_id: str
    meeting_title: str
    content: str
    assignee_name: Optional[str] = None
    due_date: Optional[date] = None
    priority: Priority
    status: ActionItemStatus
    meeting_date: date
    contexts: List[MatchContext] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0)


SearchResultItem = Annotated[
    Union[MeetingSearchResult, MinutesSearchResult, TranscriptSearchResult, ActionItemSearchResult],
    Field(discriminator="type"),
]


def result_date(result: SearchResultItem) -> datetime:
    """
    Date used for sorting and date facets, normalized to UTC.

    Action items use their due date when set, otherwise the date of the
    minutes they came from.
    """
    if result.type == "meeting":
        return to_utc_datetime(result.date)
    if result.type == "minutes":
        return to_utc_datetime(result.date)
    if result.type == "transcript":
        return to_utc_datetime(result.date)
    if result.type == "action_item":
        return to_utc_datetime(result.due_date or result.meeting_date)
    raise ValueError(f"Unknown search result type: {result.type}")


# Response

class FacetCount(FrozenSearchModel):
    value: str
    count: int = Field(..., ge=0)
    label: str


class SearchFacets(FrozenSearchModel):
    by_type: List[FacetCount] = Field(default_factory=list)
    by_participant: Optional[List[FacetCount]] = None
    by_date_range: Optional[List[FacetCount]] = None


class SearchResponse(FrozenSearchModel):
    query: str
    results: List[SearchResultItem] = Field(default_factory=list)
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    has_more: bool
    facets: Optional[SearchFacets] = None
    execution_time_ms: float = Field(..., ge=0.0)


def validate_search_query(data: Any) -> SearchQuery:
    """
    Validate raw request data into a SearchQuery.

    Raises:
        pydantic.ValidationError: If the data violates the query bounds
    """
    return SearchQuery.model_validate(data)


def validate_search_response(data: Any) -> SearchResponse:
    """
    Validate a serialized response (e.g. from a cache or another service).

    Raises:
        pydantic.ValidationError: If the payload is not a valid SearchResponse
    """
    return SearchResponse.model_validate(data)
