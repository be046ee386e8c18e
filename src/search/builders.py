"""
Per-source result builders.

Each builder scores the searchable fields of its records, collects match
contexts, and emits one typed result per matching record:

- score = min(max(field scores), 1)
- contexts are concatenated in field order and capped per result type
- records scoring 0 are left out entirely

Output order follows the input records and carries no ranking meaning;
ranking happens after merging.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from src.utils import create_snippet, to_utc_datetime

from .matcher import create_search_contexts
from .models import (
    ActionItemSearchResult,
    MatchContext,
    MeetingSearchResult,
    MinutesSearchResult,
    SearchFilters,
    TranscriptSearchResult,
)
from .options import SearchOptions
from .records import Meeting, Minutes, Transcript
from .scorer import calculate_relevance_score

logger = logging.getLogger(__name__)

MAX_CONTEXTS = {
    "meeting": 3,
    "minutes": 5,
    "transcript": 2,
    "action_item": 2,
}

SUMMARY_SNIPPET_LENGTH = 150

# (field name, text, weight)
ScoredField = Tuple[str, Optional[str], float]


def score_fields(
    fields: Iterable[ScoredField],
    query: str,
    context_length: int,
) -> Tuple[float, List[MatchContext]]:
    """
    Score several fields of one record.

    Returns:
        (overall score capped at 1, contexts in field order)
    """
    best = 0.0
    contexts: List[MatchContext] = []

    for field_name, text, weight in fields:
        if not text:
            continue
        best = max(best, calculate_relevance_score(text, query, weight))
        contexts.extend(create_search_contexts(text, query, context_length, field_name))

    return min(best, 1.0), contexts


# Filters

def _in_date_range(value, filters: SearchFilters) -> bool:
    date_range = filters.date_range
    if date_range is None:
        return True
    moment = to_utc_datetime(value)
    if date_range.from_date is not None and moment < to_utc_datetime(date_range.from_date):
        return False
    if date_range.to_date is not None and moment > to_utc_datetime(date_range.to_date):
        return False
    return True


def _participant_ids(filters: SearchFilters) -> Set[str]:
    return {participant.id for participant in filters.participants or []}


def matches_meeting_filters(meeting: Meeting, filters: Optional[SearchFilters]) -> bool:
    """Meeting-level filters, also applied to transcripts and action items via their meeting"""
    if filters is None:
        return True

    if not _in_date_range(meeting.start_time, filters):
        return False

    wanted = _participant_ids(filters)
    if wanted:
        present = {meeting.host.id} | {p.id for p in meeting.participants}
        if not wanted & present:
            return False

    if filters.meeting_status is not None and meeting.status != filters.meeting_status:
        return False

    if filters.tags and not set(filters.tags) <= set(meeting.tags):
        return False

    return True


def matches_minutes_filters(minutes: Minutes, filters: Optional[SearchFilters]) -> bool:
    if filters is None:
        return True

    if not _in_date_range(minutes.date, filters):
        return False

    wanted = _participant_ids(filters)
    if wanted and not any(attendee.id in wanted for attendee in minutes.attendees):
        return False

    if filters.minutes_status is not None and minutes.status != filters.minutes_status:
        return False

    return True


# Builders

def search_meetings(
    meetings: Sequence[Meeting],
    query: str,
    options: SearchOptions,
    filters: Optional[SearchFilters] = None,
    minutes: Sequence[Minutes] = (),
) -> List[MeetingSearchResult]:
    """Match meetings on title, host name and meeting number"""
    weights = options.field_weights
    meetings_with_minutes = {m.meeting_id for m in minutes}
    results: List[MeetingSearchResult] = []

    for meeting in meetings:
        if not matches_meeting_filters(meeting, filters):
            continue

        score, contexts = score_fields(
            [
                ("title", meeting.title, weights.title),
                ("host", meeting.host.name, weights.speaker),
                ("meetingNo", meeting.meeting_no, weights.content),
            ],
            query,
            options.context_length,
        )
        if score <= 0:
            continue

        results.append(MeetingSearchResult(
            id=meeting.id,
            title=meeting.title,
            date=meeting.start_time,
            host_name=meeting.host.name,
            participant_count=meeting.participant_count,
            has_minutes=meeting.id in meetings_with_minutes,
            contexts=contexts[:MAX_CONTEXTS["meeting"]],
            score=score,
        ))

    return results


def _minutes_fields(minutes: Minutes, options: SearchOptions) -> List[ScoredField]:
    weights = options.field_weights
    fields: List[ScoredField] = [
        ("title", minutes.title, weights.title),
        ("summary", minutes.summary, weights.summary),
    ]
    for topic in minutes.topics:
        fields.append(("topic.title", topic.title, weights.content))
        fields.append(("topic.summary", topic.summary, weights.content))
        fields.extend(("topic.keyPoint", point, weights.content) for point in topic.key_points)
    fields.extend(("decision", decision.content, weights.content) for decision in minutes.decisions)
    return fields


def search_minutes(
    minutes: Sequence[Minutes],
    query: str,
    options: SearchOptions,
    filters: Optional[SearchFilters] = None,
) -> List[MinutesSearchResult]:
    """Match minutes on title, summary, topics (title/summary/key points) and decisions"""
    results: List[MinutesSearchResult] = []

    for record in minutes:
        if not matches_minutes_filters(record, filters):
            continue

        score, contexts = score_fields(_minutes_fields(record, options), query, options.context_length)
        if score <= 0:
            continue

        results.append(MinutesSearchResult(
            id=record.id,
            meeting_id=record.meeting_id,
            title=record.title,
            date=record.date,
            summary_snippet=create_snippet(record.summary, SUMMARY_SNIPPET_LENGTH),
            attendee_names=[attendee.name for attendee in record.attendees],
            contexts=contexts[:MAX_CONTEXTS["minutes"]],
            score=score,
        ))

    return results


def _meetings_by_id(meetings: Sequence[Meeting]) -> Dict[str, Meeting]:
    return {meeting.id: meeting for meeting in meetings}


def search_transcripts(
    transcripts: Sequence[Transcript],
    meetings: Sequence[Meeting],
    query: str,
    options: SearchOptions,
    filters: Optional[SearchFilters] = None,
) -> List[TranscriptSearchResult]:
    """Match transcript segments on their text; one result per segment"""
    by_id = _meetings_by_id(meetings)
    results: List[TranscriptSearchResult] = []

    for transcript in transcripts:
        meeting = by_id.get(transcript.meeting_id)
        if meeting is None:
            logger.debug(f"Skipping transcript for unknown meeting {transcript.meeting_id}")
            continue
        if not matches_meeting_filters(meeting, filters):
            continue

        for segment in transcript.segments:
            score, contexts = score_fields(
                [("segment", segment.text, options.field_weights.content)],
                query,
                options.context_length,
            )
            if score <= 0:
                continue

            results.append(TranscriptSearchResult(
                id=segment.id,
                meeting_id=transcript.meeting_id,
                meeting_title=meeting.title,
                segment_id=segment.id,
                speaker_name=segment.speaker.name,
                timestamp=segment.start_time,
                date=meeting.start_time,
                contexts=contexts[:MAX_CONTEXTS["transcript"]],
                score=score,
            ))

    return results


def search_action_items(
    minutes: Sequence[Minutes],
    meetings: Sequence[Meeting],
    query: str,
    options: SearchOptions,
    filters: Optional[SearchFilters] = None,
) -> List[ActionItemSearchResult]:
    """Match action items (from minutes) on content and assignee name"""
    weights = options.field_weights
    by_id = _meetings_by_id(meetings)
    results: List[ActionItemSearchResult] = []

    for record in minutes:
        meeting = by_id.get(record.meeting_id)
        if meeting is None:
            logger.debug(f"Skipping action items of minutes {record.id}: unknown meeting {record.meeting_id}")
            continue
        if not matches_meeting_filters(meeting, filters):
            continue

        for item in record.action_items:
            if filters is not None:
                if filters.action_item_status is not None and item.status != filters.action_item_status:
                    continue
                if filters.priority is not None and item.priority != filters.priority:
                    continue

            assignee_name = item.assignee.name if item.assignee else None
            score, contexts = score_fields(
                [
                    ("content", item.content, weights.content),
                    ("assignee", assignee_name, weights.speaker),
                ],
                query,
                options.context_length,
            )
            if score <= 0:
                continue

            results.append(ActionItemSearchResult(
                id=item.id,
                meeting_id=record.meeting_id,
                meeting_title=record.title,
                content=item.content,
                assignee_name=assignee_name,
                due_date=item.due_date,
                priority=item.priority,
                status=item.status,
                meeting_date=record.date,
                contexts=contexts[:MAX_CONTEXTS["action_item"]],
                score=score,
            ))

    return results
