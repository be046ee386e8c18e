"""Unit test configuration - isolated environment and sample meeting records"""

from datetime import date, datetime, timezone

import pytest

from src.search.records import (
    ActionItem,
    Decision,
    Meeting,
    MeetingUser,
    Minutes,
    Speaker,
    Topic,
    Transcript,
    TranscriptSegment,
)
from src.search.service import SearchDataSources

SEARCH_ENV_VARS = [
    "SEARCH_CONTEXT_LENGTH",
    "SEARCH_MIN_SCORE_THRESHOLD",
    "SEARCH_WEIGHT_TITLE",
    "SEARCH_WEIGHT_SUMMARY",
    "SEARCH_WEIGHT_CONTENT",
    "SEARCH_WEIGHT_SPEAKER",
    "SEARCH_FACETS",
]


@pytest.fixture(autouse=True)
def clean_search_environment(monkeypatch):
    """
    Remove SEARCH_* variables for each unit test.

    A developer's .env.local must not change scoring in unit tests.
    """
    for name in SEARCH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def alice():
    return Speaker(id="u-alice", name="Alice Tanaka")


@pytest.fixture
def bob():
    return Speaker(id="u-bob", name="Bob Sato")


@pytest.fixture
def meetings():
    """Three meetings: budget review (ended), weekly sync (ended), roadmap (scheduled)"""
    return [
        Meeting(
            id="meeting-1",
            title="Budget review",
            meeting_no="100-200-300",
            start_time=datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc),
            status="ended",
            host=MeetingUser(id="u-alice", name="Alice Tanaka"),
            participants=[MeetingUser(id="u-bob", name="Bob Sato")],
            participant_count=2,
            tags=["finance", "q1"],
        ),
        Meeting(
            id="meeting-2",
            title="Weekly sync",
            meeting_no="100-200-301",
            start_time=datetime(2025, 2, 3, 9, 0, tzinfo=timezone.utc),
            status="ended",
            host=MeetingUser(id="u-bob", name="Bob Sato"),
            participant_count=5,
            tags=["team"],
        ),
        Meeting(
            id="meeting-3",
            title="Product roadmap planning",
            meeting_no="100-200-302",
            start_time=datetime(2025, 3, 20, 14, 0, tzinfo=timezone.utc),
            status="scheduled",
            host=MeetingUser(id="u-carol", name="Carol Ito"),
            participant_count=8,
        ),
    ]


@pytest.fixture
def minutes(alice, bob):
    """Minutes for meeting-1 and meeting-2 (meeting-3 has none yet)"""
    return [
        Minutes(
            id="minutes-1",
            meeting_id="meeting-1",
            title="Budget review",
            date=date(2025, 1, 15),
            summary="We reviewed the marketing budget and agreed to cut travel spend.",
            topics=[
                Topic(
                    id="topic-1",
                    title="Marketing budget",
                    summary="Marketing asked for more budget in Q2.",
                    key_points=["Travel spend reduced by 20%", "Ads budget unchanged"],
                ),
            ],
            decisions=[Decision(id="decision-1", content="Approve the revised budget")],
            action_items=[
                ActionItem(
                    id="action-1",
                    content="Send revised budget to finance",
                    assignee=alice,
                    due_date=date(2025, 1, 31),
                    priority="high",
                    status="pending",
                ),
                ActionItem(
                    id="action-2",
                    content="Book venue for offsite",
                    assignee=bob,
                    priority="low",
                    status="completed",
                ),
            ],
            attendees=[alice, bob],
            status="approved",
        ),
        Minutes(
            id="minutes-2",
            meeting_id="meeting-2",
            title="Weekly sync",
            date=date(2025, 2, 3),
            summary="Status updates from each team.",
            action_items=[
                ActionItem(
                    id="action-3",
                    content="Follow up on budget questions",
                    priority="medium",
                    status="in_progress",
                ),
            ],
            attendees=[bob],
            status="draft",
        ),
    ]


@pytest.fixture
def transcripts(alice, bob):
    return [
        Transcript(
            meeting_id="meeting-1",
            segments=[
                TranscriptSegment(id="seg-1", start_time=0, end_time=4000, speaker=alice,
                                  text="Let's start with the budget."),
                TranscriptSegment(id="seg-2", start_time=4000, end_time=9000, speaker=bob,
                                  text="Travel costs went up again this quarter."),
            ],
        ),
        Transcript(
            meeting_id="meeting-missing",
            segments=[
                TranscriptSegment(id="seg-orphan", start_time=0, end_time=1000, speaker=bob,
                                  text="Budget talk in a meeting we do not know about."),
            ],
        ),
    ]


@pytest.fixture
def data_sources(meetings, minutes, transcripts):
    return SearchDataSources(meetings=meetings, minutes=minutes, transcripts=transcripts)
