"""
Candidate records consumed by the search builders.

These mirror what the data-access layer hands over (meetings from the
calendar/VC API, generated minutes, stored transcripts). Only the fields
used for scoring, filtering and result display are modeled.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from .models import ActionItemStatus, FrozenSearchModel, MeetingStatus, MinutesStatus, Priority


class MeetingUser(FrozenSearchModel):
    id: str
    name: str
    email: Optional[str] = None


class Meeting(FrozenSearchModel):
    id: str
    title: str
    meeting_no: str = ""
    start_time: datetime
    end_time: Optional[datetime] = None
    status: MeetingStatus = "ended"
    host: MeetingUser
    participants: List[MeetingUser] = Field(default_factory=list)
    participant_count: int = 0
    tags: List[str] = Field(default_factory=list)


class Speaker(FrozenSearchModel):
    id: str
    name: str


class Topic(FrozenSearchModel):
    id: str
    title: str
    summary: str = ""
    key_points: List[str] = Field(default_factory=list)


class Decision(FrozenSearchModel):
    id: str
    content: str
    context: str = ""


class ActionItem(FrozenSearchModel):
    id: str
    content: str
    assignee: Optional[Speaker] = None
    due_date: Optional[date] = None
    priority: Priority = "medium"
    status: ActionItemStatus = "pending"


class Minutes(FrozenSearchModel):
    id: str
    meeting_id: str
    title: str
    date: date
    summary: str = ""
    topics: List[Topic] = Field(default_factory=list)
    decisions: List[Decision] = Field(default_factory=list)
    action_items: List[ActionItem] = Field(default_factory=list)
    attendees: List[Speaker] = Field(default_factory=list)
    status: MinutesStatus = "draft"


class TranscriptSegment(FrozenSearchModel):
    id: str
    start_time: int = Field(..., ge=0, description="Milliseconds from meeting start")
    end_time: int = Field(..., ge=0)
    speaker: Speaker
    text: str = ""
    confidence: float = 1.0


class Transcript(FrozenSearchModel):
    meeting_id: str
    language: str = "en"
    segments: List[TranscriptSegment] = Field(default_factory=list)
