"""Load candidate records from a JSON export (used by scripts and fixtures)"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import TypeAdapter

from .records import Meeting, Minutes, Transcript
from .service import SearchDataSources

logger = logging.getLogger(__name__)

_meetings = TypeAdapter(List[Meeting])
_minutes = TypeAdapter(List[Minutes])
_transcripts = TypeAdapter(List[Transcript])


def parse_data_sources(payload: Dict[str, Any]) -> SearchDataSources:
    """
    Validate a {"meetings": [...], "minutes": [...], "transcripts": [...]} payload.

    Missing keys are treated as empty lists. Keys inside records may be
    camelCase (export format) or snake_case.

    Raises:
        pydantic.ValidationError: If a record is malformed
    """
    sources = SearchDataSources(
        meetings=tuple(_meetings.validate_python(payload.get("meetings") or [])),
        minutes=tuple(_minutes.validate_python(payload.get("minutes") or [])),
        transcripts=tuple(_transcripts.validate_python(payload.get("transcripts") or [])),
    )
    logger.info(
        f"Loaded {len(sources.meetings)} meetings, {len(sources.minutes)} minutes, "
        f"{len(sources.transcripts)} transcripts"
    )
    return sources


def load_data_sources(path: Union[str, Path]) -> SearchDataSources:
    """
    Read candidate records from a JSON file.

    Raises:
        ValueError: If the file does not hold a JSON object
    """
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(payload).__name__}")
    return parse_data_sources(payload)
