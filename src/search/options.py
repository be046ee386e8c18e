"""Search configuration passed into builders, facets and the service"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


DEFAULT_TYPE_LABELS: Dict[str, str] = {
    "meeting": "Meeting",
    "minutes": "Minutes",
    "transcript": "Transcript",
    "action_item": "Action item",
}

FACET_DIMENSIONS = ("type", "participant", "date")


@dataclass(frozen=True)
class FieldWeights:
    """Relative importance of each field family when scoring"""
    title: float = 1.5
    summary: float = 1.2
    content: float = 1.0
    speaker: float = 0.8


@dataclass(frozen=True)
class SearchOptions:
    """
    Tunables for a search run.

    Attributes:
        context_length: Characters of context kept on each side of a match
        min_score_threshold: Merged results scoring below this are dropped
        field_weights: Per-field score multipliers
        type_labels: Display label per result type (facet labels)
        facet_dimensions: Facets computed by the service ("type", "participant", "date")
    """
    context_length: int = 50
    min_score_threshold: float = 0.1
    field_weights: FieldWeights = field(default_factory=FieldWeights)
    type_labels: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TYPE_LABELS))
    facet_dimensions: Tuple[str, ...] = ("type",)
