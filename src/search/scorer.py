"""
Relevance scorer for a single (text, query) pair.

Tiered heuristic, first tier that applies wins:

    exact match         1.0 × w
    prefix match        0.9 × w
    substring match     min((0.5 + 0.2×position + 0.2×frequency + 0.1×length) × w, w)
    word overlap        (matching_words / query_words) × 0.4 × w
    no match            0

Where:
    w = field weight (title fields weigh more than body text)
    position  = 1 - first_index / len(text)      earlier matches score higher
    frequency = min(occurrences / 5, 1)          repeats score higher, capped
    length    = len(query) / len(text)           query covering more of the text scores higher

Matching is literal and case-insensitive with simple case folding, through
the same `re.IGNORECASE` pattern as the match locator (the query is stripped
at both ends); no stemming, no tokenization beyond whitespace splitting.
"""

import re
from typing import Optional

EXACT_SCORE = 1.0
PREFIX_SCORE = 0.9
SUBSTRING_BASE = 0.5
POSITION_WEIGHT = 0.2
FREQUENCY_WEIGHT = 0.2
LENGTH_WEIGHT = 0.1
FREQUENCY_SATURATION = 5
WORD_MATCH_SCORE = 0.4


def calculate_relevance_score(
    text: Optional[str],
    query: str,
    field_weight: float = 1.0,
) -> float:
    """
    Score how well text matches query.

    Args:
        text: Field text (None or empty scores 0)
        query: Search query
        field_weight: Multiplier for this field's importance

    Returns:
        Score in [0, field_weight]

    Examples:
        >>> calculate_relevance_score("Meeting", "meeting")
        1.0
        >>> calculate_relevance_score("Meeting about budget", "meeting")
        0.9
        >>> calculate_relevance_score("Budget review", "review budget")
        0.4
    """
    if not text or not query or not query.strip():
        return 0.0

    stripped_query = query.strip()
    # Same literal, case-insensitive pattern the match locator uses
    pattern = re.compile(re.escape(stripped_query), re.IGNORECASE)

    if pattern.fullmatch(text):
        return EXACT_SCORE * field_weight

    if pattern.match(text):
        return PREFIX_SCORE * field_weight

    found = pattern.search(text)
    if found is not None:
        occurrences = len(pattern.findall(text))
        position_factor = 1 - found.start() / len(text)
        frequency_factor = min(occurrences / FREQUENCY_SATURATION, 1.0)
        length_factor = min(len(stripped_query) / len(text), 1.0)

        composite = (
            SUBSTRING_BASE
            + POSITION_WEIGHT * position_factor
            + FREQUENCY_WEIGHT * frequency_factor
            + LENGTH_WEIGHT * length_factor
        )
        return min(composite * field_weight, field_weight)

    # Word-level fallback
    query_words = stripped_query.lower().split()
    text_words = set(text.lower().split())
    matching = [word for word in query_words if word in text_words]

    if matching:
        return (len(matching) / len(query_words)) * WORD_MATCH_SCORE * field_weight

    return 0.0
