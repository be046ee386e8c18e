"""
Text match locator for result highlighting.

Finds every case-insensitive occurrence of the query inside a field and
cuts a bounded window of context around it:

    "...is a test " + "meeting" + " about project..."

The query is matched literally (regex metacharacters are escaped), matches
never overlap, and the matched text keeps the casing of the source field.
"""

import re
from typing import List, Optional

from .models import MatchContext

ELLIPSIS = "..."


def create_search_contexts(
    text: Optional[str],
    query: str,
    context_length: int = 50,
    field: str = "",
) -> List[MatchContext]:
    """
    Build match contexts for every occurrence of query in text.

    Args:
        text: Field text to scan (None or empty yields no contexts)
        query: Search query; surrounding whitespace is ignored
        context_length: Characters kept on each side of a match
        field: Name of the field, copied into each context

    Returns:
        Contexts in order of occurrence

    Example:
        >>> ctx = create_search_contexts(
        ...     "This is a test meeting about project updates", "meeting", 10, "title")
        >>> ctx[0].before, ctx[0].match, ctx[0].after
        ('...is a test ', 'meeting', ' about pro...')
    """
    if not text or not query or not query.strip():
        return []

    context_length = max(context_length, 0)
    pattern = re.compile(re.escape(query.strip()), re.IGNORECASE)
    contexts: List[MatchContext] = []

    for found in pattern.finditer(text):
        start, end = found.span()
        before_start = max(0, start - context_length)
        after_end = min(len(text), end + context_length)

        before = text[before_start:start]
        if before_start > 0:
            before = ELLIPSIS + before

        after = text[end:after_end]
        if after_end < len(text):
            after = after + ELLIPSIS

        contexts.append(MatchContext(before=before, match=found.group(0), after=after, field=field))

    return contexts
