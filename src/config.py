"""
Configuration from environment variables.

.env.local (local dev) takes priority over .env; anything already in the
process environment is overridden by those files, matching how the
service is run locally.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from src.search.options import DEFAULT_TYPE_LABELS, FACET_DIMENSIONS, FieldWeights, SearchOptions

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local or .env from the project root.

    Returns:
        Path of the file that was loaded, or None if neither exists
    """
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            logger.info(f"Loading environment from: {candidate}")
            load_dotenv(candidate, override=True)
            return candidate

    logger.warning("No .env.local or .env file found - using system environment variables only")
    return None


def _get_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got: {value}")
    return value


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got: {value}")
    return value


def parse_facet_dimensions(value: Optional[str]) -> Tuple[str, ...]:
    """
    Parse a comma-separated list of facet dimensions ("type,participant").

    Blank input gives the default ("type",).

    Raises:
        ValueError: If a dimension is not one of FACET_DIMENSIONS
    """
    dimensions = tuple(d.strip().lower() for d in (value or "").split(",") if d.strip())
    for dimension in dimensions:
        if dimension not in FACET_DIMENSIONS:
            raise ValueError(
                f"Unknown facet dimension: {dimension}. "
                f"Valid options: {', '.join(FACET_DIMENSIONS)}"
            )
    return dimensions or ("type",)


def load_search_options() -> SearchOptions:
    """
    Build SearchOptions from environment variables.

    Config (env vars):
        SEARCH_CONTEXT_LENGTH: Context chars on each side of a match (default: 50)
        SEARCH_MIN_SCORE_THRESHOLD: Drop results scoring below this (default: 0.1)
        SEARCH_WEIGHT_TITLE / SEARCH_WEIGHT_SUMMARY /
        SEARCH_WEIGHT_CONTENT / SEARCH_WEIGHT_SPEAKER: Field weights
            (defaults: 1.5 / 1.2 / 1.0 / 0.8)
        SEARCH_FACETS: Comma-separated facet dimensions (default: "type")
            Valid: type, participant, date

    Raises:
        ValueError: If a variable holds an invalid value
    """
    defaults = FieldWeights()
    weights = FieldWeights(
        title=_get_float("SEARCH_WEIGHT_TITLE", defaults.title),
        summary=_get_float("SEARCH_WEIGHT_SUMMARY", defaults.summary),
        content=_get_float("SEARCH_WEIGHT_CONTENT", defaults.content),
        speaker=_get_float("SEARCH_WEIGHT_SPEAKER", defaults.speaker),
    )

    try:
        facet_dimensions = parse_facet_dimensions(os.getenv("SEARCH_FACETS"))
    except ValueError as e:
        raise ValueError(f"SEARCH_FACETS: {e}")

    options = SearchOptions(
        context_length=_get_int("SEARCH_CONTEXT_LENGTH", 50),
        min_score_threshold=_get_float("SEARCH_MIN_SCORE_THRESHOLD", 0.1),
        field_weights=weights,
        type_labels=dict(DEFAULT_TYPE_LABELS),
        facet_dimensions=facet_dimensions,
    )
    logger.debug(f"Search options: {options}")
    return options
