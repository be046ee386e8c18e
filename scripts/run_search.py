#!/usr/bin/env python3
"""
Run a search against a JSON export of meeting records and print the response.

Usage:
    python scripts/run_search.py records.json "budget review"
    python scripts/run_search.py records.json "budget" --targets meetings,minutes --limit 5
    python scripts/run_search.py records.json "budget" --sort-by date --facets type,participant,date
    python scripts/run_search.py records.json "budget" --date-from 2025-01-01T00:00:00Z \\
        --participants '[{"id": "u-bob", "name": "Bob Sato"}]' --priority high

Search options (weights, threshold, context length) come from .env.local / .env,
see src/config.py.
"""

import argparse
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Allow running from a checkout without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.config import load_environment, load_search_options, parse_facet_dimensions
from src.logging_config import setup_logging
from src.search import SearchOptions, SearchServiceError, create_search_service, validate_search_query
from src.search.loader import load_data_sources


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search meeting records from a JSON export")
    parser.add_argument("records", help="JSON file with meetings, minutes and transcripts")
    parser.add_argument("query", help="Search text (1-500 chars)")
    parser.add_argument("--targets", default="all",
                        help="Comma-separated: meetings, minutes, transcripts, action_items, all")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--limit", type=int, default=20)
    parser.add_argument("--sort-by", choices=["relevance", "date"], default="relevance")
    parser.add_argument("--sort-order", choices=["asc", "desc"], default="desc")
    parser.add_argument("--facets", default=None,
                        help="Comma-separated facet dimensions (overrides SEARCH_FACETS)")

    filters = parser.add_argument_group("filters")
    filters.add_argument("--date-from", help="ISO datetime, inclusive lower bound")
    filters.add_argument("--date-to", help="ISO datetime, inclusive upper bound")
    filters.add_argument("--participants",
                         help='JSON array of participants, e.g. \'[{"id": "u-bob", "name": "Bob Sato"}]\'')
    filters.add_argument("--tags", help="Comma-separated tags; meetings must carry all of them")
    filters.add_argument("--meeting-status", help="scheduled, in_progress, ended or cancelled")
    filters.add_argument("--minutes-status", help="not_created, draft, pending_approval or approved")
    filters.add_argument("--action-item-status", help="pending, in_progress or completed")
    filters.add_argument("--priority", help="high, medium or low")
    return parser


def build_query_payload(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Turn parsed arguments into the camelCase payload accepted by validate_search_query.

    Raises:
        ValueError: If --participants is not valid JSON
    """
    payload: Dict[str, Any] = {
        "query": args.query,
        "targets": [t.strip() for t in args.targets.split(",") if t.strip()],
        "page": args.page,
        "limit": args.limit,
        "sortBy": args.sort_by,
        "sortOrder": args.sort_order,
    }

    filters: Dict[str, Any] = {}
    if args.date_from is not None or args.date_to is not None:
        filters["dateRange"] = {"from": args.date_from, "to": args.date_to}
    if args.participants is not None:
        try:
            filters["participants"] = json.loads(args.participants)
        except json.JSONDecodeError as e:
            raise ValueError(f"--participants must be a JSON array: {e}")
    if args.tags is not None:
        filters["tags"] = [t.strip() for t in args.tags.split(",") if t.strip()]
    if args.meeting_status is not None:
        filters["meetingStatus"] = args.meeting_status
    if args.minutes_status is not None:
        filters["minutesStatus"] = args.minutes_status
    if args.action_item_status is not None:
        filters["actionItemStatus"] = args.action_item_status
    if args.priority is not None:
        filters["priority"] = args.priority

    if filters:
        payload["filters"] = filters
    return payload


def apply_facet_override(options: SearchOptions, facets: Optional[str]) -> SearchOptions:
    """Replace the configured facet dimensions with the --facets value, if given"""
    if not facets:
        return options
    return dataclasses.replace(options, facet_dimensions=parse_facet_dimensions(facets))


def main() -> int:
    """Main entry point."""
    args = build_parser().parse_args()

    load_environment(project_root)
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    setup_logging(
        log_file=str(project_root / "logs" / "meeting-search.log"),
        console_level=getattr(logging, log_level, logging.INFO),
        stream=sys.stderr,  # stdout carries the JSON response
    )

    try:
        options = apply_facet_override(load_search_options(), args.facets)
        query = validate_search_query(build_query_payload(args))
        data_sources = load_data_sources(args.records)
    except (ValueError, OSError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        response = create_search_service(data_sources, options).search(query)
    except SearchServiceError as e:
        print(f"ERROR: {e.message} ({e.code}): {e.details}", file=sys.stderr)
        return 1

    print(json.dumps(response.model_dump(by_alias=True, mode="json"), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
