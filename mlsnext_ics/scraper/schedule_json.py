"""Fallback extraction from JSON bodies captured while the page loaded.

Schedule APIs behind the page do not agree on a record shape, so each record
is searched for a handful of known field names.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from mlsnext_ics.filters.match_filters import MatchCriteria, record_matches_team
from mlsnext_ics.scraper import parse_utils
from mlsnext_ics.scraper.models import CalendarEvent, JsonPacket

logger = logging.getLogger(__name__)

TIMESTAMP_KEYS = ("startTime", "kickoff", "date", "datetime", "start")
LIST_KEYS = ("data", "items")


def packet_records(data: Any) -> List[Any]:
    """Return the list of candidate records carried by a JSON body."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in LIST_KEYS:
            value = data.get(key)
            if isinstance(value, list):
                return value
            if value:
                return []
    return []


def team_name(record: dict, side: str) -> str:
    """Resolve ``homeTeam.name`` / ``home.name`` / ``home`` (or the away variants)."""
    nested = record.get(f"{side}Team")
    if isinstance(nested, dict) and nested.get("name"):
        return str(nested["name"])

    value = record.get(side)
    if isinstance(value, dict):
        if value.get("name"):
            return str(value["name"])
        return ""
    if value:
        return str(value)
    return ""


def record_timestamp(record: dict) -> Optional[Any]:
    for key in TIMESTAMP_KEYS:
        value = record.get(key)
        if value:
            return value
    return None


def event_from_record(
    record: Any,
    criteria: MatchCriteria,
    source_url: str,
) -> Optional[CalendarEvent]:
    if not isinstance(record, dict):
        return None

    home = team_name(record, "home")
    away = team_name(record, "away")
    if not record_matches_team(home, away, criteria):
        return None

    when = record_timestamp(record)
    if not when:
        return None
    start = parse_utils.to_start_tuple(when)
    if start is None:
        return None

    fallback = str(record.get("title") or "Match")
    return CalendarEvent(
        start=start,
        title=parse_utils.match_title(home, away, fallback),
        description=f"{criteria.description_label} - {source_url}",
        source_url=source_url,
    )


def extract_events_from_packets(
    packets: Iterable[JsonPacket],
    criteria: MatchCriteria,
) -> List[CalendarEvent]:
    """Mine captured JSON packets for matches involving the configured team."""
    events: List[CalendarEvent] = []
    for packet in packets:
        records = packet_records(packet.data)
        found = 0
        for record in records:
            event = event_from_record(record, criteria, packet.url)
            if event is not None:
                events.append(event)
                found += 1
        logger.debug("%s: %d record(s), %d event(s)", packet.url, len(records), found)
    return events
