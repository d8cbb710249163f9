"""Utilities for deduplicating calendar events."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from mlsnext_ics.scraper.models import CalendarEvent


def dedupe_events(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    """Drop repeats of the same (start, title), keeping the first occurrence.

    Nested markup matches more than one row selector, so the same match is
    often extracted twice.
    """
    seen: set[Tuple] = set()
    unique: List[CalendarEvent] = []
    for event in events:
        key = (event.start, event.title)
        if key in seen:
            continue
        seen.add(key)
        unique.append(event)
    return unique
