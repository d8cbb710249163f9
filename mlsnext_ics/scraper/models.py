"""Shared data models for the MLS NEXT schedule scraper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

StartTuple = Tuple[int, int, int, int, int]


@dataclass(slots=True)
class JsonPacket:
    """JSON body of an intercepted schedule-looking network response."""

    url: str
    data: Any


@dataclass(slots=True)
class CalendarEvent:
    """Normalised representation of a single match on the calendar.

    ``start`` is a local wall-clock ``(year, month, day, hour, minute)`` tuple
    with no timezone attached.
    """

    start: StartTuple
    title: str
    description: str
    status: str = "CONFIRMED"
    busy_status: str = "BUSY"
    source_url: Optional[str] = None
