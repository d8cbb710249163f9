"""iCalendar output for scraped matches."""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

from icalendar import Calendar, Event

from mlsnext_ics import config
from mlsnext_ics.errors import CalendarSerializationError
from mlsnext_ics.filters.match_filters import MatchCriteria
from mlsnext_ics.scraper.models import CalendarEvent

logger = logging.getLogger(__name__)


def event_uid(event: CalendarEvent) -> str:
    """Stable UID so re-runs update events instead of duplicating them."""
    start = "-".join(str(part) for part in event.start)
    digest = hashlib.md5(f"{start}-{event.title}".encode()).hexdigest()
    return f"{digest}@{config.PRODUCT_ID}"


def build_calendar(
    events: Iterable[CalendarEvent],
    criteria: MatchCriteria,
) -> bytes:
    """Render events as an iCalendar document.

    Start times are written as floating (zone-less) local times.
    """
    cal = Calendar()
    cal.add("prodid", f"-//{config.PRODUCT_ID}//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", criteria.calendar_name)

    stamp = datetime.now(timezone.utc)
    for event in events:
        try:
            start = datetime(*event.start)
        except (TypeError, ValueError) as exc:
            raise CalendarSerializationError(
                f"Invalid start {event.start!r} for {event.title!r}: {exc}"
            ) from exc

        vevent = Event()
        vevent.add("uid", event_uid(event))
        vevent.add("dtstamp", stamp)
        vevent.add("dtstart", start)
        vevent.add("summary", event.title)
        vevent.add("description", event.description)
        vevent.add("status", event.status)
        vevent.add("transp", "OPAQUE" if event.busy_status == "BUSY" else "TRANSPARENT")
        vevent.add("x-microsoft-cdo-busystatus", event.busy_status)
        cal.add_component(vevent)

    try:
        return cal.to_ical()
    except (TypeError, ValueError) as exc:
        raise CalendarSerializationError(f"Could not serialise calendar: {exc}") from exc


def save_calendar_ics(
    events: List[CalendarEvent],
    criteria: MatchCriteria,
    output_path: Path = config.OUTPUT_PATH,
) -> Path:
    """Serialise and write events, overwriting any existing file.

    Nothing is written when serialisation fails.
    """
    payload = build_calendar(events, criteria)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(payload)
    logger.info("Wrote %d bytes to %s", len(payload), output_path)
    return output_path
