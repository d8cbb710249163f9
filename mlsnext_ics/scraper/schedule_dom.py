"""DOM-based extraction of match rows from the rendered schedule page."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from playwright.async_api import ElementHandle, Page

from mlsnext_ics import config
from mlsnext_ics.filters.match_filters import (
    MatchCriteria,
    row_matches_age_group,
    row_matches_team,
)
from mlsnext_ics.scraper import parse_utils
from mlsnext_ics.scraper.models import CalendarEvent

logger = logging.getLogger(__name__)


def row_is_candidate(text: str, criteria: MatchCriteria) -> bool:
    """Apply the team and age-group text filters to a normalised row."""
    if not row_matches_team(text, criteria):
        return False
    return row_matches_age_group(text, criteria)


def event_from_row(
    text: str,
    iso: Optional[str],
    criteria: MatchCriteria,
    source_url: str = config.SCHEDULE_URL,
) -> Optional[CalendarEvent]:
    """Turn one row's text and ``datetime`` attribute into an event, or None."""
    if not iso:
        return None
    start = parse_utils.to_start_tuple(iso)
    if start is None:
        return None

    home, away = parse_utils.parse_teams(text)
    return CalendarEvent(
        start=start,
        title=parse_utils.match_title(home, away, parse_utils.title_fallback(text)),
        description=f"{criteria.description_label} - scraped from {source_url}",
        source_url=source_url,
    )


async def extract_events_from_dom(
    page: Page,
    criteria: MatchCriteria,
    source_url: str = config.SCHEDULE_URL,
) -> List[CalendarEvent]:
    """Extract events from the live page using the broad row selector."""
    rows = await page.query_selector_all(config.ROW_SEL)
    logger.info("Row selector matched %d element(s)", len(rows))

    events: List[CalendarEvent] = []
    for row in rows:
        text = parse_utils.clean_text(await row.inner_text())
        if not row_is_candidate(text, criteria):
            continue

        iso = await _row_datetime(row)
        event = event_from_row(text, iso, criteria, source_url)
        if event is None:
            logger.debug("Row without usable <time datetime>: %s", text[:80])
            continue
        events.append(event)

    return events


def extract_events_from_html(
    html: str,
    criteria: MatchCriteria,
    source_url: str = config.SCHEDULE_URL,
) -> List[CalendarEvent]:
    """Extract events from a saved HTML snapshot of the schedule page."""
    soup = BeautifulSoup(html, "lxml")
    rows = soup.select(config.ROW_SEL)
    logger.info("Row selector matched %d element(s) in snapshot", len(rows))

    events: List[CalendarEvent] = []
    for row in rows:
        text = parse_utils.clean_text(row.get_text(" ", strip=True))
        if not row_is_candidate(text, criteria):
            continue

        time_el = row.select_one(config.TIME_SEL)
        iso = time_el.get(config.TIME_ATTR) if time_el is not None else None
        event = event_from_row(text, iso, criteria, source_url)
        if event is not None:
            events.append(event)

    return events


async def _row_datetime(row: ElementHandle) -> Optional[str]:
    time_el = await row.query_selector(config.TIME_SEL)
    if time_el is None:
        return None
    return await time_el.get_attribute(config.TIME_ATTR)
