"""Parsing helpers for MLS NEXT schedule rows and records."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Optional, Tuple

from dateutil import parser as date_parser
from dateutil import tz

from mlsnext_ics import config
from mlsnext_ics.scraper.models import StartTuple

logger = logging.getLogger(__name__)

_VS_PATTERN = re.compile(r"(.+?)\s+vs\.?\s+(.+?)(?:\s|$)", re.IGNORECASE)
_AT_PATTERN = re.compile(r"(.+?)\s+@\s+(.+?)(?:\s|$)")
# Date-only ISO forms denote UTC midnight
_DATE_ONLY = re.compile(r"^\d{4}(?:-\d{2}(?:-\d{2})?)?$")


def clean_text(value: Optional[str]) -> str:
    """Collapse internal whitespace to single spaces and strip."""
    if not value:
        return ""
    return " ".join(value.split())


def parse_teams(text: str) -> Tuple[str, str]:
    """Return ``(home, away)`` parsed from free text.

    ``"A vs B"`` reads as A at home; ``"A @ B"`` reads as A travelling to B.
    Both are empty when neither form is present.
    """
    match = _VS_PATTERN.search(text)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    match = _AT_PATTERN.search(text)
    if match:
        return match.group(2).strip(), match.group(1).strip()
    return "", ""


def match_title(home: str, away: str, fallback: str) -> str:
    if home and away:
        return f"{home} vs {away}"
    return fallback


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO string or epoch-milliseconds number into a local naive datetime.

    Date-times without an offset are already local; date-only values are UTC
    midnight. Anything that is not ISO-8601 is rejected.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None

    text = clean_text(str(value))
    if not text:
        return None
    try:
        parsed = date_parser.isoparse(text)
    except (ValueError, OverflowError):
        return None

    if _DATE_ONLY.match(text):
        parsed = parsed.replace(tzinfo=tz.UTC)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz.tzlocal()).replace(tzinfo=None)
    return parsed


def to_start_tuple(value: Any) -> Optional[StartTuple]:
    """Return the local ``(year, month, day, hour, minute)`` for a timestamp."""
    parsed = parse_timestamp(value)
    if parsed is None:
        logger.warning("Unparseable timestamp %r; skipping", value)
        return None
    return (parsed.year, parsed.month, parsed.day, parsed.hour, parsed.minute)


def title_fallback(text: str) -> str:
    return text[: config.TITLE_FALLBACK_CHARS]
