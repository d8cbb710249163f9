"""Exceptions raised by the scraper pipeline."""

from __future__ import annotations


class NoEventsFoundError(Exception):
    """Raised when neither the DOM nor the JSON path produced an event."""


class CalendarSerializationError(Exception):
    """Raised when events cannot be rendered as an iCalendar document."""
