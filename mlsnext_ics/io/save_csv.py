"""CSV output helpers for scraped matches."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from mlsnext_ics.scraper.models import CalendarEvent


def prepare_rows_for_csv(events: Iterable[CalendarEvent]) -> List[dict]:
    rows: List[dict] = []
    for event in events:
        row = asdict(event)
        row["start"] = datetime(*event.start).isoformat(timespec="minutes")
        rows.append(row)
    return rows


def save_events_csv(events: Iterable[CalendarEvent], output_path: Path) -> Path:
    """Save events to a CSV file, one row per match."""
    prepared_rows = prepare_rows_for_csv(events)
    if not prepared_rows:
        raise RuntimeError("No rows to save.")

    df = pd.DataFrame(prepared_rows)
    df.sort_values(by=["start", "title"], inplace=True, ignore_index=True)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    return output_path
