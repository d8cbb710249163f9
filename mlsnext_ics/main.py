"""CLI orchestrator for the MLS NEXT schedule to iCalendar scraper."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

from mlsnext_ics import config
from mlsnext_ics.errors import CalendarSerializationError, NoEventsFoundError
from mlsnext_ics.filters.match_filters import MatchCriteria
from mlsnext_ics.io import dedupe, save_csv, save_ics
from mlsnext_ics.scraper import (
    playwright_driver,
    schedule_dom,
    schedule_json,
    schedule_page,
)
from mlsnext_ics.scraper.models import CalendarEvent, JsonPacket

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SERIALIZATION_ERROR = 1
EXIT_NO_EVENTS = 2


def select_events(
    dom_events: List[CalendarEvent],
    packets: Sequence[JsonPacket],
    criteria: MatchCriteria,
) -> List[CalendarEvent]:
    """Prefer DOM events; mine the JSON packets only when the DOM gave nothing."""
    if dom_events:
        logger.info("DOM path produced %d event(s)", len(dom_events))
        return dom_events
    if not packets:
        return []
    logger.info("DOM path empty, falling back to %d JSON packet(s)", len(packets))
    return schedule_json.extract_events_from_packets(packets, criteria)


def finalize_events(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    unique = dedupe.dedupe_events(events)
    return sorted(unique, key=lambda event: event.start)


async def run_browser_mode(url: str, criteria: MatchCriteria) -> List[CalendarEvent]:
    async with playwright_driver.with_browser() as browser:
        async with playwright_driver.open_page(browser) as page:
            packets = await schedule_page.load_schedule(page, url, criteria.age_group)
            dom_events = await schedule_dom.extract_events_from_dom(page, criteria, url)
    return select_events(dom_events, packets, criteria)


def run_snapshot_mode(html_path: Path, url: str, criteria: MatchCriteria) -> List[CalendarEvent]:
    html = html_path.read_text(encoding="utf-8")
    return schedule_dom.extract_events_from_html(html, criteria, url)


def no_events_message(criteria: MatchCriteria) -> str:
    team = " ".join(criteria.team.split()[:2])
    return (
        f"No {team} {criteria.age_group} Academy Division events found "
        "(try adjusting selectors or wait for fixtures)."
    )


def write_outputs(
    events: List[CalendarEvent],
    criteria: MatchCriteria,
    output_path: Path,
    csv_path: Path | None = None,
) -> None:
    if not events:
        raise NoEventsFoundError("No events to write.")
    save_ics.save_calendar_ics(events, criteria, output_path)
    print(f"Wrote {output_path.as_posix()} with {len(events)} events.")
    if csv_path is not None:
        save_csv.save_events_csv(events, csv_path)
        print(f"Saved {len(events)} rows to {csv_path}")


async def main_async(args: argparse.Namespace) -> int:
    criteria = MatchCriteria(
        team=config.TEAM,
        age_group=config.AGE_GROUP,
        strict_age_group=args.strict_age_group or config.STRICT_AGE_GROUP,
    )

    if args.html:
        raw_events = run_snapshot_mode(args.html, args.url, criteria)
    else:
        raw_events = await run_browser_mode(args.url, criteria)
    events = finalize_events(raw_events)

    try:
        write_outputs(events, criteria, args.output, args.csv)
    except NoEventsFoundError:
        print(no_events_message(criteria), file=sys.stderr)
        return EXIT_NO_EVENTS
    except CalendarSerializationError as exc:
        print(exc, file=sys.stderr)
        return EXIT_SERIALIZATION_ERROR
    return EXIT_OK


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--url",
        default=config.SCHEDULE_URL,
        help="Schedule page to scrape.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=config.OUTPUT_PATH,
        help="Where to write the .ics file.",
    )
    parser.add_argument(
        "--html",
        type=Path,
        help="Parse a saved HTML snapshot instead of launching a browser.",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        help="Also save the events as CSV.",
    )
    parser.add_argument(
        "--strict-age-group",
        action="store_true",
        help="Drop rows whose text lacks the age-group token.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return asyncio.run(main_async(args))


if __name__ == "__main__":
    sys.exit(main())
