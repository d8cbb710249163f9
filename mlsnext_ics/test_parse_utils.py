"""Tests for row text parsing and timestamp normalisation."""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil import tz

from mlsnext_ics.scraper import parse_utils


def test_clean_text_collapses_whitespace():
    assert parse_utils.clean_text("  LA Surf\n\tSoccer   Club  ") == "LA Surf Soccer Club"
    assert parse_utils.clean_text(None) == ""


def test_parse_teams_vs_reads_home_then_away():
    assert parse_utils.parse_teams("Alpha vs Beta") == ("Alpha", "Beta")
    assert parse_utils.parse_teams("Alpha VS. Beta") == ("Alpha", "Beta")
    # the away side ends at the next whitespace
    assert parse_utils.parse_teams("LA Surf Soccer Club vs Tigers FC") == (
        "LA Surf Soccer Club",
        "Tigers",
    )


def test_parse_teams_stops_away_before_trailing_row_text():
    assert parse_utils.parse_teams("Alpha vs Beta Field 3") == ("Alpha", "Beta")
    assert parse_utils.parse_teams("Alpha @ Beta Sun, Mar 10, 3:30 PM") == ("Beta", "Alpha")


def test_parse_teams_at_reads_away_then_home():
    assert parse_utils.parse_teams("Alpha @ Beta") == ("Beta", "Alpha")


def test_parse_teams_prefers_vs_over_at():
    assert parse_utils.parse_teams("Alpha vs Beta @ Field 3") == ("Alpha", "Beta")


def test_parse_teams_without_separator_is_empty():
    assert parse_utils.parse_teams("LA Surf Soccer Club Saturday 10:00") == ("", "")
    # "vs" inside a word is not a separator
    assert parse_utils.parse_teams("Devs United FC") == ("", "")


def test_match_title_falls_back_when_a_side_is_missing():
    assert parse_utils.match_title("A", "B", "raw") == "A vs B"
    assert parse_utils.match_title("A", "", "raw") == "raw"


def test_title_fallback_truncates_to_80_chars():
    text = "x" * 120
    assert parse_utils.title_fallback(text) == "x" * 80


def test_naive_iso_is_taken_as_local_wall_clock():
    assert parse_utils.to_start_tuple("2024-03-10T15:30:00") == (2024, 3, 10, 15, 30)


def test_aware_iso_is_converted_to_local_zone():
    expected = datetime(2024, 4, 1, 9, 0, tzinfo=timezone.utc).astimezone(tz.tzlocal())
    assert parse_utils.to_start_tuple("2024-04-01T09:00:00Z") == (
        expected.year,
        expected.month,
        expected.day,
        expected.hour,
        expected.minute,
    )


def test_numbers_are_epoch_milliseconds():
    millis = 1_710_084_600_000
    expected = datetime.fromtimestamp(millis / 1000)
    assert parse_utils.to_start_tuple(millis) == (
        expected.year,
        expected.month,
        expected.day,
        expected.hour,
        expected.minute,
    )


def test_unparseable_timestamps_yield_none():
    assert parse_utils.to_start_tuple("not a date") is None
    assert parse_utils.to_start_tuple("") is None
    assert parse_utils.to_start_tuple(None) is None
    assert parse_utils.to_start_tuple(True) is None


def test_date_only_is_utc_midnight_in_local_time():
    expected = datetime(2024, 4, 1, tzinfo=timezone.utc).astimezone(tz.tzlocal())
    assert parse_utils.to_start_tuple("2024-04-01") == (
        expected.year,
        expected.month,
        expected.day,
        expected.hour,
        expected.minute,
    )


def test_partial_date_text_is_rejected():
    assert parse_utils.to_start_tuple("Sat 3pm") is None
    assert parse_utils.to_start_tuple("March 10, 3:30 PM") is None
