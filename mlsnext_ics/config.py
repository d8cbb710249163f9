"""Configuration constants and selectors for the MLS NEXT schedule scraper."""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

PRODUCT_ID = "mlsnext-ics"

# ---------------------------------------------------------------------------
# Target
# ---------------------------------------------------------------------------

SCHEDULE_URL = "https://www.mlssoccer.com/mlsnext/schedule/academy_division/"

TEAM = os.getenv("TEAM", "LA Surf Soccer Club")
AGE_GROUP = os.getenv("AGE_GROUP", "U14")
STRICT_AGE_GROUP = os.getenv("STRICT_AGE_GROUP", "").lower() in ("1", "true", "yes")

DIVISION_LABEL = "MLS NEXT Academy Division"

# Broad selectors; the site markup is not stable so these stay loose.
ROW_SEL = 'article:has(time), li:has(time), [data-testid*="match"], .match, .schedule__row'
TIME_SEL = "time"
TIME_ATTR = "datetime"

# Titles fall back to the leading slice of the row text
TITLE_FALLBACK_CHARS = 80

# ---------------------------------------------------------------------------
# Network capture
# ---------------------------------------------------------------------------

JSON_CONTENT_TYPE = "application/json"
JSON_URL_PATTERN = r"(schedule|match|fixture|game|event)"

# ---------------------------------------------------------------------------
# Page interaction
# ---------------------------------------------------------------------------

AGE_FILTER_CLICK_TIMEOUT_MS = 2_000
AGE_FILTER_SETTLE_MS = 800
SCROLL_ITERATIONS = 8
SCROLL_DELTA_Y = 30_000
SCROLL_PAUSE_MS = 800

# Default Playwright settings
PLAYWRIGHT_HEADLESS = os.getenv("PLAYWRIGHT_HEADLESS", "1").lower() not in ("0", "false", "no")
PLAYWRIGHT_VIEWPORT = {"width": 1440, "height": 900}
PLAYWRIGHT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/123.0.0.0 Safari/537.36"
)
PLAYWRIGHT_LOCALE = "en-US"
PLAYWRIGHT_DEFAULT_TIMEOUT_MS = 60_000
PLAYWRIGHT_NAVIGATION_TIMEOUT_MS = 90_000

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

OUTPUT_PATH = Path("docs") / "mlsnext.ics"
