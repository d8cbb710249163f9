"""Page acquisition: navigation, best-effort UI nudges and JSON response capture."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import List, Set

from playwright.async_api import Page, Response

from mlsnext_ics import config
from mlsnext_ics.scraper.models import JsonPacket

logger = logging.getLogger(__name__)

_JSON_URL_RE = re.compile(config.JSON_URL_PATTERN, re.IGNORECASE)


def is_schedule_json(url: str, content_type: str | None) -> bool:
    """Return True if a response looks like it carries schedule data."""
    if config.JSON_CONTENT_TYPE not in (content_type or "").lower():
        return False
    return bool(_JSON_URL_RE.search(url))


class ResponseCapture:
    """Collects ``JsonPacket``s from a page's response events.

    Body reads run as tasks on the page's event loop; ``drain`` waits for the
    outstanding ones so the packet list is complete before anyone reads it.
    """

    def __init__(self) -> None:
        self.packets: List[JsonPacket] = []
        self._pending: Set[asyncio.Task] = set()

    def on_response(self, response: Response) -> None:
        if not is_schedule_json(response.url, response.headers.get("content-type")):
            return
        task = asyncio.ensure_future(self._read(response))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _read(self, response: Response) -> None:
        try:
            data = await response.json()
        except Exception as exc:
            logger.debug("Ignoring unparseable JSON from %s: %s", response.url, exc)
            return
        self.packets.append(JsonPacket(url=response.url, data=data))
        logger.debug("Captured JSON packet from %s", response.url)

    async def drain(self) -> List[JsonPacket]:
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
        return self.packets


async def goto_schedule(page: Page, url: str = config.SCHEDULE_URL) -> None:
    """Navigate to the schedule page and wait for the network to settle."""
    logger.info("Loading %s", url)
    await page.goto(url, wait_until="networkidle")


async def click_age_filter(page: Page, age_group: str = config.AGE_GROUP) -> bool:
    """Try to switch on the age-group chip. Returns whether the click landed."""
    name = re.compile(re.escape(age_group), re.IGNORECASE)
    try:
        await page.get_by_role("button", name=name).click(
            timeout=config.AGE_FILTER_CLICK_TIMEOUT_MS
        )
        # Filters are often toggles; give the list a moment to refresh.
        await page.wait_for_timeout(config.AGE_FILTER_SETTLE_MS)
    except Exception as exc:
        logger.info("Age filter %r not clickable, continuing: %s", age_group, exc)
        return False
    return True


async def scroll_to_load(page: Page) -> None:
    """Fire a fixed number of large wheel scrolls to trigger lazy loading."""
    for _ in range(config.SCROLL_ITERATIONS):
        await page.mouse.wheel(0, config.SCROLL_DELTA_Y)
        await page.wait_for_timeout(config.SCROLL_PAUSE_MS)


async def load_schedule(
    page: Page,
    url: str = config.SCHEDULE_URL,
    age_group: str = config.AGE_GROUP,
) -> List[JsonPacket]:
    """Load the page fully and return the JSON packets seen along the way."""
    capture = ResponseCapture()
    page.on("response", capture.on_response)
    try:
        await goto_schedule(page, url)
        await click_age_filter(page, age_group)
        await scroll_to_load(page)
    finally:
        page.remove_listener("response", capture.on_response)
    packets = await capture.drain()
    logger.info("Captured %d schedule JSON packet(s)", len(packets))
    return packets
