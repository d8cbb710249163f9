"""Headless Chromium session for loading the schedule page."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import Browser, Page, async_playwright

from mlsnext_ics import config


@asynccontextmanager
async def with_browser(headless: Optional[bool] = None) -> AsyncIterator[Browser]:
    async with async_playwright() as p:
        browser = await p.chromium.launch(
            headless=config.PLAYWRIGHT_HEADLESS if headless is None else headless
        )
        try:
            yield browser
        finally:
            await browser.close()


@asynccontextmanager
async def open_page(browser: Browser) -> AsyncIterator[Page]:
    """Yield a fresh page in its own context, closing both afterwards.

    The context keeps the runtime's local timezone so rendered times and
    parsed ``datetime`` attributes agree.
    """
    context = await browser.new_context(
        user_agent=config.PLAYWRIGHT_USER_AGENT,
        locale=config.PLAYWRIGHT_LOCALE,
        viewport=config.PLAYWRIGHT_VIEWPORT,
    )
    context.set_default_timeout(config.PLAYWRIGHT_DEFAULT_TIMEOUT_MS)
    context.set_default_navigation_timeout(config.PLAYWRIGHT_NAVIGATION_TIMEOUT_MS)
    try:
        yield await context.new_page()
    finally:
        await context.close()
