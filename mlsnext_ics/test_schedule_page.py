"""Tests for page acquisition against a scripted fake page."""

from __future__ import annotations

import asyncio

from mlsnext_ics import config
from mlsnext_ics.scraper import schedule_page


class FakeResponse:
    def __init__(self, url, content_type="application/json", data=None, broken=False):
        self.url = url
        self.headers = {"content-type": content_type} if content_type else {}
        self._data = data
        self._broken = broken

    async def json(self):
        await asyncio.sleep(0)
        if self._broken:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._data


class FakeMouse:
    def __init__(self):
        self.wheels = []

    async def wheel(self, delta_x, delta_y):
        self.wheels.append((delta_x, delta_y))


class FakeButton:
    def __init__(self, page):
        self.page = page

    async def click(self, timeout=None):
        self.page.click_timeouts.append(timeout)
        if not self.page.button_present:
            raise TimeoutError(f"Timeout {timeout}ms exceeded.")


class FakePage:
    def __init__(self, responses, button_present=False):
        self.responses = responses
        self.button_present = button_present
        self.listeners = {}
        self.mouse = FakeMouse()
        self.pauses = []
        self.click_timeouts = []
        self.visited = []

    def on(self, event, handler):
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event, handler):
        self.listeners[event].remove(handler)

    async def goto(self, url, wait_until=None):
        self.visited.append((url, wait_until))
        for response in self.responses:
            for handler in list(self.listeners.get("response", [])):
                handler(response)

    def get_by_role(self, role, name=None):
        assert role == "button"
        assert name.search("u14")
        return FakeButton(self)

    async def wait_for_timeout(self, ms):
        self.pauses.append(ms)


def test_is_schedule_json_requires_content_type_and_keyword():
    assert schedule_page.is_schedule_json("https://x/api/Fixtures", "Application/JSON; charset=utf-8")
    assert not schedule_page.is_schedule_json("https://x/api/fixtures", "text/html")
    assert not schedule_page.is_schedule_json("https://x/api/standings", "application/json")
    assert not schedule_page.is_schedule_json("https://x/api/games", None)


def test_load_schedule_captures_only_schedule_json():
    responses = [
        FakeResponse("https://api.example.com/schedule", data=[{"home": "A"}]),
        FakeResponse("https://api.example.com/matches", broken=True),
        FakeResponse("https://api.example.com/config", data={"theme": "dark"}),
        FakeResponse("https://cdn.example.com/events.js", content_type="application/javascript"),
    ]
    page = FakePage(responses)

    packets = asyncio.run(schedule_page.load_schedule(page, "https://example.com/s", "U14"))

    assert [packet.url for packet in packets] == ["https://api.example.com/schedule"]
    assert packets[0].data == [{"home": "A"}]
    assert page.visited == [("https://example.com/s", "networkidle")]
    assert page.listeners["response"] == []


def test_missing_age_filter_is_not_fatal_and_scroll_always_runs():
    page = FakePage([], button_present=False)

    packets = asyncio.run(schedule_page.load_schedule(page))

    assert packets == []
    assert page.click_timeouts == [config.AGE_FILTER_CLICK_TIMEOUT_MS]
    assert page.mouse.wheels == [(0, config.SCROLL_DELTA_Y)] * config.SCROLL_ITERATIONS
    assert page.pauses == [config.SCROLL_PAUSE_MS] * config.SCROLL_ITERATIONS


def test_clicked_age_filter_gets_a_settle_pause():
    page = FakePage([], button_present=True)
    assert asyncio.run(schedule_page.click_age_filter(page, "U14")) is True
    assert page.pauses == [config.AGE_FILTER_SETTLE_MS]
