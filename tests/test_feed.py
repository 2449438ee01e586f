"""Tests for the difficulty feed"""
import asyncio
import queue

import aiohttp
import pytest

from tetris_config import CONFIG
from tetris_feed import DifficultyFeed, PriceSource, adjust_duration
from tetris_loop import DurationUpdate


class ScriptedSource:
    def __init__(self, readings):
        self.readings = list(readings)

    async def read(self):
        return self.readings.pop(0)


class FakeResponse:
    def __init__(self, status, payload):
        self.status = status
        self.payload = payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def json(self, content_type="application/json"):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if self.error:
            raise self.error
        return self.response


def read(session):
    return asyncio.run(PriceSource(session, "http://ticker", "BTCUSDT").read())


def test_first_reading_keeps_duration():
    assert adjust_duration(None, 10.0, 200) == 200


def test_rising_reading_speeds_up_to_floor():
    assert adjust_duration(1.0, 2.0, 1700) == 1200
    assert adjust_duration(1.0, 2.0, 700) == 500
    assert adjust_duration(1.0, 2.0, 500) == 500


def test_rising_reading_below_floor_keeps_duration():
    assert adjust_duration(1.0, 2.0, 200) == 200


def test_flat_or_falling_reading_slows_down():
    assert adjust_duration(2.0, 1.0, 200) == 700
    assert adjust_duration(2.0, 2.0, 700) == 1200


def test_ceiling(monkeypatch):
    monkeypatch.setitem(CONFIG, "DURATION_MAX_MS", 1000)
    assert adjust_duration(2.0, 1.0, 700) == 1000
    assert adjust_duration(2.0, 1.0, 1000) == 1000
    assert adjust_duration(2.0, 1.0, 1200) == 1200


def test_poll_emits_duration_updates_and_skips_failures():
    events = queue.Queue()
    feed = DifficultyFeed(events, 1500)
    source = ScriptedSource([100.0, None, 101.0, 99.0])

    results = [asyncio.run(feed.poll(source)) for _ in range(4)]

    assert results == [1500, None, 1000, 1500]
    assert feed.previous == 99.0
    emitted = []
    while not events.empty():
        emitted.append(events.get_nowait())
    assert emitted == [DurationUpdate(1500), DurationUpdate(1000), DurationUpdate(1500)]


def test_price_source_reads_price():
    session = FakeSession(FakeResponse(200, {"symbol": "BTCUSDT", "price": "64000.50"}))
    assert read(session) == pytest.approx(64000.5)
    assert session.calls == [("http://ticker", {"symbol": "BTCUSDT"})]


@pytest.mark.parametrize("session", [
    FakeSession(FakeResponse(503, {"price": "1"})),
    FakeSession(FakeResponse(200, {"msg": "Invalid symbol."})),
    FakeSession(FakeResponse(200, {"price": "n/a"})),
    FakeSession(FakeResponse(200, ["price"])),
    FakeSession(FakeResponse(200, ValueError("not json"))),
    FakeSession(error=aiohttp.ClientConnectionError("refused")),
    FakeSession(error=asyncio.TimeoutError()),
])
def test_price_source_failures_return_none(session):
    assert read(session) is None
