
"""Difficulty feed: a price ticker that speeds gravity up or slows it down"""
import asyncio
import logging
import queue
import threading
from typing import Optional

import aiohttp

from tetris_config import CONFIG
from tetris_loop import DurationUpdate

log = logging.getLogger(__name__)


def adjust_duration(previous: Optional[float], current: float, duration: int) -> int:
    """Derive the next gravity interval from two consecutive readings.

    A rising reading shortens the interval by one step, never below the
    floor; anything else lengthens it by one step, up to the optional cap.
    The first reading (no previous) leaves the interval alone.
    """
    if previous is None:
        return duration
    step = CONFIG["DURATION_STEP_MS"]
    if current > previous:
        # A rise never slows the game: an interval already under the floor
        # (the 200 ms start) stays where it is instead of growing by a step.
        floor = min(duration, CONFIG["DURATION_FLOOR_MS"])
        return max(duration - step, floor)
    ceiling = CONFIG["DURATION_MAX_MS"]
    if ceiling is None:
        return duration + step
    return max(duration, min(duration + step, ceiling))


class PriceSource:
    """Reads the last traded price of one symbol from a JSON ticker endpoint."""

    def __init__(self, session: aiohttp.ClientSession, url: str, symbol: str):
        self.session = session
        self.url = url
        self.symbol = symbol

    async def read(self) -> Optional[float]:
        try:
            async with self.session.get(self.url, params={"symbol": self.symbol}) as response:
                if response.status != 200:
                    log.warning("price feed returned status code %s", response.status)
                    return None
                data = await response.json(content_type=None)
            return float(data["price"])
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.warning("price feed request failed: %s", e)
        except (KeyError, TypeError, ValueError) as e:
            log.warning("price feed sent an unreadable payload: %s", e)
        return None


class DifficultyFeed:
    """Polls a source on a fixed schedule and queues DurationUpdate events."""

    def __init__(self, events: "queue.Queue", duration: int):
        self.events = events
        self.duration = duration
        self.previous: Optional[float] = None

    async def poll(self, source) -> Optional[int]:
        """Take one reading; queue and return the new interval, or None if skipped."""
        current = await source.read()
        if current is None:
            return None
        self.duration = adjust_duration(self.previous, current, self.duration)
        self.previous = current
        self.events.put(DurationUpdate(self.duration))
        return self.duration

    async def run(self) -> None:
        timeout = aiohttp.ClientTimeout(total=CONFIG["FEED_TIMEOUT_S"])
        async with aiohttp.ClientSession(timeout=timeout) as session:
            source = PriceSource(session, CONFIG["FEED_URL"], CONFIG["FEED_SYMBOL"])
            while True:
                await self.poll(source)
                await asyncio.sleep(CONFIG["FEED_INTERVAL_S"])


def start_feed(events: "queue.Queue", duration: int) -> threading.Thread:
    feed = DifficultyFeed(events, duration)
    t = threading.Thread(target=asyncio.run, args=(feed.run(),), name="difficulty", daemon=True)
    t.start()
    return t
