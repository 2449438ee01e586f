
"""Event loop: producers put events on one queue, one consumer drives the game"""
import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Union

from tetris_game import Game
from tetris_keys import Key, KeyPress
from tetris_render import Display, render_game

log = logging.getLogger(__name__)

QUIT = "quit"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class DurationUpdate:
    duration: int  # ms


GameUpdate = Union[Tick, KeyPress, DurationUpdate]


class GravityInterval:
    """Gravity interval in ms, written by the consumer and read by the ticker."""

    def __init__(self, ms: int):
        self._lock = threading.Lock()
        self._ms = ms

    def get(self) -> int:
        with self._lock:
            return self._ms

    def set(self, ms: int) -> None:
        with self._lock:
            self._ms = ms


def run_ticker(events: "queue.Queue[GameUpdate]", interval: GravityInterval) -> None:
    while True:
        time.sleep(interval.get() / 1000.0)
        events.put(Tick())


def start_ticker(events: "queue.Queue[GameUpdate]", interval: GravityInterval) -> threading.Thread:
    t = threading.Thread(target=run_ticker, args=(events, interval), name="gravity", daemon=True)
    t.start()
    return t


def is_quit(press: KeyPress) -> bool:
    return press.key is Key.CTRL_C or (press.key is Key.CHAR and press.char == "z")


class Session:
    """
    The consumer side of the event queue.

    play() is the only code that touches the Game once the session is
    running. Between two events it repaints the display; each event is
    applied exactly once, in the order the producers queued them.
    """

    def __init__(self, game: Game, display: Display,
                 events: "queue.Queue[GameUpdate]", interval: GravityInterval):
        self.game = game
        self.display = display
        self.events = events
        self.interval = interval

    def redraw(self) -> None:
        self.display.clear()
        render_game(self.game, self.display)
        self.display.present()

    def dispatch(self, update: GameUpdate) -> bool:
        """Apply one event. Returns False when the game has ended."""
        if isinstance(update, KeyPress):
            return self.game.keypress(update)
        if isinstance(update, Tick):
            return self.game.advance_game()
        if isinstance(update, DurationUpdate):
            self.interval.set(update.duration)
            self.game.duration = update.duration
            log.info("gravity interval now %d ms", update.duration)
            return True
        raise TypeError(f"unknown game update: {update!r}")

    def play(self) -> str:
        """Run until the player quits or loses; return QUIT or GAME_OVER."""
        if self.game.over:
            return GAME_OVER
        while True:
            self.redraw()
            update = self.events.get()
            if isinstance(update, KeyPress) and is_quit(update):
                log.info("session quit, score %d", self.game.score)
                return QUIT
            if not self.dispatch(update):
                self.redraw()
                log.info("session over, score %d level %d", self.game.score, self.game.level)
                return GAME_OVER
