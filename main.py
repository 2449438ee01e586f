
import logging
import queue
from concurrent.futures import ThreadPoolExecutor

import pygame

from tetris_config import CONFIG
from tetris_feed import start_feed
from tetris_game import Game
from tetris_input import decode_event
from tetris_keys import Key, KeyPress
from tetris_layout import compute_dims
from tetris_loop import GravityInterval, Session, start_ticker
from tetris_render import FRAME_READY, Window

log = logging.getLogger("tetris")

# Posted when the game loop has returned
SESSION_END = pygame.USEREVENT + 2


def setup_logging():
    logging.basicConfig(filename=CONFIG["LOG_FILE"],
                        level=getattr(logging, CONFIG["LOG_LEVEL"], logging.INFO),
                        format='%(asctime)s - %(name)s - %(message)s')


def pump(window, display, events):
    """Main-thread loop: feed key presses to the game and draw its frames.

    Returns once the game loop posts SESSION_END.
    """
    while True:
        batch = [pygame.event.wait()] + pygame.event.get()
        redraw = False
        for e in batch:
            if e.type == SESSION_END:
                return
            if e.type == FRAME_READY:
                redraw = True
                continue
            press = decode_event(e)
            if press is not None:
                events.put(press)
        if redraw:
            window.draw(display.frame())


def main():
    setup_logging()
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, FRAME_READY, SESSION_END])

    window = Window(compute_dims())
    display = window.display()

    game = Game()
    events = queue.Queue()
    interval = GravityInterval(game.duration)
    session = Session(game, display, events, interval)

    start_ticker(events, interval)
    if CONFIG["FEED_ENABLED"]:
        start_feed(events, game.duration)

    log.info("session started")
    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="game")
    future = pool.submit(session.play)
    future.add_done_callback(lambda _: pygame.event.post(pygame.event.Event(SESSION_END)))
    try:
        pump(window, display, events)
    finally:
        # unblocks the game loop if the window side stopped first
        events.put(KeyPress(Key.CTRL_C))
        pool.shutdown(wait=True)
        pygame.quit()
    outcome = future.result()

    log.info("%s: score %d, level %d", outcome, game.score, game.level)
    return outcome


if __name__ == '__main__':
    main()
