
"""Game state: piece lifecycle, scoring, levels"""
import logging
from typing import Optional

from tetris_board import Board
from tetris_config import CONFIG, board_size
from tetris_keys import Key, KeyPress
from tetris_piece import Direction, Piece, Point
from tetris_rng import PieceBag

log = logging.getLogger(__name__)

LINES_PER_LEVEL = 10


class Game:
    """
    One play session: the board, the bag, the falling piece and the score.

    Every transition returns a bool. Movement returns whether the piece
    moved; advance_game/drop_piece return False once the next piece
    cannot be spawned, which is the only way the game ends. After that
    the game is over and all transitions are no-ops.
    """

    def __init__(self, board: Optional[Board] = None, bag: Optional[PieceBag] = None):
        if board is None:
            board = Board(*board_size())
        if bag is None:
            bag = PieceBag(CONFIG["BAG_SEED"])
        self.board = board
        self.piece_bag = bag
        self.piece: Piece = self.piece_bag.pop()
        self.piece_position = Point(0, 0)
        self.score = 0
        self.level = 1
        self.duration = CONFIG["INITIAL_DURATION_MS"]
        self.over = False
        if not self.place_new_piece():
            self.over = True

    def spawn_origin(self, piece: Piece) -> Point:
        return Point((self.board.width - piece.size) // 2, 0)

    def find_dropped_position(self) -> Point:
        """Return where the current piece would come to rest if hard-dropped."""
        origin = self.piece_position
        while not self.board.collision_test(self.piece, origin.offset(0, 1)):
            origin = origin.offset(0, 1)
        return origin

    def move_piece(self, dx: int, dy: int) -> bool:
        if self.over:
            return False
        trial = self.piece_position.offset(dx, dy)
        if self.board.collision_test(self.piece, trial):
            return False
        self.piece_position = trial
        return True

    def rotate_piece(self, direction: Direction) -> bool:
        # No wall kicks: the rotated copy must fit where the piece already is.
        if self.over:
            return False
        trial = self.piece.copy()
        trial.rotate(direction)
        if self.board.collision_test(trial, self.piece_position):
            return False
        self.piece = trial
        return True

    def place_new_piece(self) -> bool:
        origin = self.spawn_origin(self.piece)
        if self.board.collision_test(self.piece, origin):
            return False
        self.piece_position = origin
        return True

    def advance_game(self) -> bool:
        """Move the piece down one row, or lock it and bring in the next one.

        Returns False when the next piece cannot be placed (game over).
        """
        if self.over:
            return False
        if self.move_piece(0, 1):
            return True

        self.board.lock_piece(self.piece, self.piece_position)
        cleared = self.board.clear_lines()
        if cleared:
            self.score += cleared
            log.debug("cleared %d line(s), score %d", cleared, self.score)
            if self.score % LINES_PER_LEVEL == 0:
                self.level += 1
                log.info("level up: %d", self.level)

        self.piece = self.piece_bag.pop()
        if not self.place_new_piece():
            self.over = True
            log.info("game over: %s blocked at spawn, score %d", self.piece.t, self.score)
            return False
        return True

    def drop_piece(self) -> bool:
        if self.over:
            return False
        while self.move_piece(0, 1):
            pass
        return self.advance_game()

    def keypress(self, press: KeyPress) -> bool:
        """Apply a key to the game. Returns False only if the key ended it."""
        key = press.key
        if key is Key.LEFT:
            self.move_piece(-1, 0)
        elif key is Key.RIGHT:
            self.move_piece(1, 0)
        elif key is Key.DOWN:
            return self.advance_game()
        elif key is Key.UP:
            self.rotate_piece(Direction.LEFT)
        elif key is Key.SPACE:
            return self.drop_piece()
        elif key is Key.CHAR and press.char == "q":
            self.rotate_piece(Direction.LEFT)
        elif key is Key.CHAR and press.char == "e":
            self.rotate_piece(Direction.RIGHT)
        return not self.over
