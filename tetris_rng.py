
"""7-bag randomizer module"""
import random
from typing import List, Optional

from tetris_piece import PIECE_TYPES, Piece


class PieceBag:
    """
    Queue of randomized tetrominoes.

    Instead of a purely random stream, each refill deals one of every
    piece type in shuffled order, and the whole bag is used up before the
    next shuffle. This rules out long droughts and long repeat runs.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.pieces: List[Piece] = []
        self.fill_bag()

    def __len__(self) -> int:
        return len(self.pieces)

    def pop(self) -> Piece:
        """Remove and return the next piece, refilling when the bag runs dry."""
        piece = self.pieces.pop(0)
        if not self.pieces:
            self.fill_bag()
        return piece

    def peek(self) -> Piece:
        """Return a copy of the next piece."""
        if not self.pieces:
            raise RuntimeError("No next piece in piece bag")
        return self.pieces[0].copy()

    def fill_bag(self) -> None:
        types = list(PIECE_TYPES)
        self.rng.shuffle(types)
        self.pieces.extend(Piece.new(t) for t in types)
