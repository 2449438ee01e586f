
"""Board: collide, lock, clear"""
from typing import Iterator, List, Optional

from tetris_piece import Piece, Point

Cell = Optional[str]  # None or a colour name


class CollisionError(Exception):
    """Raised when a piece is locked over a wall or an occupied cell."""


class Board:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[None] * width for _ in range(height)]

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    @property
    def rows(self) -> Iterator[List[Cell]]:
        for row in self.cells:
            yield list(row)

    def collision_test(self, piece: Piece, origin: Point) -> bool:
        """Return True if the piece at origin leaves the grid or overlaps a block."""
        for r, c in piece.each_point():
            x, y = origin.x + c, origin.y + r
            if x < 0 or x >= self.width or y < 0 or y >= self.height:
                return True
            if self.cells[y][x] is not None:
                return True
        return False

    def lock_piece(self, piece: Piece, origin: Point) -> None:
        if self.collision_test(piece, origin):
            raise CollisionError(f"cannot lock {piece.t} at ({origin.x}, {origin.y})")
        for r, c in piece.each_point():
            self.cells[origin.y + r][origin.x + c] = piece.color

    def clear_lines(self) -> int:
        """Drop every full row, shift the rest down and return how many went."""
        kept = [row for row in self.cells if any(v is None for v in row)]
        cleared = self.height - len(kept)
        if cleared:
            self.cells = [[None] * self.width for _ in range(cleared)] + kept
        return cleared
