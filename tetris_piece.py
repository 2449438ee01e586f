
"""Piece model, shapes, in-place rotation"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

COLORS = {
    "I": "cyan",
    "J": "blue",
    "L": "orange",
    "O": "yellow",
    "S": "green",
    "T": "purple",
    "Z": "red",
}

PIECE_TYPES = tuple(SHAPES)


class Direction(Enum):
    LEFT = "left"    # counter-clockwise
    RIGHT = "right"  # clockwise


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    color: str

    @staticmethod
    def new(t: str) -> "Piece":
        return Piece(t, [r[:] for r in SHAPES[t]], COLORS[t])

    @property
    def size(self) -> int:
        return len(self.shape)

    def copy(self) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.color)

    def each_point(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of every filled cell, row-major."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield r, c

    def rotate(self, direction: Direction) -> None:
        """Rotate the shape 90 degrees in place, one ring at a time.

        Each ring (layer) of the square matrix is rotated by cycling four
        cells at a time, so no second matrix is built.
        """
        m = self.shape
        n = len(m)
        for row in range(n // 2):
            last = n - row - 1
            for col in range(row, last):
                opp = n - col - 1
                t = m[row][col]
                if direction is Direction.LEFT:
                    m[row][col] = m[col][last]
                    m[col][last] = m[last][opp]
                    m[last][opp] = m[opp][row]
                    m[opp][row] = t
                else:
                    m[row][col] = m[opp][row]
                    m[opp][row] = m[last][opp]
                    m[last][opp] = m[col][last]
                    m[col][last] = t
