
"""Abstract key presses, independent of any input backend"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    CTRL_C = "ctrl-c"
    CHAR = "char"


@dataclass(frozen=True)
class KeyPress:
    key: Key
    char: Optional[str] = None

    @staticmethod
    def of_char(c: str) -> "KeyPress":
        return KeyPress(Key.CHAR, c)
