
"""Keyboard: pygame key events -> abstract key presses"""
from typing import Optional

import pygame

from tetris_keys import Key, KeyPress


SPECIAL_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}

# wasd doubles as the arrow keys
CHAR_KEYS = {
    "w": Key.UP,
    "a": Key.LEFT,
    "s": Key.DOWN,
    "d": Key.RIGHT,
    " ": Key.SPACE,
    "\x03": Key.CTRL_C,
}


def decode_key(key: int, mod: int = 0, unicode: str = "") -> Optional[KeyPress]:
    """Map one KEYDOWN to a KeyPress, or None if it means nothing to the game."""
    if key == pygame.K_c and mod & pygame.KMOD_CTRL:
        return KeyPress(Key.CTRL_C)
    if key in SPECIAL_KEYS:
        return KeyPress(SPECIAL_KEYS[key])
    if len(unicode) != 1:
        return None
    if unicode in CHAR_KEYS:
        return KeyPress(CHAR_KEYS[unicode])
    if not unicode.isprintable():
        return None
    return KeyPress.of_char(unicode)


def decode_event(event) -> Optional[KeyPress]:
    if event.type == pygame.QUIT:
        return KeyPress(Key.CTRL_C)
    if event.type != pygame.KEYDOWN:
        return None
    return decode_key(event.key, event.mod, getattr(event, "unicode", ""))
