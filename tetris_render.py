
"""
Rendering for the Tetris project.

Two halves:
- Display: a character-cell render sink. The game loop paints text with a
  foreground and background colour into a back buffer and presents it as
  an immutable frame. It never touches pygame, so the game loop can run on
  any thread.
- Window: draws presented frames with pygame on the thread that owns the
  window. Glyph surfaces are cached per (char, colour) and reused.
"""
from __future__ import annotations
import threading
import pygame
from typing import Callable, Dict, List, Optional, Tuple
from tetris_config import CONFIG
from tetris_layout import Dims
from tetris_piece import Piece, Point

# Colour names used by pieces and the HUD
PALETTE: Dict[str, Tuple[int,int,int]] = {
    "cyan": (102,224,255),
    "blue": (106,119,255),
    "orange": (255,158,94),
    "yellow": (255,224,102),
    "green": (94,224,142),
    "purple": (200,119,255),
    "red": (255,102,119),
    "black": (10,13,34),
    "white": (200,210,240),
}

# Posted to the pygame queue when a new frame is ready to draw
FRAME_READY = pygame.USEREVENT + 1

Glyph = Tuple[str, str, str]   # char, fg, bg
Frame = Tuple[Tuple[Glyph, ...], ...]
BLANK: Glyph = (" ", "white", "black")


class Display:
    """Back buffer of text cells plus the last presented frame."""
    def __init__(self, width: int, height: int, notify: Optional[Callable[[], None]] = None):
        self.width = width
        self.height = height
        self.notify = notify
        self._lock = threading.Lock()
        self._buffer: List[List[Glyph]] = []
        self._frame: Frame = ()
        self.clear()

    def clear(self):
        self._buffer = [[BLANK] * self.width for _ in range(self.height)]

    def paint(self, text: str, x: int, y: int, fg: str, bg: str):
        if y < 0 or y >= self.height:
            return
        for i, ch in enumerate(text):
            if 0 <= x + i < self.width:
                self._buffer[y][x + i] = (ch, fg, bg)

    def present(self):
        frame = tuple(tuple(row) for row in self._buffer)
        with self._lock:
            self._frame = frame
        if self.notify:
            self.notify()

    def frame(self) -> Frame:
        with self._lock:
            return self._frame

    def line(self, y: int) -> str:
        """Text of one row of the last presented frame."""
        return "".join(ch for ch, _, _ in self.frame()[y])


# ---------- Game painting ----------
def render_piece(display: Display, piece: Piece, origin: Point, ghost: bool = False, top: int = 0):
    """Paint a piece whose board origin is given in screen text columns/rows.
    Rows above `top` (hidden spawn rows) are skipped."""
    for r, c in piece.each_point():
        x = origin.x + 2 * c
        y = origin.y + r
        if y < top:
            continue
        if ghost:
            display.paint("[]", x, y - top, piece.color, "black")
        else:
            display.paint("  ", x, y - top, piece.color, piece.color)


def render_game(game, display: Display):
    board = game.board
    hidden = CONFIG["HIDDEN_ROWS"]
    visible = board.height - hidden
    right = board.width * 2 + 1

    # Border
    for y in range(visible):
        display.paint("|", 0, y, "red", "black")
        display.paint("|", right, y, "red", "black")
    display.paint("-" * (right + 1), 0, visible, "red", "black")

    # Locked cells
    for y, row in enumerate(board.rows):
        if y < hidden:
            continue
        for x, color in enumerate(row):
            if color is not None:
                display.paint("  ", 1 + 2 * x, y - hidden, color, color)

    # HUD
    left = right + 4
    display.paint(f"Level: {game.level}", left, 1, "red", "black")
    display.paint(f"Score: {game.score}", left, 2, "red", "black")
    display.paint(f"Speed: {game.duration}", left, 3, "red", "black")

    # After game over the current piece is the one that could not spawn
    if not game.over:
        # Ghost first so the falling piece stays on top when they overlap
        x = 1 + 2 * game.piece_position.x
        ghost = game.find_dropped_position()
        render_piece(display, game.piece, Point(x, ghost.y), ghost=True, top=hidden)
        render_piece(display, game.piece, Point(x, game.piece_position.y), top=hidden)

    display.paint("Next piece:", left, 5, "red", "black")
    render_piece(display, game.piece_bag.peek(), Point(left + 2, 7))


# ---------- pygame window ----------
class Window:
    """Draws presented frames. Must live on the thread that created it."""
    def __init__(self, dims: Dims):
        self.dims = dims
        try:
            self.screen = pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF, vsync=1)
        except TypeError:
            self.screen = pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF)
        pygame.display.set_caption("Tetris")
        self.font = pygame.font.SysFont("monospace", max(8, dims.char_h - 6), bold=True)
        self.glyphs: Dict[Tuple[str,str], pygame.Surface] = {}

    def display(self) -> Display:
        """A Display sized to this window that wakes it on every present()."""
        return Display(self.dims.cols, self.dims.rows, notify=post_frame_ready)

    def _glyph(self, ch: str, fg: str) -> pygame.Surface:
        key = (ch, fg)
        s = self.glyphs.get(key)
        if s is None:
            s = self.font.render(ch, True, PALETTE.get(fg, PALETTE["white"]))
            self.glyphs[key] = s
        return s

    def draw(self, frame: Frame):
        w, h = self.dims.char_w, self.dims.char_h
        self.screen.fill(PALETTE["black"])
        for y, row in enumerate(frame):
            for x, (ch, fg, bg) in enumerate(row):
                rect = pygame.Rect(x * w, y * h, w, h)
                if bg != "black":
                    self.screen.fill(PALETTE.get(bg, PALETTE["black"]), rect)
                if ch != " ":
                    g = self._glyph(ch, fg)
                    self.screen.blit(g, g.get_rect(center=rect.center))
        pygame.display.flip()


def post_frame_ready():
    # pygame.event.post is safe to call from any thread
    pygame.event.post(pygame.event.Event(FRAME_READY))
