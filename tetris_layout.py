# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG


@dataclass
class Dims:
    char_w: int
    char_h: int
    cols: int
    rows: int
    total_w: int
    total_h: int


def compute_dims() -> Dims:
    char_h = int(CONFIG["CELL_SIZE"])
    char_w = char_h // 2          # a board cell is two text columns wide

    board_cols = CONFIG["COLS"] * 2 + 2     # cells plus both borders
    cols = board_cols + CONFIG["DISPLAY_EXTRA_COLS"]
    rows = CONFIG["VISIBLE_ROWS"] + 1       # plus the floor line

    return Dims(
        char_w=char_w, char_h=char_h,
        cols=cols, rows=rows,
        total_w=cols * char_w, total_h=rows * char_h,
    )
