
CONFIG = {
    # Board
    "COLS": 10,
    "VISIBLE_ROWS": 20,
    "HIDDEN_ROWS": 2,             # spawn rows above the visible field

    # Gravity (ms between ticks)
    "INITIAL_DURATION_MS": 200,
    "DURATION_STEP_MS": 500,
    "DURATION_FLOOR_MS": 500,
    "DURATION_MAX_MS": None,      # None => no ceiling

    # Difficulty feed
    "FEED_ENABLED": True,
    "FEED_INTERVAL_S": 5,
    "FEED_TIMEOUT_S": 4,
    "FEED_URL": "https://api.binance.com/api/v3/ticker/price",
    "FEED_SYMBOL": "BTCUSDT",

    # Randomizer
    "BAG_SEED": None,

    # Window
    "CELL_SIZE": 28,
    "DISPLAY_EXTRA_COLS": 24,   # text columns for the side panel

    # Logging
    "LOG_LEVEL": "INFO",
    "LOG_FILE": None,
}


def board_size():
    """Return (cols, rows) of the playfield, hidden rows included."""
    return CONFIG["COLS"], CONFIG["VISIBLE_ROWS"] + CONFIG["HIDDEN_ROWS"]
