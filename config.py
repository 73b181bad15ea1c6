# config.py
import os

# Base folders
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
RESOURCES_DIR = os.path.join(BASE_DIR, "resources")

# Size of the play field (in cells)
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# Size of one cell on screen (in pixels)
CELL_SIZE = 16

# Dimensions of the window
WINDOW_WIDTH = SCREEN_WIDTH * CELL_SIZE
WINDOW_HEIGHT = SCREEN_HEIGHT * CELL_SIZE
WINDOW_TITLE = "Flappy Dragon"

# Timing (milliseconds)
FRAME_DURATION = 75.0  # One physics step
HOST_FRAME_DELAY = 16  # ~60 FPS redraw

# Player physics
PLAYER_START_X = 5
PLAYER_START_Y = 25
GRAVITY_STEP = 0.2
MAX_VELOCITY = 2.0
FLAP_VELOCITY = -2.0

# Obstacles
GAP_MIN_Y = 10
GAP_MAX_Y = 40  # Exclusive
GAP_BASE_SIZE = 20
GAP_MIN_SIZE = 2

# Dragon animation (glyph indexes in the tileset)
DRAGON_FRAMES = [64, 1, 2, 3, 2, 1]

# Tileset: 32x32 glyphs in a 16 column grid (CP437 layout)
TILESET_FILE = "flappy32.png"
TILESET_GLYPH_SIZE = 32
TILESET_COLUMNS = 16
FALLBACK_SPRITE_GLYPH = "@"

# Colors
BLACK = "#000000"
WHITE = "#ffffff"
NAVY = "#000080"
RED = "#ff0000"
GREEN = "#00ff00"
VIOLET = "#ee82ee"

FONT_FAMILY = "Courier"

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def asset_path(name: str) -> str:
    """path to a resource, ex: flappy32.png."""
    return os.path.join(RESOURCES_DIR, name)
