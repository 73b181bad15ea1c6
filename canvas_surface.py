# canvas_surface.py - Character Cell Drawing Surface
"""
Drawing surface used by the game, implemented on a tk.Canvas.
The screen is a SCREEN_WIDTH x SCREEN_HEIGHT grid of CELL_SIZE pixel cells.
"""

import logging
import tkinter as tk

from PIL import Image, ImageTk

from config import (
    BLACK,
    CELL_SIZE,
    FALLBACK_SPRITE_GLYPH,
    FONT_FAMILY,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILESET_COLUMNS,
    TILESET_FILE,
    TILESET_GLYPH_SIZE,
    WHITE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    asset_path,
)

logger = logging.getLogger(__name__)


class CanvasSurface(tk.Canvas):
    """Grid of glyph cells plus a sprite layer, redrawn from scratch each frame."""

    def __init__(self, master: tk.Tk, **kwargs) -> None:
        super().__init__(master, width=WINDOW_WIDTH, height=WINDOW_HEIGHT,
                         bg=BLACK, highlightthickness=0, **kwargs)
        self.pack(fill="both", expand=True)

        self.font = (FONT_FAMILY, -CELL_SIZE, "bold")  # Negative size = pixels

        # Sprite images, keyed by (glyph, width, height); tkinter needs the references kept
        self.tileset: Image.Image | None = None
        self._sprite_cache: dict[tuple[int, int, int], ImageTk.PhotoImage] = {}
        self._load_tileset()

    # ------------------------------------------------------------------ #
    # TILESET
    # ------------------------------------------------------------------ #
    def _load_tileset(self) -> None:
        """Load the glyph sheet if available, otherwise sprites fall back to a glyph."""
        path = asset_path(TILESET_FILE)
        try:
            self.tileset = Image.open(path).convert("RGBA")
        except OSError as exc:
            # Graceful degradation: continue with text sprites
            logger.warning("Tileset %s not loaded (%s), using '%s' for sprites",
                           path, exc, FALLBACK_SPRITE_GLYPH)
            self.tileset = None

    def _sprite_image(self, glyph: int, width: int, height: int) -> ImageTk.PhotoImage:
        """Crop one glyph out of the sheet and scale it to the requested size."""
        key = (glyph, width, height)
        if key not in self._sprite_cache:
            col = glyph % TILESET_COLUMNS
            row = glyph // TILESET_COLUMNS
            left = col * TILESET_GLYPH_SIZE
            top = row * TILESET_GLYPH_SIZE
            tile = self.tileset.crop((left, top, left + TILESET_GLYPH_SIZE,
                                      top + TILESET_GLYPH_SIZE))
            tile = tile.resize((width, height), Image.NEAREST)  # Keep pixel art sharp
            self._sprite_cache[key] = ImageTk.PhotoImage(tile, master=self)
        return self._sprite_cache[key]

    # ------------------------------------------------------------------ #
    # DRAWING PRIMITIVES
    # ------------------------------------------------------------------ #
    def clear(self, bg: str = BLACK) -> None:
        """Remove everything and paint the whole screen with bg."""
        self.delete("all")
        self.create_rectangle(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT, fill=bg, outline="")

    def set_cell(self, x: int, y: int, glyph: str, fg: str, bg: str) -> None:
        """Draw one glyph in cell (x, y). Cells off the grid are ignored."""
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return
        px, py = x * CELL_SIZE, y * CELL_SIZE
        self.create_rectangle(px, py, px + CELL_SIZE, py + CELL_SIZE, fill=bg, outline="")
        self.create_text(px + CELL_SIZE / 2, py + CELL_SIZE / 2, text=glyph,
                         fill=fg, font=self.font)

    def draw_text(self, x: int, y: int, text: str, fg: str = WHITE, bg: str = BLACK) -> None:
        """Write text left to right, one character per cell."""
        for i, char in enumerate(text):
            self.set_cell(x + i, y, char, fg, bg)

    def draw_sprite(self, position: tuple[float, float], frame_index: int,
                    scale: tuple[float, float], colors: tuple[str, str]) -> None:
        """Draw a tileset glyph at a fractional cell position, scaled in cells."""
        x, y = position
        fg, bg = colors
        px, py = x * CELL_SIZE, y * CELL_SIZE
        width = int(CELL_SIZE * scale[0])
        height = int(CELL_SIZE * scale[1])

        if self.tileset is None:
            self.create_text(px + width / 2, py + height / 2, text=FALLBACK_SPRITE_GLYPH,
                             fill=fg, font=(FONT_FAMILY, -height, "bold"))
            return

        self.create_rectangle(px, py, px + width, py + height, fill=bg, outline="")
        self.create_image(px, py, image=self._sprite_image(frame_index, width, height),
                          anchor="nw")
