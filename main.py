# main.py - Application Entry Point
"""
Main entry point for Flappy Dragon.
Creates the window, feeds keys and frame times to the game, and stops on quit.
"""

import logging
import time
import tkinter as tk  # GUI framework
from typing import Optional

from canvas_surface import CanvasSurface  # Cell grid drawing surface
from config import HOST_FRAME_DELAY, LOG_FORMAT, LOG_LEVEL, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from game import GameState  # Game modes and simulation
from keys import KeyCode, key_from_keysym

logger = logging.getLogger(__name__)


class HostLoop:
    """Calls GameState.tick once per frame with the elapsed time and last key."""

    def __init__(self, root: tk.Tk, surface: CanvasSurface, state: GameState) -> None:
        self.root = root
        self.surface = surface
        self.state = state
        self.pending_key: Optional[KeyCode] = None  # Latest key since the last frame
        self.last_time = time.perf_counter()

        root.bind("<KeyPress>", self._on_key_down)

    def _on_key_down(self, event) -> None:
        key = key_from_keysym(event.keysym)
        if key is not None:
            self.pending_key = key

    def start(self) -> None:
        self.last_time = time.perf_counter()
        self.root.after(0, self._frame)

    def _frame(self) -> None:
        now = time.perf_counter()
        elapsed_ms = (now - self.last_time) * 1000.0
        self.last_time = now

        key, self.pending_key = self.pending_key, None
        self.state.tick(elapsed_ms, key, self.surface)

        if self.state.quitting:
            self.root.destroy()
            return

        # Schedule next frame
        self.root.after(HOST_FRAME_DELAY, self._frame)


def main() -> None:
    """Create window, initialize game, and start event loop."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    # Create main window
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    root.resizable(False, False)  # Fixed window size
    root.configure(bg="black")

    surface = CanvasSurface(root)
    state = GameState()
    loop = HostLoop(root, surface, state)

    def on_close():
        """Closing the window counts as quitting."""
        state.quit()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)

    loop.start()
    logger.info("Window opened (%dx%d)", WINDOW_WIDTH, WINDOW_HEIGHT)

    # Start the GUI event loop
    root.mainloop()


if __name__ == "__main__":
    main()  # Run application
