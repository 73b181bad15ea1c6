# game.py - Core Game State
"""
Game orchestrator: owns the dragon, the current obstacle and the score,
and runs one of three modes (menu, playing, dead) on every host tick.
Knows nothing about tkinter: everything is drawn through the surface passed in.
"""

import logging
import random
from enum import Enum
from typing import Optional

# Import configuration and module dependencies
from config import (
    BLACK,
    FRAME_DURATION,
    GREEN,
    NAVY,
    PLAYER_START_X,
    PLAYER_START_Y,
    RED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    VIOLET,
    WHITE,
)
from keys import KeyCode
from obstacle import Obstacle
from player import Player

logger = logging.getLogger(__name__)


class GameMode(Enum):
    MENU = "menu"  # Main menu
    PLAYING = "playing"  # Game is currently running
    END = "end"  # Game is over


class GameState:
    """Single game instance, driven by tick()."""

    def __init__(self, seed: Optional[int] = None) -> None:
        # Owned random generator (seed it for reproducible obstacles)
        self.rng = random.Random(seed)

        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0  # Accumulated ms since last physics step
        self.obstacle = Obstacle(SCREEN_WIDTH + 10, 0, self.rng)
        self.mode = GameMode.MENU
        self.score = 0

        # Polled by the host after each tick
        self.quitting = False

        # One handler per mode
        self._handlers = {
            GameMode.MENU: self.main_menu,
            GameMode.PLAYING: self.play,
            GameMode.END: self.dead,
        }

    # ------------------------------------------------------------------ #
    # ENTRY POINT
    # ------------------------------------------------------------------ #
    def tick(self, elapsed_ms: float, key: Optional[KeyCode], surface) -> None:
        """Run one host frame in the current mode."""
        self._handlers[self.mode](elapsed_ms, key, surface)

    # ------------------------------------------------------------------ #
    # STATES / RESET
    # ------------------------------------------------------------------ #
    def restart(self) -> None:
        """Fresh dragon, fresh obstacle, score back to 0, straight into play."""
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        self.obstacle = Obstacle(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.PLAYING
        self.score = 0
        logger.info("Game started")

    def quit(self) -> None:
        self.quitting = True
        logger.info("Quit requested")

    def main_menu(self, elapsed_ms: float, key: Optional[KeyCode], surface) -> None:
        surface.clear()
        self._print_centered(surface, 5, "Welcome to Flappy Dragon", GREEN)
        self._print_centered(surface, 7, "Press (P) to start", VIOLET)
        self._print_centered(surface, 9, "Press (Q) to quit", RED)
        self._handle_menu_key(key)

    def play(self, elapsed_ms: float, key: Optional[KeyCode], surface) -> None:
        surface.clear(NAVY)

        # Physics runs at a fixed step, independent of the redraw rate
        self.frame_time += elapsed_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.advance()

        if key is KeyCode.SPACE:
            self.player.flap()

        self.player.render(surface)
        surface.draw_text(0, 0, "Press space to flap")
        surface.draw_text(0, 1, f"Score: {self.score}")
        self.obstacle.render(surface, self.player.x)

        # Point scored once the dragon is past the wall
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle(self.player.x + SCREEN_WIDTH, self.score, self.rng)

        if int(self.player.y) > SCREEN_HEIGHT or self.obstacle.collides_with(self.player):
            self.mode = GameMode.END
            logger.info("Game over, score %d", self.score)

    def dead(self, elapsed_ms: float, key: Optional[KeyCode], surface) -> None:
        surface.clear()
        self._print_centered(surface, 5, "You Died!")
        self._print_centered(surface, 6, f"Score: {self.score}")
        self._print_centered(surface, 7, "Press (P) to restart")
        self._print_centered(surface, 9, "Press (Q) to quit")
        self._handle_menu_key(key)

    # ------------------------------------------------------------------ #
    # HELPERS
    # ------------------------------------------------------------------ #
    def _handle_menu_key(self, key: Optional[KeyCode]) -> None:
        """P starts a new run, Q asks the host to stop; other keys do nothing."""
        if key is KeyCode.P:
            self.restart()
        elif key is KeyCode.Q:
            self.quit()

    @staticmethod
    def _print_centered(surface, y: int, text: str, fg: str = WHITE) -> None:
        x = (SCREEN_WIDTH - len(text)) // 2
        surface.draw_text(x, y, text, fg, BLACK)
