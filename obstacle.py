# obstacle.py - Gap Obstacles
"""
A vertical wall with a gap. The gap narrows as the score grows.
"""

import random

from config import (
    BLACK,
    GAP_BASE_SIZE,
    GAP_MAX_Y,
    GAP_MIN_SIZE,
    GAP_MIN_Y,
    RED,
    SCREEN_HEIGHT,
)

WALL_GLYPH = "|"


def gap_size_for(score: int) -> int:
    """Gap size for a given score: 20 - score, never below 2."""
    return max(GAP_MIN_SIZE, GAP_BASE_SIZE - score)


class Obstacle:
    """Single wall at world column x, open around gap_y."""

    def __init__(self, x: int, score: int, rng: random.Random) -> None:
        self.x = x
        self.gap_y = rng.randrange(GAP_MIN_Y, GAP_MAX_Y)
        self.size = gap_size_for(score)

    @classmethod
    def create(cls, x: int, score: int, rng: random.Random) -> "Obstacle":
        return cls(x, score, rng)

    def gap_bounds(self) -> tuple[int, int]:
        """Top and bottom row of the opening (both inclusive)."""
        half_size = self.size // 2
        return self.gap_y - half_size, self.gap_y + half_size

    def collides_with(self, player) -> bool:
        """
        Hit test, only on the exact column of the wall.

        The dragon is sampled once when its x equals the wall x, so a very
        fast fall can skip the check. Kept intentionally.
        """
        top, bottom = self.gap_bounds()
        player_y = int(player.y)
        return player.x == self.x and (player_y < top or player_y > bottom)

    def render(self, surface, player_x: int) -> None:
        """Draw the wall above and below the gap, relative to the dragon."""
        screen_x = self.x - player_x
        top, bottom = self.gap_bounds()

        # Top half of the wall
        for y in range(0, top):
            surface.set_cell(screen_x, y, WALL_GLYPH, RED, BLACK)

        # Bottom half of the wall
        for y in range(bottom + 1, SCREEN_HEIGHT):
            surface.set_cell(screen_x, y, WALL_GLYPH, RED, BLACK)
