# player.py - The Dragon
"""
Player entity: position, vertical velocity and the cosmetic animation frame.
"""

from config import (
    DRAGON_FRAMES,
    FLAP_VELOCITY,
    GRAVITY_STEP,
    MAX_VELOCITY,
    NAVY,
    WHITE,
)

SPRITE_SCALE = (2.0, 2.0)  # Dragon is drawn two cells wide and tall


class Player:
    """The dragon. x only grows, y falls under gravity and is never negative."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x  # Distance traveled (world column)
        self.y = float(y)
        self.velocity = 0.0
        self.frame = 0  # Index into DRAGON_FRAMES

    def advance(self) -> None:
        """One physics step: gravity, move forward, keep y on screen top."""
        if self.velocity < MAX_VELOCITY:
            # min() so float drift can't push past the cap
            self.velocity = min(self.velocity + GRAVITY_STEP, MAX_VELOCITY)
        self.y += self.velocity
        self.x += 1
        if self.y < 0.0:
            self.y = 0.0

        # Animation only
        self.frame = (self.frame + 1) % len(DRAGON_FRAMES)

    def flap(self) -> None:
        """Upward impulse, replaces the current velocity."""
        self.velocity = FLAP_VELOCITY

    def render(self, surface) -> None:
        # The dragon always sits in the left column; the world scrolls past it
        surface.draw_sprite((0.0, self.y), DRAGON_FRAMES[self.frame],
                            SPRITE_SCALE, (WHITE, NAVY))
