"""A bouncing ball moving in 16.16 fixed-point screen coordinates."""

from __future__ import annotations

import random
from dataclasses import dataclass

from bouncyballs.randomness import get_random

FIXED_SHIFT = 16

BALL_WIDTH = 48
BALL_HEIGHT = 48
BALL_WIDTH_2 = BALL_WIDTH >> 1
BALL_HEIGHT_2 = BALL_HEIGHT >> 1

TV_WIDTH = 320
TV_HEIGHT = 224
SCREEN_LEFT = -(TV_WIDTH // 2)
SCREEN_TOP = -(TV_HEIGHT // 2)
SCREEN_RIGHT = TV_WIDTH // 2
SCREEN_BOTTOM = TV_HEIGHT // 2

BALL_DEPTH = 500


def from_fixed(value: int) -> int:
    """Convert a 16.16 fixed-point value to an integer (floor)."""
    return value >> FIXED_SHIFT


def to_fixed(value: int) -> int:
    """Convert an integer to a 16.16 fixed-point value."""
    return value << FIXED_SHIFT


def _random_speed(rng: random.Random | None) -> int:
    return get_random(rng) % (4 << FIXED_SHIFT) - get_random(rng) % (2 << FIXED_SHIFT)


@dataclass
class Ball:
    """Position and velocity (16.16 fixed point) plus the sprite and palette used to draw it."""

    x: int = 0
    y: int = 0
    vx: int = 0
    vy: int = 0
    sprite_id: int = 0
    palette_id: int = 0

    @classmethod
    def spawn(cls, sprite_id: int, palette_id: int, rng: random.Random | None = None) -> "Ball":
        """Create a ball at the screen centre with a random velocity."""
        vx = _random_speed(rng)
        vy = _random_speed(rng)
        return cls(x=0, y=0, vx=vx, vy=vy, sprite_id=sprite_id, palette_id=palette_id)

    def update(self) -> None:
        """Move one frame and bounce off the screen edges."""
        self.x += self.vx
        self.y += self.vy

        if from_fixed(self.x) < SCREEN_LEFT + BALL_WIDTH_2:
            self.x = to_fixed(SCREEN_LEFT + BALL_WIDTH_2)
            self.vx = -self.vx

        if SCREEN_RIGHT < from_fixed(self.x) + BALL_WIDTH_2:
            self.x = to_fixed(SCREEN_RIGHT - BALL_WIDTH_2)
            self.vx = -self.vx

        if from_fixed(self.y) < SCREEN_TOP:
            self.y = to_fixed(SCREEN_TOP + BALL_HEIGHT_2)
            self.vy = -self.vy

        if SCREEN_BOTTOM < from_fixed(self.y) + BALL_HEIGHT_2:
            self.y = to_fixed(SCREEN_BOTTOM - BALL_HEIGHT_2)
            self.vy = -self.vy

    def screen_position(self) -> tuple[int, int]:
        """Return the integer screen position of the ball centre."""
        return from_fixed(self.x), from_fixed(self.y)