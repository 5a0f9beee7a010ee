"""Game logic: palettes, bouncing balls and pad-driven ball count."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from bouncyballs.ball import Ball
from bouncyballs.global_state import GlobalState
from bouncyballs.input import Key, KeyBit
from bouncyballs.pad import Pad
from bouncyballs.randomness import get_random

PALETTE_COUNT = 6
PALETTE_SIZE = 256
BALL_COLOR_INDEX = 27
BALL_COUNT = 256
BALL_SPRITE_ID = 0

Color = tuple[int, int, int]


def _black_palette() -> list[Color]:
    return [(0, 0, 0)] * PALETTE_SIZE


@dataclass
class Palette:
    """A colour palette identified by its id."""

    id: int
    colors: list[Color] = field(default_factory=_black_palette)

    @property
    def ball_color(self) -> Color:
        """The colour used for the ball body."""
        return self.colors[BALL_COLOR_INDEX]


class Game:
    """Balls bouncing around the screen; UP/DOWN change how many move, A/B/C clear them."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.pad = Pad()
        self.palettes: list[Palette] = []
        self.balls: list[Ball] = []
        self.enabled_ball_count = 0
        self.master_colors: list[int] = [0, 0, 0]
        self.master_color_vectors: list[int] = [0, 0, 0]
        self._pending_key_state = 0
        self.state = GlobalState(self.initialize, self._run_frame)

    def _random(self) -> int:
        return get_random(self._rng)

    def _random_color(self) -> Color:
        return (self._random() % 255, self._random() % 255, self._random() % 255)

    def initialize(self) -> None:
        """Create the palettes, the pad and every ball."""
        master = Palette(id=0)
        self.master_colors = list(self._random_color())
        master.colors[BALL_COLOR_INDEX] = tuple(self.master_colors)
        self.master_color_vectors = [
            self._random() % 16 - self._random() % 8 for _ in range(3)
        ]

        self.palettes = [master]
        for palette_id in range(1, PALETTE_COUNT):
            colors = list(master.colors[: PALETTE_SIZE - 1]) + [(0, 0, 0)]
            colors[BALL_COLOR_INDEX] = self._random_color()
            self.palettes.append(Palette(id=palette_id, colors=colors))

        self.pad = Pad()
        self.enabled_ball_count = 0

        self.balls = []
        for i in range(BALL_COUNT):
            palette_index = 0 if i == 0 else 1 + i % (PALETTE_COUNT - 1)
            self.balls.append(
                Ball.spawn(BALL_SPRITE_ID, self.palettes[palette_index].id, self._rng)
            )

    def update(self, key_state: int) -> None:
        """Advance one frame with the given key state, initialising on the first frame."""
        self._pending_key_state = int(key_state)
        self.state.update()

    def _run_frame(self) -> None:
        self.update_pad(self._pending_key_state)
        self.update_balls()
        self.animate_palette()

    def update_pad(self, key_state: int) -> None:
        """Read the pad and adjust the number of moving balls."""
        self.pad.update(key_state)

        if self.pad.is_button_pressed(Key.UP) and self.enabled_ball_count < BALL_COUNT:
            self.enabled_ball_count += 1
        if self.pad.is_button_pressed(Key.DOWN) and self.enabled_ball_count > 0:
            self.enabled_ball_count -= 1

        if self.pad.is_button_pressed_key_bit(KeyBit.A | KeyBit.B | KeyBit.C):
            self.enabled_ball_count = 0

    def update_balls(self) -> None:
        """Move every enabled ball one frame."""
        for ball in self.enabled_balls():
            ball.update()

    def animate_palette(self) -> None:
        """Shift the master ball colour, bouncing each channel within 0..255."""
        for channel in range(3):
            color = self.master_colors[channel] + self.master_color_vectors[channel]
            if color < 0:
                color = 0
                self.master_color_vectors[channel] *= -1
            if color > 255:
                color = 255
                self.master_color_vectors[channel] *= -1
            self.master_colors[channel] = color

        if self.palettes:
            self.palettes[0].colors[BALL_COLOR_INDEX] = tuple(self.master_colors)

    def enabled_balls(self) -> list[Ball]:
        """Return the balls currently in play."""
        return self.balls[: self.enabled_ball_count]

    def status_lines(self) -> list[tuple[int, str]]:
        """Return (row, text) pairs: the ball count, then one line per pressed button."""
        lines = [(0, f"{self.enabled_ball_count:03d}")]
        lines.extend(
            (key + 1, f"PAD_{key.name}") for key in Key if self.pad.is_button_pressed(key)
        )
        return lines