"""Window, keyboard input and drawing for the bouncing-balls game."""

from __future__ import annotations

import argparse
import random

import pygame

from bouncyballs.ball import BALL_WIDTH_2, TV_HEIGHT, TV_WIDTH
from bouncyballs.game import Game
from bouncyballs.input import Key, KeyBit, key_state_from_pressed

BACKGROUND_COLOR = (128, 0, 128)
TEXT_COLOR = (255, 255, 255)
WINDOW_SCALE = 2
FPS = 60

KEY_BINDINGS: dict[Key, int] = {
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.A: pygame.K_z,
    Key.B: pygame.K_x,
    Key.C: pygame.K_c,
    Key.X: pygame.K_a,
    Key.Y: pygame.K_s,
    Key.Z: pygame.K_d,
    Key.L: pygame.K_q,
    Key.R: pygame.K_w,
    Key.START: pygame.K_RETURN,
}


def read_key_state(pressed) -> KeyBit:
    """Turn a keyboard state (indexable by key code) into a pad key state."""
    return key_state_from_pressed(key for key, code in KEY_BINDINGS.items() if pressed[code])


def render(surface: pygame.Surface, game: Game, font: pygame.font.Font | None) -> None:
    """Draw the enabled balls and the status text; the surface centre is the origin."""
    surface.fill(BACKGROUND_COLOR)
    center_x = surface.get_width() // 2
    center_y = surface.get_height() // 2
    palettes = {palette.id: palette for palette in game.palettes}

    for ball in game.enabled_balls():
        x, y = ball.screen_position()
        color = palettes[ball.palette_id].ball_color
        pygame.draw.circle(surface, color, (center_x + x, center_y + y), BALL_WIDTH_2)

    if font is None:
        return
    line_height = font.get_linesize()
    for row, text in game.status_lines():
        surface.blit(font.render(text, True, TEXT_COLOR), (0, row * line_height))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bouncyballs", description="Bouncing balls demo.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    game = Game(random.Random(args.seed))

    pygame.init()
    try:
        window = pygame.display.set_mode((TV_WIDTH * WINDOW_SCALE, TV_HEIGHT * WINDOW_SCALE))
        pygame.display.set_caption("Bouncy Balls")
        canvas = pygame.Surface((TV_WIDTH, TV_HEIGHT))
        font = pygame.font.Font(None, 16)
        clock = pygame.time.Clock()

        frame = 0
        running = True
        while running and (args.frames is None or frame < args.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            game.update(read_key_state(pygame.key.get_pressed()))
            render(canvas, game, font)
            pygame.transform.scale(canvas, window.get_size(), window)
            pygame.display.flip()
            clock.tick(FPS)
            frame += 1
    finally:
        pygame.quit()
    return 0