import random
from collections import defaultdict

import pygame

from bouncyballs.app import (
    BACKGROUND_COLOR,
    KEY_BINDINGS,
    main,
    read_key_state,
    render,
)
from bouncyballs.ball import TV_HEIGHT, TV_WIDTH
from bouncyballs.game import Game
from bouncyballs.input import Key, KeyBit


def _pressed(*codes):
    state = defaultdict(bool)
    for code in codes:
        state[code] = True
    return state


def test_read_key_state_none_pressed():
    assert read_key_state(_pressed()) == KeyBit(0)


def test_read_key_state_combination():
    state = read_key_state(_pressed(pygame.K_UP, pygame.K_z, pygame.K_RETURN))
    assert state == KeyBit.UP | KeyBit.A | KeyBit.START


def test_every_key_is_bound_once():
    assert set(KEY_BINDINGS) == set(Key)
    assert len(set(KEY_BINDINGS.values())) == len(Key)
    for key, code in KEY_BINDINGS.items():
        assert read_key_state(_pressed(code)) == KeyBit(1 << key)


def test_render_empty_is_background():
    game = Game(random.Random(3))
    game.update(0)
    surface = pygame.Surface((TV_WIDTH, TV_HEIGHT))
    render(surface, game, None)
    assert tuple(surface.get_at((TV_WIDTH // 2, TV_HEIGHT // 2)))[:3] == BACKGROUND_COLOR


def test_render_draws_ball_at_center():
    game = Game(random.Random(3))
    game.update(KeyBit.UP)
    surface = pygame.Surface((TV_WIDTH, TV_HEIGHT))
    render(surface, game, None)
    x, y = game.balls[0].screen_position()
    pixel = tuple(surface.get_at((TV_WIDTH // 2 + x, TV_HEIGHT // 2 + y)))[:3]
    assert pixel == game.palettes[0].ball_color
    assert tuple(surface.get_at((0, TV_HEIGHT - 1)))[:3] == BACKGROUND_COLOR


def test_main_runs_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--frames", "2", "--seed", "1"]) == 0