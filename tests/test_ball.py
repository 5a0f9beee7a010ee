import random

import pytest

from bouncyballs.ball import (
    BALL_HEIGHT_2,
    BALL_WIDTH_2,
    SCREEN_BOTTOM,
    SCREEN_LEFT,
    SCREEN_RIGHT,
    SCREEN_TOP,
    Ball,
    from_fixed,
    to_fixed,
)


@pytest.mark.parametrize("value", [-200, -1, 0, 1, 37, 160])
def test_fixed_round_trip(value):
    assert from_fixed(to_fixed(value)) == value


def test_from_fixed_floors_negative():
    assert from_fixed(-1) == -1


def test_from_fixed_drops_fraction():
    assert from_fixed(to_fixed(5) + (1 << 15)) == 5


def test_spawn_starts_at_centre():
    ball = Ball.spawn(3, 4, random.Random(0))
    assert (ball.x, ball.y) == (0, 0)
    assert ball.sprite_id == 3
    assert ball.palette_id == 4


def test_spawn_velocity_range():
    rng = random.Random(123)
    for _ in range(500):
        ball = Ball.spawn(0, 0, rng)
        assert -(2 << 16) < ball.vx < (4 << 16)
        assert -(2 << 16) < ball.vy < (4 << 16)


def test_spawn_deterministic_with_seed():
    first = Ball.spawn(1, 2, random.Random(9))
    second = Ball.spawn(1, 2, random.Random(9))
    assert (first.sprite_id, first.palette_id) == (1, 2)
    assert (second.sprite_id, second.palette_id) == (1, 2)
    assert first.vx == second.vx
    assert first.vy == second.vy


def test_update_moves_by_velocity():
    ball = Ball(vx=to_fixed(2), vy=-to_fixed(1))
    ball.update()
    assert ball.screen_position() == (2, -1)


def test_bounce_left():
    ball = Ball(x=to_fixed(SCREEN_LEFT + BALL_WIDTH_2), vx=-to_fixed(3))
    ball.update()
    assert ball.x == to_fixed(SCREEN_LEFT + BALL_WIDTH_2)
    assert ball.vx == to_fixed(3)


def test_bounce_right():
    ball = Ball(x=to_fixed(SCREEN_RIGHT - BALL_WIDTH_2), vx=to_fixed(3))
    ball.update()
    assert ball.x == to_fixed(SCREEN_RIGHT - BALL_WIDTH_2)
    assert ball.vx == -to_fixed(3)


def test_bounce_top_resets_below_edge():
    ball = Ball(y=to_fixed(SCREEN_TOP), vy=-to_fixed(2))
    ball.update()
    assert ball.y == to_fixed(SCREEN_TOP + BALL_HEIGHT_2)
    assert ball.vy == to_fixed(2)


def test_bounce_bottom():
    ball = Ball(y=to_fixed(SCREEN_BOTTOM - BALL_HEIGHT_2), vy=to_fixed(2))
    ball.update()
    assert ball.y == to_fixed(SCREEN_BOTTOM - BALL_HEIGHT_2)
    assert ball.vy == -to_fixed(2)


def test_ball_stays_on_screen():
    rng = random.Random(5)
    balls = [Ball.spawn(0, 0, rng) for _ in range(20)]
    for _ in range(1000):
        for ball in balls:
            ball.update()
            x, y = ball.screen_position()
            assert SCREEN_LEFT + BALL_WIDTH_2 <= x <= SCREEN_RIGHT - BALL_WIDTH_2
            assert SCREEN_TOP - (4 << 16) <= to_fixed(y)
            assert y <= SCREEN_BOTTOM - BALL_HEIGHT_2