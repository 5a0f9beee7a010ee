"""Random number source used by the game."""

from __future__ import annotations

import random

INT32_MAX = 2**31 - 1

_default_rng = random.Random()


def get_random(rng: random.Random | None = None) -> int:
    """Return a non-negative random integer below INT32_MAX."""
    source = rng if rng is not None else _default_rng
    return source.randrange(INT32_MAX)