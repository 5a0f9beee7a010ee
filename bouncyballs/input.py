"""Button definitions and conversion of pressed buttons into a key-state bit field."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum, IntFlag


class Key(IntEnum):
    """Buttons of the game pad, in bit order."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    B = 5
    C = 6
    X = 7
    Y = 8
    Z = 9
    L = 10
    R = 11
    START = 12


KEY_MAX = len(Key)


class KeyBit(IntFlag):
    """Bit pattern of each button inside a key state."""

    UP = 1 << Key.UP
    DOWN = 1 << Key.DOWN
    LEFT = 1 << Key.LEFT
    RIGHT = 1 << Key.RIGHT
    A = 1 << Key.A
    B = 1 << Key.B
    C = 1 << Key.C
    X = 1 << Key.X
    Y = 1 << Key.Y
    Z = 1 << Key.Z
    L = 1 << Key.L
    R = 1 << Key.R
    START = 1 << Key.START


def key_to_key_bit(key: int) -> KeyBit:
    """Return the key-state bit of a button."""
    if not 0 <= key < KEY_MAX:
        raise ValueError(f"unknown key: {key!r}")
    return KeyBit(1 << key)


def key_state_from_pressed(pressed: Iterable[int]) -> KeyBit:
    """Build a key state in which only the bits of the pressed buttons are set."""
    state = KeyBit(0)
    for key in pressed:
        state |= key_to_key_bit(key)
    return state