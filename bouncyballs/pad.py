"""Game pad state with edge detection between frames."""

from __future__ import annotations

from dataclasses import dataclass

from bouncyballs.input import key_to_key_bit


@dataclass
class Pad:
    """Key state of the current and the previous frame."""

    state: int = 0
    prev_state: int = 0

    def update(self, key_state: int) -> None:
        """Store the new key state, keeping the previous one for edge detection."""
        self.prev_state = self.state
        self.state = int(key_state)

    def is_button_pressed(self, key: int) -> bool:
        """Return True if the button is held down."""
        return bool(self.state & key_to_key_bit(key))

    def is_button_pressed_key_bit(self, key_bit: int) -> bool:
        """Return True if any of the buttons in the bit mask is held down."""
        return bool(self.state & int(key_bit))

    def is_button_pushed(self, key: int) -> bool:
        """Return True if the button went down in this frame."""
        return bool(self.state & ~self.prev_state & key_to_key_bit(key))