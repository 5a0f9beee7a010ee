"""Top-level game phase machine."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum


class Phase(IntEnum):
    """Phases of the game."""

    NULL = 0
    INITIALIZE = 1
    MAIN = 2


class GlobalState:
    """Runs the handler for the current phase, re-running when the phase changes."""

    def __init__(self, on_initialize: Callable[[], None], on_update: Callable[[], None]) -> None:
        self._on_initialize = on_initialize
        self._on_update = on_update
        self.phase = Phase.INITIALIZE
        self._handlers: dict[Phase, Callable[[], None]] = {
            Phase.INITIALIZE: self._run_initialize,
            Phase.MAIN: self._run_main,
        }

    def update(self) -> None:
        """Run one frame; a phase change runs the new phase's handler in the same frame."""
        previous = Phase.NULL
        while self.phase != previous:
            previous = self.phase
            self._handlers[self.phase]()

    def _run_initialize(self) -> None:
        self._on_initialize()
        self.phase = Phase(self.phase + 1)

    def _run_main(self) -> None:
        self._on_update()