"""Debounced digital input with push and release edges."""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional

DEFAULT_DEBOUNCE = 100
"""Milliseconds a level must hold before it is accepted."""
DEFAULT_TRIGGER = False


def _millis() -> float:
    return time.monotonic() * 1000.0


class InputState(enum.IntEnum):
    """State of an input after the last update."""

    NOT_PRESSED = 0
    PRESSED = 1
    PUSH = 2
    RELEASE = 3


class Input:
    """Tracks one boolean input; ``trigger`` is the level that means pressed."""

    def __init__(
        self,
        trigger: bool = DEFAULT_TRIGGER,
        debounce: float = DEFAULT_DEBOUNCE,
        clock: Callable[[], float] = _millis,
    ) -> None:
        self.debounce = debounce
        self._clock = clock
        self.set_trigger(trigger)

    def set_trigger(self, trigger: bool) -> None:
        """Change the pressed level and reset the state."""
        self._trigger = bool(trigger)
        self._state = InputState.NOT_PRESSED
        self._level = not self._trigger
        self._previous = not self._trigger
        self._changed_at: Optional[float] = None

    def update(self, current: bool) -> InputState:
        """Feed the current raw level and return the new state."""
        current = bool(current)
        if self._level == current:
            self._changed_at = None
        elif self._changed_at is None:
            self._changed_at = self._clock()
        elif self._clock() - self._changed_at >= self.debounce:
            self._level = not self._level

        was_pressed = self._previous == self._trigger
        is_pressed = self._level == self._trigger
        if not was_pressed and not is_pressed:
            self._state = InputState.NOT_PRESSED
        elif not was_pressed and is_pressed:
            self._state = InputState.PUSH
        elif was_pressed and is_pressed:
            self._state = InputState.PRESSED
        else:
            self._state = InputState.RELEASE
        self._previous = self._level
        return self._state

    def status(self) -> InputState:
        """State after the last update."""
        return self._state

    def is_pressed(self) -> bool:
        """True only on the update where the press was accepted."""
        return self._state is InputState.PUSH