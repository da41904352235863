"""Keyboard and game-controller button state tracked across frames."""

from __future__ import annotations

import enum
from typing import Hashable

MAX_JOYSTICKS = 32


class JoyButton(enum.IntEnum):
    """Game-controller buttons."""

    INVALID = -1
    CROSS = 0
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3
    SELECT = 4
    GUIDE = 5
    START = 6
    LSTICK = 7
    RSTICK = 8
    LSHOULDER = 9
    RSHOULDER = 10
    DPAD_UP = 11
    DPAD_DOWN = 12
    DPAD_LEFT = 13
    DPAD_RIGHT = 14
    MISC1 = 15
    PADDLE1 = 16
    PADDLE2 = 17
    PADDLE3 = 18
    PADDLE4 = 19
    TOUCHPAD = 20
    MAX = 21


class KeyboardState:
    """Key states of the current and the previous frame."""

    def __init__(self) -> None:
        self._current: dict[Hashable, bool] = {}
        self._previous: dict[Hashable, bool] = {}

    def set_key(self, key: Hashable, down: bool) -> None:
        """Record that ``key`` is down or up in this frame."""
        self._current[key] = bool(down)

    def update(self) -> None:
        """Start a new frame: the current states become the previous ones."""
        self._previous = dict(self._current)

    def pressed(self, key: Hashable) -> bool:
        """True if ``key`` went down in this frame."""
        return self._current.get(key, False) and not self._previous.get(key, False)

    def released(self, key: Hashable) -> bool:
        """True if ``key`` went up in this frame."""
        return not self._current.get(key, False) and self._previous.get(key, False)

    def holding(self, key: Hashable) -> bool:
        """True if ``key`` was down in this frame and the previous one."""
        return self._current.get(key, False) and self._previous.get(key, False)


class JoystickState:
    """Button states for up to 32 controllers across frames."""

    def __init__(self) -> None:
        self._current: dict[tuple[int, int], bool] = {}
        self._previous: dict[tuple[int, int], bool] = {}
        self._count = 0
        self._working = -1

    def connect(self) -> int:
        """Register a controller; it becomes the working one. Returns its index."""
        if self._count >= MAX_JOYSTICKS:
            raise RuntimeError(f"at most {MAX_JOYSTICKS} controllers are supported")
        index = self._count
        self._count += 1
        self._working = index
        return index

    def count(self) -> int:
        """Number of registered controllers."""
        return self._count

    def working(self) -> int:
        """Index of the working controller, or -1 if there is none."""
        return self._working

    @staticmethod
    def _slot(joy: int, button: int) -> tuple[int, int]:
        if not 0 <= joy < MAX_JOYSTICKS:
            raise IndexError(f"joystick index out of range: {joy}")
        if not 0 <= button < JoyButton.MAX:
            raise IndexError(f"button out of range: {button}")
        return (int(joy), int(button))

    def set_button(self, joy: int, button: int, down: bool) -> None:
        """Record that ``button`` on controller ``joy`` is down or up."""
        self._current[self._slot(joy, button)] = bool(down)

    def update(self) -> None:
        """Start a new frame: the current states become the previous ones."""
        self._previous = dict(self._current)

    def pressed(self, joy: int, button: int) -> bool:
        """True if the button went down in this frame."""
        slot = self._slot(joy, button)
        return self._current.get(slot, False) and not self._previous.get(slot, False)

    def released(self, joy: int, button: int) -> bool:
        """True if the button went up in this frame."""
        slot = self._slot(joy, button)
        return not self._current.get(slot, False) and self._previous.get(slot, False)

    def holding(self, joy: int, button: int) -> bool:
        """True if the button was down in this frame and the previous one."""
        slot = self._slot(joy, button)
        return self._current.get(slot, False) and self._previous.get(slot, False)


def ord_of(key: str) -> int:
    """Code of the first character of ``key``; 0 for an empty string."""
    return ord(key[0]) if key else 0