"""The ``mouse`` engine module: button and position state from the frontend."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

DEVICE_MOUSE = 2
_CACHE_SIZE = 8


class MouseId(IntEnum):
    X = 0
    Y = 1
    LEFT = 2
    RIGHT = 3
    WHEELUP = 4
    WHEELDOWN = 5
    MIDDLE = 6
    HORIZ_WHEELUP = 7


_BUTTONS = {1: MouseId.LEFT, 2: MouseId.RIGHT, 3: MouseId.MIDDLE}


def _int16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _check_number(value: object, position: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"bad argument #{position} (number expected)")
    return value


class Mouse:
    """Tracks mouse buttons and a position built from relative motion."""

    def __init__(self) -> None:
        self._cache = [0] * _CACHE_SIZE

    def update(self, input_state: Callable[[int, int, int, int], int]) -> None:
        """Poll the frontend; X and Y deltas accumulate, other ids are replaced."""
        for i in range(_CACHE_SIZE):
            value = _int16(input_state(0, DEVICE_MOUSE, 0, i))
            if i in (MouseId.X, MouseId.Y):
                self._cache[i] = _int16(self._cache[i] + value)
            else:
                self._cache[i] = value

    def is_down(self, *args: object) -> bool:
        """True if any of the buttons (1 left, 2 right, 3 middle) is held."""
        if not args:
            raise TypeError("lutro.mouse.isDown requires 1 or more arguments, 0 given.")
        for position, arg in enumerate(args, 1):
            button = _BUTTONS.get(int(_check_number(arg, position)))
            if button is not None and self._cache[button]:
                return True
        return False

    def _coordinate(self, axis: MouseId) -> int:
        return self._cache[axis] & 0xFFFFFFFF

    @staticmethod
    def _no_args(args: tuple) -> None:
        if args:
            raise TypeError(f"lutro.mouse.getX takes no arguments, {len(args)} given.")

    def get_x(self, *args: object) -> int:
        self._no_args(args)
        return self._coordinate(MouseId.X)

    def get_y(self, *args: object) -> int:
        self._no_args(args)
        return self._coordinate(MouseId.Y)

    def get_position(self, *args: object) -> tuple[int, int]:
        self._no_args(args)
        return self._coordinate(MouseId.X), self._coordinate(MouseId.Y)