"""The ``math`` engine module: pseudo-random numbers."""

from __future__ import annotations

import random as _random
import time

RAND_MAX = 2**31 - 1


def _check_number(value: object, position: int) -> float:
    if isinstance(value, bool):
        raise TypeError(f"bad argument #{position} (number expected, got boolean)")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise TypeError(
        f"bad argument #{position} (number expected, got {type(value).__name__})"
    )


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    if b == 0:
        raise ValueError("modulus must not be zero")
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


class MathModule:
    """Random number generation in the style of a C ``rand``/``srand`` pair."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random()
        self._seed(int(time.time()) if seed is None else seed)

    def _seed(self, seed: int) -> None:
        self._rng.seed(seed & 0xFFFFFFFF)

    def _rand(self) -> int:
        return self._rng.randint(0, RAND_MAX)

    def random(self, *args: object) -> float | int:
        """Return a float in [0, 1], an integer in [1, max] or in [min, max]."""
        n = len(args)
        if n > 2:
            raise TypeError(
                f"lutro.math.random requires 0, 1 or 2 arguments, {n} given."
            )
        num = self._rand()
        if n == 0:
            return num / RAND_MAX
        if n == 1:
            upper = int(_check_number(args[0], 1))
            return _c_mod(num, upper) + 1
        low = int(_check_number(args[0], 1))
        high = int(_check_number(args[1], 2))
        if low > high:
            low, high = high, low
        return _c_mod(num, high - low + 1) + low

    def set_random_seed(self, *args: object) -> None:
        """Seed the generator from one number or the sum of two."""
        n = len(args)
        if n < 1 or n > 2:
            raise TypeError(
                f"lutro.math.setRandomSeed requires 1 or 2 arguments, {n} given."
            )
        seed = sum(int(_check_number(a, i)) & 0xFFFFFFFF for i, a in enumerate(args, 1))
        self._seed(seed)