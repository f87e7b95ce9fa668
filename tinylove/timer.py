"""The ``timer`` engine module: wall time, frame delta and frames per second."""

from __future__ import annotations

import time
from collections.abc import Callable

from .settings import Settings


def _monotonic_usec() -> int:
    return time.perf_counter_ns() // 1000


class Timer:
    """Reports time from a microsecond clock and frame timing from the settings."""

    def __init__(
        self, settings: Settings, clock: Callable[[], int] | None = None
    ) -> None:
        self.settings = settings
        self._clock = clock or _monotonic_usec

    def get_time(self) -> float:
        """Return the clock reading in seconds."""
        return self._clock() / 1000000.0

    def get_delta(self) -> float:
        """Return the length of the last frame in seconds."""
        return self.settings.delta

    def get_fps(self) -> int:
        """Return the frame rate computed from the last frame."""
        return self.settings.fps