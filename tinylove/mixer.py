"""Pre-saturation sample buffers used by the audio mixer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

AUDIO_FRAMES = 44100 // 60

NORMALIZED_MIN = -1.0
NORMALIZED_MAX = 1.0

INT16_MIN = -32768
INT16_MAX = 32767


def to_int16(value: float) -> int:
    """Round a pre-saturated sample to the nearest 16-bit integer.

    Halves round away from zero. Values beyond the 16-bit range saturate
    at its limits.
    """
    rounded = int(math.copysign(math.floor(abs(value) + 0.5), value))
    return max(INT16_MIN, min(INT16_MAX, rounded))


@dataclass
class PresaturateBuffer:
    """Interleaved samples of ``channels`` channels, ``samplelen`` frames long."""

    channels: int
    samplelen: int
    data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.channels < 0 or self.samplelen < 0:
            raise ValueError("channels and sample length must not be negative")
        needed = self.channels * self.samplelen
        if not self.data:
            self.data = [0.0] * needed
        elif len(self.data) < needed:
            raise ValueError(f"buffer needs {needed} samples, {len(self.data)} given")