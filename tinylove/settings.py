"""Engine-wide settings and asset path resolution."""

from __future__ import annotations

import posixpath
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 240
MAX_EXTENSION_LENGTH = 15


@dataclass
class Settings:
    """Screen geometry, frame timing and game location shared by the engine."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    pitch: int = 0
    pitch_pixels: int = 0
    framebuffer: list[int] | None = None
    input_state: Callable[..., int] | None = None
    live_enable: bool = False
    live_call_load: bool = False
    gamedir: str = ""
    identity: str = ""
    delta: float = 0.0
    delta_counter: float = 0.0
    frame_counter: int = 0
    fps: int = 0
    environment: Callable[..., Any] | None = field(default=None, repr=False)

    def update_timing(self, delta: float) -> None:
        """Record a frame of ``delta`` seconds, updating the delta and FPS figures.

        The frame and delta counters restart once a full second has passed.
        """
        self.delta = delta
        self.delta_counter += delta
        self.frame_counter += 1
        self.fps = int(1 / delta)

        if self.delta_counter >= 1.0:
            self.frame_counter = 0
            self.delta_counter = 0.0


@dataclass(frozen=True)
class AssetPath:
    """A game asset: its full path and its lower-case file extension."""

    fullpath: str
    ext: str


def _extension(path: str) -> str:
    base = posixpath.basename(path.replace("\\", "/"))
    dot = base.rfind(".")
    return "" if dot < 0 else base[dot + 1 :]


def asset_path(settings: Settings, path: str) -> AssetPath:
    """Resolve ``path`` against the game directory.

    Long extensions are truncated; they only serve to recognise known formats.
    """
    ext = _extension(path).lower()[:MAX_EXTENSION_LENGTH]
    return AssetPath(fullpath=settings.gamedir + path, ext=ext)