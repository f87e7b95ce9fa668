"""In-memory 32-bit ARGB bitmaps and PNG loading."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, UnidentifiedImageError


@dataclass
class Bitmap:
    """A grid of 0xAARRGGBB pixels stored row by row.

    ``stride`` is the number of pixels between the starts of two rows and
    defaults to the width.
    """

    width: int
    height: int
    data: list[int] = field(default_factory=list)
    stride: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        if self.stride <= 0:
            self.stride = self.width
        if self.stride < self.width:
            raise ValueError("stride is smaller than the width")
        needed = self.stride * self.height
        if not self.data:
            self.data = [0] * needed
        elif len(self.data) < needed:
            raise ValueError(
                f"bitmap needs {needed} pixels, {len(self.data)} given"
            )

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.data[y * self.stride + x]

    def copy(self) -> Bitmap:
        """Return a deep copy of this bitmap."""
        return Bitmap(self.width, self.height, list(self.data), self.stride)


def load_image(filename: str | Path) -> Bitmap:
    """Load a PNG file as an ARGB bitmap.

    Raises OSError when the file cannot be read or is empty and ValueError
    when it does not hold a decodable PNG image.
    """
    raw = Path(filename).read_bytes()
    if not raw:
        raise OSError(f"failed to read file {filename}")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            if img.format != "PNG":
                raise ValueError(f"failed to load data from {filename}: not a PNG image")
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValueError(f"failed to load data from {filename}") from exc

    pixels = [
        (a << 24) | (r << 16) | (g << 8) | b
        for r, g, b, a in struct.iter_unpack("4B", rgba.tobytes())
    ]
    return Bitmap(rgba.width, rgba.height, pixels)