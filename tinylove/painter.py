"""Software rasteriser: lines, rectangles, polygons, ellipses, blits and bitmap fonts."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from enum import IntFlag
from pathlib import Path

from .bitmap import Bitmap, load_image

MAX_FONT_CHAR = 256
STACK_DEPTH = 64

_ALPHA_MASK = 0xFF000000

_log = logging.getLogger(__name__)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles; empty overlaps have zero size."""
        left = max(self.x, other.x)
        right = min(self.x + self.width, other.x + other.width)
        top = max(self.y, other.y)
        bottom = min(self.y + self.height, other.y + other.height)
        return Rect(left, top, max(right - left, 0), max(bottom - top, 0))

    def is_null(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass
class Transform:
    tx: int = 0
    ty: int = 0
    r: float = 0.0
    sx: float = 1.0
    sy: float = 1.0


class FontFlags(IntFlag):
    NONE = 0
    FREETYPE = 1 << 1
    BOLD = 1 << 2
    ITALICS = 1 << 3
    STRIKE = 1 << 4


@dataclass
class Font:
    """A bitmap font: an atlas of glyphs split by separator columns."""

    atlas: Bitmap
    characters: str = ""
    separators: list[int] = field(default_factory=list)
    flags: FontFlags = FontFlags.NONE
    pxsize: int = 0
    extraspacing: int = 0

    def _separator(self, index: int) -> int:
        return self.separators[index] if index < len(self.separators) else 0

    def _glyph(self, pos: int) -> tuple[int, int]:
        start = self._separator(pos) + 1
        return start, self._separator(pos + 1) - start


class Painter:
    """Draws into a target bitmap with a foreground/background colour and clip."""

    def __init__(self, target: Bitmap, font: Font | None = None) -> None:
        self.target = target
        self.font = font
        self.foreground = 0xFFFFFFFF
        self.background = 0xFF000000
        self.clip = Rect()
        self._stack = [Transform() for _ in range(STACK_DEPTH)]
        self.stack_pos = 0
        self.reset()

    @property
    def trans(self) -> Transform:
        return self._stack[self.stack_pos]

    def _plot(self, x: int, y: int, color: int) -> None:
        t = self.target
        if 0 <= y < t.height and 0 <= x < t.width:
            t.data[y * t.stride + x] = color

    def reset(self) -> None:
        self.background = 0xFF000000
        self.foreground = 0xFFFFFFFF
        self.clip = Rect(0, 0, self.target.width, self.target.height)
        self.origin(True)

    def clear(self) -> None:
        t = self.target
        t.data[: t.height * t.stride] = [self.background] * (t.height * t.stride)

    def sanitize_clip(self) -> None:
        """Restrict the clip rectangle to the target; call after setting it."""
        self.clip = self.clip.intersect(Rect(0, 0, self.target.width, self.target.height))

    def strike_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        color = self.foreground
        if not color & _ALPHA_MASK:
            return
        dx, sx = abs(x2 - x1), (1 if x1 < x2 else -1)
        dy, sy = abs(y2 - y1), (1 if y1 < y2 else -1)
        err = dx // 2 if dx > dy else -(dy // 2)
        while True:
            self._plot(x1, y1, color)
            if x1 == x2 and y1 == y2:
                break
            e2 = err
            if e2 > -dx:
                err -= dy
                x1 += sx
            if e2 < dy:
                err += dx
                y1 += sy

    def strike_rect(self, rect: Rect) -> None:
        x1, y1 = rect.x, rect.y
        x2, y2 = x1 + rect.width, y1 + rect.height
        self.strike_line(x1, y1, x1, y2)
        self.strike_line(x1, y2, x2, y2)
        self.strike_line(x2, y2, x2, y1)
        self.strike_line(x2, y1, x1, y1)

    def fill_rect(self, rect: Rect) -> None:
        color = self.foreground
        t = self.trans
        drect = Rect(rect.x + t.tx, rect.y + t.tx, rect.width, rect.height)
        drect = self.clip.intersect(drect)
        if drect.is_null() or not color & _ALPHA_MASK:
            return
        target = self.target
        for y in range(drect.y, drect.y + drect.height):
            start = y * target.stride + drect.x
            target.data[start : start + drect.width] = [color] * drect.width

    @staticmethod
    def _edges(points: list[int]):
        vertices = list(zip(points[0::2], points[1::2]))
        return zip(vertices, vertices[1:] + vertices[:1])

    def strike_poly(self, points: list[int]) -> None:
        """Outline a closed polygon given as a flat list x1, y1, x2, y2, ..."""
        if len(points) % 2 or not self.foreground & _ALPHA_MASK:
            return
        for (x1, y1), (x2, y2) in self._edges(points):
            self.strike_line(x1, y1, x2, y2)

    def _fill_spans(self, ymin: int, ymax: int, edges: list) -> None:
        color = self.foreground
        for yy in range(ymin, ymax + 1):
            xmin, xmax = self.target.width + 1, -1
            for (x1, y1), (x2, y2) in edges:
                if (y1 > yy) != (y2 > yy):
                    testx = x1 + _trunc_div((x2 - x1) * (yy - y1), y2 - y1)
                    xmin = min(xmin, testx)
                    xmax = max(xmax, testx)
            for xx in range(xmin, xmax + 1):
                self._plot(xx, yy, color)

    def fill_poly(self, points: list[int]) -> None:
        """Fill a polygon given as a flat coordinate list; exact for convex shapes."""
        if len(points) % 2 or not self.foreground & _ALPHA_MASK:
            return
        ys = points[1::2]
        ymin = min([self.target.height + 1, *ys])
        ymax = max([-1, *ys])
        self._fill_spans(ymin, ymax, list(self._edges(points)))

    @staticmethod
    def _ellipse_edges(x: int, y: int, rx: int, ry: int, segments: int) -> list:
        def vertex(i: int) -> tuple[int, int]:
            angle = 2 * i * math.pi / segments
            return int(x + rx * math.cos(angle)), int(y + ry * math.sin(angle))

        return [(vertex(i), vertex(i + 1)) for i in range(segments)]

    def strike_ellipse(self, x: int, y: int, radius_x: int, radius_y: int, segments: int) -> None:
        for (x1, y1), (x2, y2) in self._ellipse_edges(x, y, radius_x, radius_y, segments):
            self.strike_line(x1, y1, x2, y2)

    def fill_ellipse(self, x: int, y: int, radius_x: int, radius_y: int, segments: int) -> None:
        if not self.foreground & _ALPHA_MASK:
            return
        edges = self._ellipse_edges(x, y, radius_x, radius_y, segments)
        self._fill_spans(y - radius_y, y + radius_y, edges)

    def draw(self, bitmap: Bitmap, src_rect: Rect, dst_rect: Rect) -> None:
        """Blit part of a bitmap unscaled, skipping fully transparent pixels."""
        srect = replace(src_rect)
        drect = replace(dst_rect)
        drect.x += self.trans.tx
        drect.y += self.trans.ty
        drect.width, drect.height = srect.width, srect.height

        if drect.x < 0:
            srect.x -= drect.x
            srect.width += drect.x
        if drect.y < 0:
            srect.y -= drect.y
            srect.height += drect.y

        drect = drect.intersect(self.clip)
        drect.width = min(drect.width, srect.width)
        drect.height = min(drect.height, srect.height)
        if drect.is_null() or srect.is_null():
            return

        target = self.target
        for row in range(drect.height):
            dst = (drect.y + row) * target.stride + drect.x
            src = (srect.y + row) * bitmap.stride + srect.x
            for col, color in enumerate(bitmap.data[src : src + drect.width]):
                if color & _ALPHA_MASK:
                    target.data[dst + col] = color

    def _require_font(self) -> Font:
        if self.font is None:
            raise RuntimeError("painter has no font")
        return self.font

    def print_text(self, x: int, y: int, text: str, limit: int = 0) -> None:
        """Draw text with the current font, wrapping past ``limit`` pixels when positive."""
        font = self._require_font()
        if font.flags & FontFlags.FREETYPE:
            return
        atlas = font.atlas
        drect = Rect(x, y, self.target.width, atlas.height)
        srect = Rect(0, 0, 0, atlas.height)
        for ch in text:
            pos = font.characters.find(ch)
            if pos < 0:
                continue
            srect.x, srect.width = font._glyph(pos)
            drect.width = srect.width
            self.draw(atlas, srect, drect)
            drect.x += srect.width + font.extraspacing
            if limit > 0 and drect.x - x > limit:
                drect.x = x
                drect.y += atlas.height
            if ch == "\n":
                drect.x = x
                drect.y += atlas.height

    def text_width(self, text: str) -> int:
        font = self._require_font()
        if font.flags & FontFlags.FREETYPE:
            return 0
        width = 0
        for ch in text:
            pos = font.characters.find(ch)
            if pos < 0:
                continue
            width += font._glyph(pos)[1] + font.extraspacing
        return width

    def printf(self, x: int, y: int, fmt: str, *args) -> None:
        self.print_text(x, y, fmt % args if args else fmt, 0)

    def push(self) -> bool:
        """Save the current transform; False when the stack is full."""
        if self.stack_pos + 1 >= STACK_DEPTH:
            return False
        self._stack[self.stack_pos + 1] = replace(self._stack[self.stack_pos])
        self.stack_pos += 1
        return True

    def pop(self) -> bool:
        """Restore the previous transform; False when at the bottom of the stack."""
        if self.stack_pos == 0:
            return False
        self.stack_pos -= 1
        return True

    def origin(self, reset_stack: bool = False) -> None:
        if reset_stack:
            self.stack_pos = 0
        self.scale(1, 1)
        self.rotate(0)
        self.translate(0, 0)

    def scale(self, x: float, y: float) -> None:
        self.trans.sx = x
        self.trans.sy = y

    def rotate(self, rad: float) -> None:
        self.trans.r = rad

    def translate(self, x: int, y: int) -> None:
        self.trans.tx = x
        self.trans.ty = y


def _build_font(atlas: Bitmap, characters: str, flags: int) -> Font:
    if not atlas.data or atlas.width == 0:
        raise ValueError("font atlas is empty")
    flags = FontFlags(int(flags) & ~int(FontFlags.FREETYPE))
    marker = atlas.data[0]
    separators = [i for i in range(atlas.width) if atlas.data[i] == marker][:MAX_FONT_CHAR]
    if len(characters) > MAX_FONT_CHAR:
        _log.warning("Font atlas is too big. It will be truncated !")
    return Font(
        atlas=atlas,
        characters=characters[:MAX_FONT_CHAR],
        separators=separators,
        flags=flags,
    )


def load_font_file(filename: str | Path, characters: str, flags: int = 0) -> Font:
    """Load a font atlas from a PNG file."""
    return _build_font(load_image(filename), characters, flags)


def load_font_bitmap(atlas: Bitmap, characters: str, flags: int = 0) -> Font:
    """Build a font from a copy of the given atlas bitmap."""
    return _build_font(atlas.copy(), characters, flags)