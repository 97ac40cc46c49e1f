"""Packed 32-bit pixel images and the primitives drawn on them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycub.geometry import Vector

_BPP = 32


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


@dataclass
class Rect:
    """An axis-aligned rectangle with a fill colour."""

    size: Vector
    pos: Vector
    color: int


class Image:
    """A width x height image of 32-bit pixels stored in a byte buffer.

    With ``endian`` 0 each pixel is stored least significant byte first,
    otherwise most significant byte first.
    """

    def __init__(self, width: int, height: int, endian: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.endian = endian
        self.bpp = _BPP
        self.line_len = width * (_BPP // 8)
        self.data = bytearray(self.line_len * height)

    def _encode(self, color: int) -> bytes:
        order = "little" if self.endian == 0 else "big"
        return (color & 0xFFFFFFFF).to_bytes(4, order)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return
        offset = y * self.line_len + x * 4
        self.data[offset:offset + 4] = self._encode(color)

    def get_pixel(self, x: float, y: float) -> int:
        """Return the colour of one pixel as an unsigned 32-bit value."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = y * self.line_len + x * 4
        order = "little" if self.endian == 0 else "big"
        return int.from_bytes(self.data[offset:offset + 4], order)

    def draw_rectangle(self, rect: Rect) -> None:
        """Fill a rectangle, clipped to the image.

        A rectangle whose right edge reaches past the image stops after its
        first visible row.
        """
        size, pos = rect.size, rect.pos
        count = math.ceil(size.x) if size.x > 0 else 0
        columns = [
            int(pos.x + x)
            for x in range(count)
            if x + pos.x >= 0 and int(pos.x + x) < self.width
        ]
        span = self._encode(rect.color) * len(columns)
        x = 0
        y = 0
        while y < size.y and y + pos.y <= self.height and x + pos.x <= self.width:
            if y + pos.y >= 0:
                x = count
                row = int(y + pos.y)
                if columns and row < self.height:
                    start = row * self.line_len + columns[0] * 4
                    self.data[start:start + len(span)] = span
            else:
                x = 0
            y += 1

    def draw_ray(self, start: Vector, angle: float, length: float, color: int) -> None:
        """Plot a line of unit steps from ``start`` along ``angle``."""
        dx, dy = math.cos(angle), math.sin(angle)
        px, py = start.x, start.y
        steps = 0
        while steps < length:
            steps += 1
            px += dx
            py += dy
            if py < 0 or py > self.height or px < 0 or px > self.width:
                break
            self.put_pixel(math.floor(px + 0.5), math.floor(py + 0.5), color)

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed RGB triples, row by row."""
        rgb = bytearray(self.width * self.height * 3)
        if self.endian == 0:
            rgb[0::3] = self.data[2::4]
            rgb[1::3] = self.data[1::4]
            rgb[2::3] = self.data[0::4]
        else:
            rgb[0::3] = self.data[1::4]
            rgb[1::3] = self.data[2::4]
            rgb[2::3] = self.data[3::4]
        return bytes(rgb)