"""An in-memory image of packed 32-bit colours."""

from __future__ import annotations

import sys
from array import array

__all__ = ["Framebuffer"]


class Framebuffer:
    """A width x height grid of packed colours stored row by row."""

    def __init__(self, width: int, height: int, clear_color: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid framebuffer size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", [clear_color]) * (width * height)

    def clear(self, color: int) -> None:
        """Fill the whole image with one colour."""
        self.pixels[:] = array("I", [color]) * (self.width * self.height)

    def _index(self, x: float, y: float) -> int:
        ix, iy = int(x), int(y)
        if not (0 <= ix < self.width and 0 <= iy < self.height):
            raise IndexError(
                f"pixel ({ix}, {iy}) outside {self.width}x{self.height} framebuffer"
            )
        return ix + iy * self.width

    def set_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; coordinates are truncated toward zero."""
        self.pixels[self._index(x, y)] = color

    def get_pixel(self, x: float, y: float) -> int:
        """Return the colour of one pixel."""
        return self.pixels[self._index(x, y)]

    def draw_rect(self, x: float, y: float, w: int, h: int, color: int) -> None:
        """Fill a rectangle, silently clipping the parts outside the image."""
        x0, y0 = int(x), int(y)
        left = max(x0, 0)
        right = min(x0 + int(w), self.width)
        top = max(y0, 0)
        bottom = min(y0 + int(h), self.height)
        if left >= right or top >= bottom:
            return
        row = array("I", [color]) * (right - left)
        for cy in range(top, bottom):
            start = cy * self.width + left
            self.pixels[start:start + len(row)] = row

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words (R, G, B, A in memory)."""
        data = array("I", self.pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()