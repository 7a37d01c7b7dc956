"""An off-screen 32-bit image with pixel writes and line drawing."""

from __future__ import annotations

import struct
from typing import Protocol

from .color import gradient_for

__all__ = ["Image"]


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class _Drawable(Protocol):
    x: float
    y: float
    color: int


class Image:
    """A ``width`` by ``height`` image of 4-byte pixels.

    ``endian`` 0 stores each pixel's least significant byte first, 1 stores
    the most significant byte first.
    """

    def __init__(self, width: int, height: int, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.endian = endian
        self.bits_per_pixel = 32
        self.size_line = width * 4
        self.buffer = bytearray(self.size_line * height)

    def _pixel_bytes(self, color: int) -> bytes:
        order = "big" if self.endian == 1 else "little"
        return (color & 0xFFFFFFFF).to_bytes(4, order)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set the pixel at (``x``, ``y``), coordinates truncated toward zero."""
        col, row = int(x), int(y)
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"pixel ({col}, {row}) outside {self.width}x{self.height} image")
        offset = row * self.size_line + col * 4
        self.buffer[offset:offset + 4] = self._pixel_bytes(color)

    def clear(self, background: int) -> None:
        """Fill the whole image with ``background``."""
        self.buffer[:] = self._pixel_bytes(background) * (self.width * self.height)

    def draw_line(self, start: _Drawable, end: _Drawable) -> None:
        """Draw from ``start`` toward ``end`` with a colour gradient.

        The end point itself is not drawn, nor are points on row or column
        zero or outside the image.
        """
        x, y = _f32(start.x), _f32(start.y)
        x_step = _f32(_f32(end.x) - x)
        y_step = _f32(_f32(end.y) - y)
        steps = int(max(abs(x_step), abs(y_step)))
        if steps == 0:
            return
        x_step = _f32(x_step / steps)
        y_step = _f32(y_step / steps)
        gradient = gradient_for(start, end)
        for i in range(steps):
            color = gradient.color_at(i, steps)
            if 0 < x < self.width and 0 < y < self.height:
                self.put_pixel(x, y, color)
            x = _f32(x + x_step)
            y = _f32(y + y_step)