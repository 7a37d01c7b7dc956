"""Colour gradients between two 0xRRGGBB values."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["Gradient", "palette", "gradient_for"]

_RED = 0xFF0000
_GREEN = 0x00FF00
_BLUE = 0x0000FF


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _clamp(channel: int) -> int:
    if channel < -255:
        return 0
    if channel > 255:
        return 255
    return channel


class _Colored(Protocol):
    color: int


@dataclass(frozen=True)
class Gradient:
    """A linear blend from ``start_color`` to ``end_color``, channel by channel."""

    start_color: int
    end_color: int
    start_r: int = field(init=False, compare=False)
    start_g: int = field(init=False, compare=False)
    start_b: int = field(init=False, compare=False)
    end_r: int = field(init=False, compare=False)
    end_g: int = field(init=False, compare=False)
    end_b: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        for prefix, color in (("start", self.start_color), ("end", self.end_color)):
            object.__setattr__(self, f"{prefix}_r", (color & _RED) >> 16)
            object.__setattr__(self, f"{prefix}_g", (color & _GREEN) >> 8)
            object.__setattr__(self, f"{prefix}_b", color & _BLUE)

    @property
    def delta_r(self) -> int:
        return self.end_r - self.start_r

    @property
    def delta_g(self) -> int:
        return self.end_g - self.start_g

    @property
    def delta_b(self) -> int:
        return self.end_b - self.start_b

    def color_at(self, index: int, length: int) -> int:
        """Return the colour ``index`` steps along a line of ``length`` steps."""
        if length == 0:
            raise ValueError("line length must not be zero")
        progress = _f32(_f32(index) / _f32(length))
        r = _clamp(int(_f32(self.delta_r * progress)))
        g = _clamp(int(_f32(self.delta_g * progress)))
        b = _clamp(int(_f32(self.delta_b * progress)))
        return self.start_color + (r << 16) + (g << 8) + b


def palette(min_color: int, max_color: int) -> Gradient:
    """Return the gradient from ``min_color`` to ``max_color``."""
    return Gradient(min_color, max_color)


def gradient_for(start: _Colored, end: _Colored) -> Gradient:
    """Return the gradient between the colours of two points."""
    return Gradient(start.color, end.color)