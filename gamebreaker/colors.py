"""RGBA colours and the conversions used by the drawing functions."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} out of range 0..255: {value}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def with_alpha(self, alpha: int) -> "Color":
        """Return the same colour with a different alpha."""
        return dataclasses.replace(self, a=alpha)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert hue in degrees, saturation and value to RGB on the scale of ``v``.

    Hues outside 0..360 wrap by whole turns; a hue that wraps below zero
    yields the grey level ``v - v * s`` in every channel.
    """
    chroma = v * s
    sector = math.fmod(h / 60.0, 6)
    x = chroma * (1 - abs(math.fmod(sector, 2) - 1))
    m = v - chroma

    if 0 <= sector < 1:
        r, g, b = chroma, x, 0.0
    elif 1 <= sector < 2:
        r, g, b = x, chroma, 0.0
    elif 2 <= sector < 3:
        r, g, b = 0.0, chroma, x
    elif 3 <= sector < 4:
        r, g, b = 0.0, x, chroma
    elif 4 <= sector < 5:
        r, g, b = x, 0.0, chroma
    elif 5 <= sector < 6:
        r, g, b = chroma, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return r + m, g + m, b + m


def color_from_hex(value: int, alpha: int = 255) -> Color:
    """Decode ``value`` the way the drawing colour setter does.

    Red is taken from bits 8-15, green from bits 4-11 and blue from bits 0-7.
    """
    return Color((value >> 8) & 0xFF, (value >> 4) & 0xFF, value & 0xFF, alpha)