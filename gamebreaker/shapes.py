"""Rasterisation helpers for circles and simple hit tests."""

from __future__ import annotations


def _circle_steps(radius: int):
    offset_x, offset_y = 0, radius
    d = radius - 1
    while offset_y >= offset_x:
        yield offset_x, offset_y
        if d >= 2 * offset_x:
            d -= 2 * offset_x + 1
            offset_x += 1
        elif d < 2 * (radius - offset_y):
            d += 2 * offset_y - 1
            offset_y -= 1
        else:
            d += 2 * (offset_y - offset_x - 1)
            offset_y -= 1
            offset_x += 1


def circle_outline_points(x: int, y: int, radius: int) -> list[tuple[int, int]]:
    """Points of a circle outline, eight symmetric points per step."""
    points = []
    for ox, oy in _circle_steps(radius):
        points.extend(
            [
                (x + ox, y + oy),
                (x + oy, y + ox),
                (x - ox, y + oy),
                (x - oy, y + ox),
                (x + ox, y - oy),
                (x + oy, y - ox),
                (x - ox, y - oy),
                (x - oy, y - ox),
            ]
        )
    return points


def circle_fill_spans(x: int, y: int, radius: int) -> list[tuple[int, int, int, int]]:
    """Horizontal lines ``(x1, y1, x2, y2)`` that together fill a circle."""
    spans = []
    for ox, oy in _circle_steps(radius):
        spans.extend(
            [
                (x - oy, y + ox, x + oy, y + ox),
                (x - ox, y + oy, x + ox, y + oy),
                (x - ox, y - oy, x + ox, y - oy),
                (x - oy, y - ox, x + oy, y - ox),
            ]
        )
    return spans


def point_in_rect(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> bool:
    """True if ``(px, py)`` lies in the rectangle from ``(x1, y1)`` to ``(x2, y2)``."""
    return x1 <= px <= x2 and y1 <= py <= y2