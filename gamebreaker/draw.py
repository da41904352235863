"""Drawing onto a pygame surface through a view that offsets world coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from .colors import Color, color_from_hex, hsv_to_rgb
from .shapes import circle_fill_spans, circle_outline_points, point_in_rect
from .sprites import Sprite


@dataclass
class View:
    """The visible part of the room: its top-left corner and whether it is shown."""

    x: float = 0.0
    y: float = 0.0
    enabled: bool = True


@dataclass(frozen=True)
class ButtonState:
    """Result of drawing a button: whether it was clicked and whether it is hovered."""

    released: bool
    hovered: bool


def _channel(value: float) -> int:
    return min(255, max(0, int(value)))


class Canvas:
    """Draws shapes and sprites with a current colour and text alignment."""

    def __init__(self, surface: pygame.Surface, view: View | None = None) -> None:
        self.surface = surface
        self.view = view if view is not None else View()
        self._color = Color(255, 255, 255, 255)
        self.halign = 0.0
        self.valign = 0.0

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Convert world coordinates to surface coordinates."""
        return x - self.view.x, y - self.view.y

    def _screen_int(self, x: float, y: float) -> tuple[int, int]:
        sx, sy = self.to_screen(x, y)
        return int(sx), int(sy)

    # Colour state

    def color(self, value: int) -> None:
        """Set the drawing colour from a packed integer, keeping the current alpha."""
        self._color = color_from_hex(value, self._color.a)

    def color_rgb(self, r: int, g: int, b: int) -> None:
        """Set the drawing colour from channels, keeping the current alpha."""
        self._color = Color(r, g, b, self._color.a)

    def color_sdl(self, color: Color) -> None:
        """Set the drawing colour, alpha included."""
        self._color = Color(*color)

    def color_hsv(self, h: float, s: float, v: float) -> None:
        """Set the drawing colour from hue, saturation and value, keeping the alpha."""
        r, g, b = hsv_to_rgb(h, s, v)
        self._color = Color(_channel(r), _channel(g), _channel(b), self._color.a)

    def color_get(self) -> Color:
        """Return the current drawing colour."""
        return self._color

    def alpha(self, alpha: float) -> None:
        """Set the alpha of the drawing colour."""
        self._color = self._color.with_alpha(int(alpha))

    def set_text_align(self, halign: float, valign: float) -> None:
        """Set text alignment as fractions of the text's width and height."""
        self.halign = halign
        self.valign = valign

    # Primitives

    def point(self, x: int, y: int) -> pygame.Rect:
        """Draw one pixel."""
        sx, sy = self._screen_int(x, y)
        self.surface.set_at((sx, sy), tuple(self._color))
        return pygame.Rect(sx, sy, 1, 1)

    def line(self, x1: int, y1: int, x2: int, y2: int) -> pygame.Rect:
        """Draw a line between two points."""
        start = self._screen_int(x1, y1)
        end = self._screen_int(x2, y2)
        return pygame.draw.line(self.surface, tuple(self._color), start, end)

    def rect(self, x: int, y: int, w: int, h: int, outline: bool = False) -> pygame.Rect:
        """Draw a rectangle, filled unless ``outline`` is true."""
        sx, sy = self._screen_int(x, y)
        width = 1 if outline else 0
        return pygame.draw.rect(self.surface, tuple(self._color), pygame.Rect(sx, sy, w, h), width)

    def circle(self, x: int, y: int, r: int, outline: bool = False) -> pygame.Rect:
        """Draw a circle around ``(x, y)``, filled unless ``outline`` is true."""
        sx, sy = self._screen_int(x, y)
        colour = tuple(self._color)
        if outline:
            for point in circle_outline_points(sx, sy, r):
                self.surface.set_at(point, colour)
        else:
            for x1, y1, x2, y2 in circle_fill_spans(sx, sy, r):
                pygame.draw.line(self.surface, colour, (x1, y1), (x2, y2))
        return pygame.Rect(sx - r, sy - r, 2 * r + 1, 2 * r + 1)

    def triangle(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> pygame.Rect:
        """Draw a filled triangle in the current colour."""
        points = [self.to_screen(x1, y1), self.to_screen(x2, y2), self.to_screen(x3, y3)]
        return pygame.draw.polygon(self.surface, tuple(self._color), points)

    # Sprites

    def _render(
        self,
        spr: Sprite,
        src: pygame.Rect,
        left: float,
        top: float,
        width: float,
        height: float,
        rot: float,
        flip_x: bool,
        flip_y: bool,
    ) -> pygame.Rect:
        src = src.clip(spr.surface.get_rect())
        w, h = round(abs(width)), round(abs(height))
        if src.width == 0 or src.height == 0 or w == 0 or h == 0:
            return pygame.Rect(round(left), round(top), 0, 0)

        image = spr.surface.subsurface(src).copy()
        image = pygame.transform.scale(image, (w, h))
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        colour = self._color
        if (colour.r, colour.g, colour.b) != (255, 255, 255):
            image.fill((colour.r, colour.g, colour.b, 255), special_flags=pygame.BLEND_RGBA_MULT)
        if colour.a < 255:
            image.set_alpha(colour.a)

        if not rot:
            return self.surface.blit(image, (round(left), round(top)))

        pivot_x, pivot_y = left + spr.offx, top + spr.offy
        vx, vy = left + w / 2 - pivot_x, top + h / 2 - pivot_y
        angle = math.radians(rot)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        center = (
            round(pivot_x + vx * cos_a - vy * sin_a),
            round(pivot_y + vx * sin_a + vy * cos_a),
        )
        rotated = pygame.transform.rotate(image, -rot)
        return self.surface.blit(rotated, rotated.get_rect(center=center))

    def sprite(
        self,
        spr: Sprite,
        frame: int,
        x: float,
        y: float,
        xscale: float = 1.0,
        yscale: float = 1.0,
        rot: float = 0.0,
    ) -> pygame.Rect:
        """Draw a frame of ``spr`` scaled and rotated clockwise about its offset."""
        sx, sy = self.to_screen(x, y)
        src = spr.frame_rect(frame)
        return self._render(
            spr,
            src,
            sx - spr.offx * xscale,
            sy - spr.offy * yscale,
            src.width * xscale,
            (spr.selh - spr.sely) * yscale,
            rot,
            xscale < 0,
            yscale < 0,
        )

    def sprite_stretched(
        self,
        spr: Sprite,
        frame: int,
        x: float,
        y: float,
        w: float,
        h: float,
        xscale: float = 1.0,
        yscale: float = 1.0,
        rot: float = 0.0,
    ) -> pygame.Rect:
        """Draw a frame of ``spr`` stretched to ``w`` by ``h`` before scaling."""
        sx, sy = self.to_screen(x, y)
        frame_rect = spr.frame_rect(frame)
        src = pygame.Rect(frame_rect.x, spr.sely, frame_rect.width, spr.selh - spr.sely)
        return self._render(
            spr,
            src,
            sx - spr.offx * xscale,
            sy - spr.offy * yscale,
            w * xscale,
            h * yscale,
            rot,
            xscale < 0,
            yscale < 0,
        )

    def button(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        spr: Sprite,
        frame: int,
        mouse_x: float,
        mouse_y: float,
        holding: bool,
        released: bool,
    ) -> ButtonState:
        """Draw a button sprite and report whether the mouse clicked it.

        While the mouse is held over the button its last frame is shown.
        Nothing is drawn when the view is disabled.
        """
        if not self.view.enabled:
            return ButtonState(False, False)
        inside = point_in_rect(mouse_x, mouse_y, x, y, x + w, y + h)
        shown = spr.frames - 1 if inside and holding else frame
        self.sprite(spr, shown, x, y, w / spr.w, h / spr.h, 0)
        return ButtonState(bool(inside and released), bool(inside))