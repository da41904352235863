"""Sprites: images split into equally wide animation frames."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .fs import exists


class SpriteError(Exception):
    """Raised when a sprite cannot be loaded."""


@dataclass
class Sprite:
    """An image, its frame count, draw offset and the grabbed region."""

    surface: pygame.Surface
    frames: int
    w: int
    h: int
    offx: int = 0
    offy: int = 0
    selx: int = 0
    sely: int = 0
    selw: int = 0
    selh: int = 0

    @classmethod
    def from_surface(
        cls, surface: pygame.Surface, frames: int = 1, offx: int = 0, offy: int = 0
    ) -> "Sprite":
        """Build a sprite from an already loaded surface."""
        frames = max(frames, 1)
        width, height = surface.get_size()
        return cls(
            surface=surface,
            frames=frames,
            w=width // frames,
            h=height,
            offx=offx,
            offy=offy,
            selx=0,
            sely=0,
            selw=width,
            selh=height,
        )

    @staticmethod
    def _load_surface(fname: str) -> pygame.Surface:
        if not exists(fname):
            raise SpriteError(f'At graphics::sprite::add:\nFile doesn\'t exist: "{fname}".')
        try:
            return pygame.image.load(fname)
        except pygame.error as err:
            raise SpriteError(f"Unsupported image file: {fname}") from err

    @classmethod
    def load(cls, fname: str, frames: int = 1, offx: int = 0, offy: int = 0) -> "Sprite":
        """Load a sprite from an image file."""
        return cls.from_surface(cls._load_surface(fname), frames, offx, offy)

    @classmethod
    def load_ext(
        cls,
        fname: str,
        frames: int = 1,
        offx: int = 0,
        offy: int = 0,
        grabx: int = 0,
        graby: int = 0,
        grabw: int = 0,
        grabh: int = 0,
    ) -> "Sprite":
        """Load a sprite using only a region of the image; zero width or height means all."""
        sprite = cls.from_surface(cls._load_surface(fname), frames, offx, offy)
        sprite.selx = grabx
        sprite.sely = graby
        if grabw:
            sprite.selw = grabw
        if grabh:
            sprite.selh = grabh
        return sprite

    def set_offset(self, x: int, y: int) -> None:
        """Set the point drawn at the sprite's position."""
        self.offx = x
        self.offy = y

    def frame_width(self) -> int:
        """Width of one frame within the grabbed region."""
        return self.selw // self.frames

    def frame_rect(self, frame: int) -> pygame.Rect:
        """Source rectangle of ``frame``; frame numbers wrap around the frame count."""
        width = self.frame_width()
        return pygame.Rect(self.selx + width * (frame % self.frames), self.sely, width, self.selh)