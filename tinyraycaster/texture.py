"""Texture atlases: N square textures packed side by side in one image."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .colors import pack_color

__all__ = ["TextureError", "Texture", "load_texture"]


class TextureError(Exception):
    """Raised when an image cannot be used as a texture atlas."""


class Texture:
    """A horizontal strip of square textures of equal size."""

    def __init__(self, width: int, height: int, pixels: Sequence[int]) -> None:
        if width <= 0 or height <= 0:
            raise TextureError(f"invalid texture size {width}x{height}")
        if len(pixels) != width * height:
            raise TextureError(
                f"texture holds {len(pixels)} pixels, expected {width}x{height}"
            )
        if width % height != 0:
            raise TextureError(
                "the texture file must contain N square textures packed horizontally"
            )
        self.width = width
        self.height = height
        self.count = width // height
        self.size = width // self.count
        self.pixels = list(pixels)

    @classmethod
    def from_rgba(cls, width: int, height: int, data: bytes) -> Texture:
        """Build a texture from raw bytes holding R, G, B, A per pixel."""
        if len(data) != width * height * 4:
            raise TextureError("the texture must be a 32 bit image")
        view = memoryview(data)
        pixels = [
            pack_color(view[k], view[k + 1], view[k + 2], view[k + 3])
            for k in range(0, len(view), 4)
        ]
        return cls(width, height, pixels)

    def texel(self, i: int, j: int, idx: int) -> int:
        """Return pixel (i, j) of texture number idx."""
        if not (0 <= i < self.size and 0 <= j < self.size and 0 <= idx < self.count):
            raise IndexError(f"texel ({i}, {j}) of texture {idx} out of range")
        return self.pixels[i + idx * self.size + j * self.width]

    def column(self, tex_id: int, tex_coord: int, height: int) -> list[int]:
        """Return one texture column scaled to the given height."""
        if not (0 <= tex_coord < self.size and 0 <= tex_id < self.count):
            raise IndexError(
                f"column {tex_coord} of texture {tex_id} out of range"
            )
        return [
            self.texel(tex_coord, (y * self.size) // height, tex_id)
            for y in range(height)
        ]


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file as a texture atlas."""
    import pygame

    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise TextureError(f"cannot load texture {os.fspath(path)}: {exc}") from exc
    width, height = surface.get_size()
    data = pygame.image.tobytes(surface, "RGBA")
    return Texture.from_rgba(width, height, data)