"""Packing of RGBA colours into 32-bit integers and PPM image output."""

from __future__ import annotations

import os
from collections.abc import Sequence

__all__ = ["pack_color", "unpack_color", "write_ppm"]


def _check_component(name: str, value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"colour component {name}={value} is outside 0..255")
    return value


def pack_color(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack four 8-bit components into one integer, red in the lowest byte."""
    r = _check_component("r", r)
    g = _check_component("g", g)
    b = _check_component("b", b)
    a = _check_component("a", a)
    return (a << 24) | (b << 16) | (g << 8) | r


def unpack_color(color: int) -> tuple[int, int, int, int]:
    """Split a packed colour into its (r, g, b, a) components."""
    return (
        color & 0xFF,
        (color >> 8) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 24) & 0xFF,
    )


def write_ppm(
    path: str | os.PathLike[str],
    image: Sequence[int],
    width: int,
    height: int,
) -> None:
    """Write packed colours as a binary (P6) PPM file, dropping alpha."""
    if len(image) != width * height:
        raise ValueError(
            f"image holds {len(image)} pixels, expected {width}x{height}"
        )
    body = bytearray()
    for color in image:
        r, g, b, _ = unpack_color(color)
        body += bytes((r, g, b))
    with open(path, "wb") as fh:
        fh.write(f"P6\n{width} {height}\n255\n".encode("ascii"))
        fh.write(body)