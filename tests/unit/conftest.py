"""Shared helpers for imgcmp unit tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from imgcmp.pixels import PixelImage

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)


def solid(
    tmp_path: Path,
    name: str,
    color: tuple[int, ...] | int,
    size: tuple[int, int] = (2, 2),
    mode: str = "RGBA",
) -> Path:
    """Create a solid-color image file and return its path."""
    p = tmp_path / name
    Image.new(mode, size, color).save(p)
    return p


def with_pixels(
    tmp_path: Path,
    name: str,
    base: tuple[int, int, int, int],
    pixels: dict[tuple[int, int], tuple[int, int, int, int]],
    size: tuple[int, int] = (2, 2),
) -> Path:
    """Create a solid image with selected (x, y) pixels overridden."""
    img = Image.new("RGBA", size, base)
    for xy, color in pixels.items():
        img.putpixel(xy, color)
    p = tmp_path / name
    img.save(p)
    return p


def pixel_image(
    color: tuple[int, int, int, int],
    size: tuple[int, int] = (2, 2),
    pixels: dict[tuple[int, int], tuple[int, int, int, int]] | None = None,
) -> PixelImage:
    """Build an in-memory PixelImage from 8-bit colors."""
    w, h = size
    arr = np.empty((h, w, 4), dtype=np.uint8)
    arr[:, :] = color
    for (x, y), c in (pixels or {}).items():
        arr[y, x] = c
    return PixelImage.from_rgba8(arr)


def gray16(tmp_path: Path, name: str, value: int, size: tuple[int, int] = (2, 2)) -> Path:
    """Create a solid 16-bit grayscale PNG and return its path."""
    w, h = size
    p = tmp_path / name
    Image.fromarray(np.full((h, w), value, dtype=np.uint16)).save(p)
    return p
