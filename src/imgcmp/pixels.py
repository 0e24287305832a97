"""Uniform in-memory pixel representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

# 8-bit samples are widened by 257 so that 0xFF maps to 0xFFFF.
DEPTH_SCALE = 257
MAX_SAMPLE = 0xFFFF


class Dimensions(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True, eq=False)
class PixelImage:
    """Immutable width x height grid of 16-bit RGBA samples.

    ``data`` has shape ``(height, width, 4)`` and dtype ``uint16``; it is
    copied and marked read-only on construction.
    """

    data: np.ndarray

    def __post_init__(self) -> None:
        if self.data.ndim != 3 or self.data.shape[2] != 4:
            raise ValueError(f"expected (height, width, 4) samples, got {self.data.shape}")
        if self.data.dtype != np.uint16:
            raise ValueError(f"expected uint16 samples, got {self.data.dtype}")
        # own a private copy so the caller's buffer is neither frozen nor aliased
        owned = np.array(self.data, copy=True)
        owned.flags.writeable = False
        object.__setattr__(self, "data", owned)

    @classmethod
    def from_rgba8(cls, arr: np.ndarray) -> PixelImage:
        """Build from an 8-bit ``(height, width, 4)`` array."""
        wide = arr.astype(np.uint16) * DEPTH_SCALE
        return cls(wide)

    @classmethod
    def from_gray16(cls, arr: np.ndarray) -> PixelImage:
        """Build from a ``(height, width)`` 16-bit grayscale array (opaque)."""
        gray = np.clip(arr, 0, MAX_SAMPLE).astype(np.uint16)
        out = np.empty(gray.shape + (4,), dtype=np.uint16)
        out[..., 0] = gray
        out[..., 1] = gray
        out[..., 2] = gray
        out[..., 3] = MAX_SAMPLE
        return cls(out)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    def sample(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the (r, g, b, a) sample at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height}")
        r, g, b, a = (int(v) for v in self.data[y, x])
        return r, g, b, a

    def to_rgba8(self) -> np.ndarray:
        """Narrow samples back to an 8-bit ``(height, width, 4)`` array."""
        return (self.data >> 8).astype(np.uint8)
