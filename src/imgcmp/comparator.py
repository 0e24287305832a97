"""Exact per-pixel equality between two equally-sized images."""

from __future__ import annotations

import numpy as np

from imgcmp.pixels import PixelImage


def _require_same_size(a: PixelImage, b: PixelImage) -> None:
    if a.dimensions != b.dimensions:
        raise ValueError(f"size mismatch: {tuple(a.dimensions)} vs {tuple(b.dimensions)}")


def mismatch_mask(a: PixelImage, b: PixelImage) -> np.ndarray:
    """Return a (height, width) bool mask, True where any channel differs.

    This is the only equality predicate in the package; counting and
    highlighting both go through it.
    """
    _require_same_size(a, b)
    return np.any(a.data != b.data, axis=2)


def count_mismatches(a: PixelImage, b: PixelImage) -> int:
    """Count coordinates whose samples differ. Scans the whole image."""
    return int(np.count_nonzero(mismatch_mask(a, b)))
