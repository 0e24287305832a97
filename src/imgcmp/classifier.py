"""Comparison outcomes and tolerance-based classification."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from imgcmp.pixels import Dimensions


@dataclass(frozen=True)
class DimensionMismatch:
    base: Dimensions
    compare: Dimensions

    def describe(self) -> str:
        return "Images have different dimensions"


@dataclass(frozen=True)
class Equal:
    total_pixels: int = 0

    @property
    def percentage(self) -> float:
        return 0.0

    def describe(self) -> str:
        return "Images are equal"


@dataclass(frozen=True)
class EqualWithinTolerance:
    percentage: float
    mismatch_count: int
    total_pixels: int

    def describe(self) -> str:
        return f"Images are equal with tolerance: {self.percentage:.2f}"


@dataclass(frozen=True)
class Different:
    percentage: float
    mismatch_count: int
    total_pixels: int
    highlight_path: Path | None = None

    def describe(self) -> str:
        return f"Images are not equal. Differences highlighted in: {self.highlight_path}"


ComparisonOutcome = DimensionMismatch | Equal | EqualWithinTolerance | Different


def classify(
    mismatch_count: int,
    total_pixels: int,
    tolerance: float = 0.0,
) -> Equal | EqualWithinTolerance | Different:
    """Classify an aggregate mismatch count against a percentage tolerance.

    A percentage exactly equal to *tolerance* is within tolerance. The
    percentage carried by the outcome is not rounded.

    Raises:
        ValueError: If *tolerance* is negative.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    if total_pixels <= 0 or mismatch_count == 0:
        return Equal(total_pixels=max(total_pixels, 0))

    percentage = 100.0 * mismatch_count / total_pixels
    if percentage <= tolerance:
        return EqualWithinTolerance(percentage, mismatch_count, total_pixels)
    return Different(percentage, mismatch_count, total_pixels)
