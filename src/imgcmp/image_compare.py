"""Pixel-level image comparison: decode, size-check, count, classify, render."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from imgcmp.classifier import ComparisonOutcome, Different, DimensionMismatch, Equal, classify
from imgcmp.comparator import count_mismatches
from imgcmp.decoder import SvgConverter, decode
from imgcmp.highlight import render_highlight

log = logging.getLogger(__name__)

HIGHLIGHT_NAME = "highlighted_differences.png"


def highlight_path_for(base_path: Path, name: str = HIGHLIGHT_NAME) -> Path:
    """Return the highlight artifact location for *base_path*."""
    return Path(base_path).parent / name


def compare_images(
    base_path: Path,
    compare_path: Path,
    tolerance: float = 0.0,
    *,
    svg_converter: SvgConverter | None = None,
    highlight_name: str = HIGHLIGHT_NAME,
) -> ComparisonOutcome:
    """Compare two images pixel-by-pixel.

    Args:
        base_path: Path to the base (expected) image.
        compare_path: Path to the image compared against it.
        tolerance: Maximum mismatched-pixel percentage still counted as equal.
        svg_converter: Override for the SVG-to-PNG step.
        highlight_name: File name of the artifact written beside *base_path*.

    Returns:
        Exactly one of DimensionMismatch, Equal, EqualWithinTolerance or
        Different. Only Different writes a file.

    Raises:
        UnsupportedFormat, ImageReadError, DecodeError, RenderError: From
            decoding either input.
        HighlightWriteError: If the highlight artifact cannot be written.
        ValueError: If *tolerance* is negative.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    base_path = Path(base_path)
    base = decode(base_path, svg_converter=svg_converter)
    other = decode(Path(compare_path), svg_converter=svg_converter)

    if base.dimensions != other.dimensions:
        log.debug("dimension mismatch: %s vs %s", base.dimensions, other.dimensions)
        return DimensionMismatch(base.dimensions, other.dimensions)

    if base.total_pixels == 0:
        return Equal(total_pixels=0)

    mismatches = count_mismatches(base, other)
    outcome = classify(mismatches, base.total_pixels, tolerance)
    log.debug("%d/%d pixels differ", mismatches, base.total_pixels)

    if isinstance(outcome, Different):
        output = render_highlight(base, other, highlight_path_for(base_path, highlight_name))
        outcome = dataclasses.replace(outcome, highlight_path=output)
    return outcome
