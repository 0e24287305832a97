"""Error taxonomy for image comparison.

Every failure is terminal for the current comparison; nothing here is
retried. A dimension mismatch is not an error and has no class here.
"""

from __future__ import annotations

from pathlib import Path


class ImageCompareError(Exception):
    """Base class for all imgcmp failures."""


class UnsupportedFormat(ImageCompareError, ValueError):
    """File extension is not one of the accepted encodings."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"unsupported image format: {path.suffix or '<none>'} ({path})")


class ImageReadError(ImageCompareError, OSError):
    """Source image could not be opened or read."""


class DecodeError(ImageCompareError):
    """Bytes were read but do not parse as the claimed format."""


class HighlightWriteError(ImageCompareError, OSError):
    """Highlight artifact could not be written."""


class RenderError(ImageCompareError):
    """External SVG renderer failed or produced no output."""


class RenderTimeout(RenderError):
    """External SVG renderer exceeded its time budget."""
