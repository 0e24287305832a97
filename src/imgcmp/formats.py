"""Supported input encodings, resolved from the file extension."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from imgcmp.errors import UnsupportedFormat


class ImageFormat(Enum):
    PNG = "png"
    JPEG = "jpeg"
    SVG = "svg"


_SUFFIXES: dict[str, ImageFormat] = {
    ".png": ImageFormat.PNG,
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".svg": ImageFormat.SVG,
}


def resolve_format(path: Path) -> ImageFormat:
    """Map *path*'s suffix to an ImageFormat (case-sensitive).

    Raises:
        UnsupportedFormat: For any other suffix. No I/O is attempted.
    """
    fmt = _SUFFIXES.get(path.suffix)
    if fmt is None:
        raise UnsupportedFormat(path)
    return fmt
