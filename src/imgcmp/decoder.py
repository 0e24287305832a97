"""Decode PNG / JPEG (and SVG via an external renderer) into PixelImage."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from imgcmp.errors import DecodeError, ImageReadError
from imgcmp.formats import ImageFormat, resolve_format
from imgcmp.pixels import PixelImage

log = logging.getLogger(__name__)

SvgConverter = Callable[[Path], Path]

# Pillow keeps full 16-bit precision only for single-channel images.
_GRAY16_MODES = frozenset({"I", "I;16", "I;16L", "I;16B", "I;16N"})

_PIL_FORMATS: dict[ImageFormat, str] = {
    ImageFormat.PNG: "PNG",
    ImageFormat.JPEG: "JPEG",
}


def _decode_raster(path: Path, fmt: ImageFormat) -> PixelImage:
    """Decode a raster file with Pillow, restricted to the expected format."""
    try:
        fp = path.open("rb")
    except OSError as exc:
        raise ImageReadError(exc.errno, f"failed to open file: {exc.strerror}", str(path)) from exc

    with fp:
        try:
            with Image.open(fp, formats=[_PIL_FORMATS[fmt]]) as img:
                if img.mode in _GRAY16_MODES:
                    return PixelImage.from_gray16(np.asarray(img))
                rgba = img.convert("RGBA")
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            SyntaxError,
            ValueError,
        ) as exc:
            raise DecodeError(f"failed to decode {fmt.value} image {path}: {exc}") from exc
        except OSError as exc:
            # truncated or corrupt streams surface from Pillow as plain OSError
            raise DecodeError(f"failed to decode {fmt.value} image {path}: {exc}") from exc

    return PixelImage.from_rgba8(np.asarray(rgba, dtype=np.uint8))


def _decode_svg(path: Path, svg_converter: SvgConverter | None) -> PixelImage:
    if svg_converter is None:
        from imgcmp.svg import convert_svg_to_png

        svg_converter = convert_svg_to_png
    png_path = svg_converter(path)
    return _decode_raster(png_path, ImageFormat.PNG)


def decode(path: Path, *, svg_converter: SvgConverter | None = None) -> PixelImage:
    """Decode the image at *path* into a 16-bit RGBA PixelImage.

    Args:
        path: Image file; its suffix selects the decoder.
        svg_converter: Callable turning an SVG path into a PNG path.
            Defaults to the headless-browser renderer.

    Raises:
        UnsupportedFormat: Suffix is not .png, .jpg, .jpeg or .svg.
        ImageReadError: File could not be opened.
        DecodeError: File contents are not a valid image of that format.
        RenderError: SVG conversion failed.
    """
    path = Path(path)
    fmt = resolve_format(path)
    log.debug("loading image: %s (%s)", path, fmt.value)
    if fmt is ImageFormat.SVG:
        return _decode_svg(path, svg_converter)
    return _decode_raster(path, fmt)
