"""Render the highlighted-differences artifact."""

from __future__ import annotations

import contextlib
import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from imgcmp.comparator import mismatch_mask
from imgcmp.errors import HighlightWriteError
from imgcmp.pixels import MAX_SAMPLE, PixelImage

log = logging.getLogger(__name__)

# Opaque full-intensity red at the working (16-bit) depth.
HIGHLIGHT_COLOR: tuple[int, int, int, int] = (MAX_SAMPLE, 0, 0, MAX_SAMPLE)


def build_highlight(base: PixelImage, other: PixelImage) -> PixelImage:
    """Return *base* with every pixel that differs from *other* painted red."""
    mask = mismatch_mask(base, other)
    out = np.array(base.data, dtype=np.uint16, copy=True)
    out[mask] = HIGHLIGHT_COLOR
    return PixelImage(out)


def encode_png(image: PixelImage) -> bytes:
    """Encode *image* as an 8-bit RGBA PNG with fixed encoder settings.

    Samples are narrowed with ``>> 8``, which is exact for 8-bit sources.
    """
    buf = io.BytesIO()
    Image.fromarray(image.to_rgba8()).save(buf, format="PNG", optimize=False)
    return buf.getvalue()


def render_highlight(base: PixelImage, other: PixelImage, output_path: Path) -> Path:
    """Write the highlight image for *base* vs *other* to *output_path*.

    The image is fully built and encoded before the file is touched, so a
    failed scan never leaves a partial artifact. An existing file is
    overwritten.

    Raises:
        ValueError: If the images differ in size.
        HighlightWriteError: If the file cannot be written.
    """
    output_path = Path(output_path)
    payload = encode_png(build_highlight(base, other))
    try:
        output_path.write_bytes(payload)
    except OSError as exc:
        with contextlib.suppress(OSError):
            output_path.unlink(missing_ok=True)
        raise HighlightWriteError(
            exc.errno, f"failed to write highlight image: {exc.strerror}", str(output_path)
        ) from exc
    log.info("differences highlighted in %s", output_path)
    return output_path
