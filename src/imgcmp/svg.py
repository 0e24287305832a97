"""SVG to PNG conversion through a headless Chrome/Chromium process."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from imgcmp import _platform
from imgcmp.discover import find_browser
from imgcmp.errors import RenderError, RenderTimeout

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0


def converted_png_path(svg_path: Path) -> Path:
    """Return where the PNG rendering of *svg_path* is written."""
    return Path(svg_path).with_suffix(".png")


def _browser_args(browser: Path, svg_path: Path, png_path: Path) -> list[str]:
    return [
        str(browser),
        "--headless",
        "--disable-gpu",
        "--hide-scrollbars",
        "--default-background-color=00000000",
        f"--screenshot={png_path.resolve()}",
        _platform.file_uri(svg_path),
    ]


def convert_svg_to_png(
    svg_path: Path,
    *,
    timeout: float = DEFAULT_TIMEOUT_S,
    browser: Path | None = None,
) -> Path:
    """Render *svg_path* to a PNG beside it and return the PNG path.

    Args:
        svg_path: Source SVG file.
        timeout: Seconds to wait for the browser before giving up.
        browser: Browser binary; discovered with find_browser() if None.

    Raises:
        RenderTimeout: Browser did not finish within *timeout*.
        RenderError: No browser, browser failure, or no PNG produced.
    """
    svg_path = Path(svg_path)
    if not svg_path.is_file():
        raise RenderError(f"SVG file not found: {svg_path}")

    if browser is None:
        browser = find_browser()
    if browser is None:
        raise RenderError("no Chrome/Chromium browser found (set IMGCMP_BROWSER)")

    png_path = converted_png_path(svg_path)
    log.info("converting SVG to PNG using headless browser: %s", svg_path)
    try:
        result = subprocess.run(
            _browser_args(browser, svg_path, png_path),
            capture_output=True,
            text=True,
            timeout=timeout,
            **_platform.popen_flags(),
        )
    except subprocess.TimeoutExpired as exc:
        raise RenderTimeout(f"SVG render timed out after {timeout:g}s: {svg_path}") from exc
    except OSError as exc:
        raise RenderError(f"failed to start browser {browser}: {exc}") from exc

    if result.returncode != 0:
        detail = result.stderr.strip().splitlines()[-1:] or [f"exit {result.returncode}"]
        raise RenderError(f"failed to render SVG with headless browser: {detail[0]}")
    if not png_path.is_file():
        raise RenderError(f"browser produced no PNG for {svg_path}")

    log.info("SVG converted to PNG: %s", png_path)
    return png_path
