"""Headless browser discovery for SVG rendering."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from imgcmp import _platform

log = logging.getLogger(__name__)

BROWSER_ENV = "IMGCMP_BROWSER"


def find_browser() -> Path | None:
    """Discover a Chrome/Chromium binary.

    Search order:
        1. ``IMGCMP_BROWSER`` environment variable
        2. ``shutil.which`` over ``_platform.BROWSER_NAMES`` -- PATH
        3. ``_platform.browser_search_paths()`` -- platform candidates

    Returns:
        Path if found, else None.
    """
    env_path = os.environ.get(BROWSER_ENV)
    if env_path:
        candidate = Path(env_path)
        if candidate.exists():
            return candidate
        log.warning("%s points to a missing file: %s", BROWSER_ENV, env_path)

    for name in _platform.BROWSER_NAMES:
        which_result = shutil.which(name)
        if which_result:
            return Path(which_result)

    for p in _platform.browser_search_paths():
        if p.exists():
            return p

    return None
