"""Platform abstraction layer for imgcmp.

Keeps OS-specific paths and process flags in one module so that callers
never need ``sys.platform`` checks themselves.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

_WIN: bool = sys.platform == "win32"
_MAC: bool = sys.platform == "darwin"

BROWSER_NAMES: tuple[str, ...] = (
    "chromium",
    "chromium-browser",
    "google-chrome",
    "google-chrome-stable",
    "chrome",
)


def browser_search_paths() -> list[Path]:
    """Return well-known install locations for a Chrome/Chromium binary."""
    if _WIN:  # pragma: no cover
        paths: list[Path] = []
        for env in ("PROGRAMFILES", "PROGRAMFILES(X86)", "LOCALAPPDATA"):
            base = os.environ.get(env, "")
            if base:
                paths.append(Path(base) / "Google" / "Chrome" / "Application" / "chrome.exe")
                paths.append(Path(base) / "Chromium" / "Application" / "chrome.exe")
        return paths
    if _MAC:
        return [
            Path("/Applications/Google Chrome.app/Contents/MacOS/Google Chrome"),
            Path("/Applications/Chromium.app/Contents/MacOS/Chromium"),
            Path.home() / "Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        ]
    return [
        Path("/usr/bin/chromium"),
        Path("/usr/bin/chromium-browser"),
        Path("/usr/bin/google-chrome"),
        Path("/snap/bin/chromium"),
        Path("/opt/google/chrome/chrome"),
    ]


def file_uri(path: Path) -> str:
    """Return a ``file://`` URI for *path* (made absolute)."""
    return path.resolve().as_uri()


def popen_flags() -> dict[str, Any]:
    """Return extra kwargs for subprocess calls on this platform."""
    if _WIN:  # pragma: no cover
        return {"creationflags": 0x08000000}  # CREATE_NO_WINDOW
    return {}
