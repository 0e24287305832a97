"""Post-run removal of intermediate and output files."""

from __future__ import annotations

import logging
from pathlib import Path

from imgcmp.classifier import ComparisonOutcome, Different
from imgcmp.formats import ImageFormat, resolve_format
from imgcmp.svg import converted_png_path

log = logging.getLogger(__name__)


def _remove(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        log.debug("nothing to remove at %s", path)
        return False
    return True


def _is_svg(path: Path) -> bool:
    try:
        return resolve_format(path) is ImageFormat.SVG
    except ValueError:
        return False


def cleanup_files(
    base_path: Path,
    compare_path: Path,
    outcome: ComparisonOutcome | None,
) -> list[Path]:
    """Remove PNGs converted from SVG inputs and the highlight artifact.

    The highlight is removed only when *outcome* is Different. Files that
    are already gone are skipped.

    Returns:
        Paths that were actually removed, in removal order.
    """
    removed: list[Path] = []
    for src in (Path(base_path), Path(compare_path)):
        if _is_svg(src):
            png = converted_png_path(src)
            if png not in removed and _remove(png):
                removed.append(png)

    if isinstance(outcome, Different) and outcome.highlight_path is not None:
        if _remove(outcome.highlight_path):
            removed.append(outcome.highlight_path)
    return removed
