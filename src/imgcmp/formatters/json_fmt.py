"""JSON output formatter for comparison outcomes."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from imgcmp.classifier import (
    ComparisonOutcome,
    Different,
    DimensionMismatch,
    Equal,
    EqualWithinTolerance,
)

_KINDS: dict[type, str] = {
    DimensionMismatch: "dimension_mismatch",
    Equal: "equal",
    EqualWithinTolerance: "equal_within_tolerance",
    Different: "different",
}


def outcome_to_dict(outcome: ComparisonOutcome, *, tolerance: float) -> dict[str, Any]:
    """Flatten *outcome* into a JSON-serialisable dict."""
    data: dict[str, Any] = {
        "result": _KINDS[type(outcome)],
        "message": outcome.describe(),
        "tolerance": tolerance,
    }
    if isinstance(outcome, DimensionMismatch):
        data["base_size"] = list(outcome.base)
        data["compare_size"] = list(outcome.compare)
        return data
    data["percentage"] = outcome.percentage
    data["total_pixels"] = outcome.total_pixels
    data["diff_pixels"] = getattr(outcome, "mismatch_count", 0)
    if isinstance(outcome, Different):
        data["highlight_path"] = str(outcome.highlight_path) if outcome.highlight_path else None
    return data


def write_json(data: Any, *, out: TextIO | None = None, indent: int = 2) -> None:
    """Write data as formatted JSON to the given output stream."""
    dest = out or sys.stdout
    dest.write(json.dumps(data, default=str, indent=indent) + "\n")
