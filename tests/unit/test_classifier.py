"""Tests for tolerance classification and outcome text."""

from __future__ import annotations

from pathlib import Path

import pytest

from imgcmp.classifier import (
    Different,
    DimensionMismatch,
    Equal,
    EqualWithinTolerance,
    classify,
)
from imgcmp.pixels import Dimensions


class TestClassify:
    def test_zero_mismatches_is_equal(self) -> None:
        assert isinstance(classify(0, 4, 0.0), Equal)

    def test_zero_mismatches_ignores_tolerance(self) -> None:
        assert isinstance(classify(0, 4, 50.0), Equal)

    def test_zero_total_is_equal(self) -> None:
        assert isinstance(classify(0, 0, 0.0), Equal)

    def test_within_tolerance(self) -> None:
        r = classify(1, 4, 30.0)
        assert isinstance(r, EqualWithinTolerance)
        assert r.percentage == 25.0
        assert r.mismatch_count == 1

    def test_boundary_is_within(self) -> None:
        """1/16 pixels = 6.25%, tolerance 6.25 -> within (inclusive)."""
        assert isinstance(classify(1, 16, 6.25), EqualWithinTolerance)

    def test_above_tolerance(self) -> None:
        r = classify(1, 4, 0.0)
        assert isinstance(r, Different)
        assert r.percentage == 25.0
        assert r.highlight_path is None

    def test_percentage_unrounded(self) -> None:
        r = classify(1, 3, 0.0)
        assert r.percentage == pytest.approx(100 / 3)
        assert r.percentage != 33.33

    @pytest.mark.parametrize("tolerance", [25.0, 25.0001, 30.0, 100.0])
    def test_monotonic_within(self, tolerance: float) -> None:
        assert isinstance(classify(1, 4, tolerance), EqualWithinTolerance)

    @pytest.mark.parametrize("tolerance", [0.0, 10.0, 24.9999])
    def test_monotonic_different(self, tolerance: float) -> None:
        assert isinstance(classify(1, 4, tolerance), Different)

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            classify(1, 4, -1.0)


class TestDescribe:
    def test_dimension_mismatch(self) -> None:
        r = DimensionMismatch(Dimensions(3, 3), Dimensions(2, 2))
        assert r.describe() == "Images have different dimensions"

    def test_equal(self) -> None:
        assert Equal().describe() == "Images are equal"

    def test_within_two_decimals(self) -> None:
        r = EqualWithinTolerance(100 / 3, 1, 3)
        assert r.describe() == "Images are equal with tolerance: 33.33"

    def test_different_names_path(self) -> None:
        r = Different(25.0, 1, 4, Path("out/highlighted_differences.png"))
        assert r.describe() == (
            "Images are not equal. Differences highlighted in: out/highlighted_differences.png"
        )
