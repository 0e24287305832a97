"""imgcmp compare command -- pixel-level image comparison."""

from __future__ import annotations

import functools
import sys
from pathlib import Path

import click

from imgcmp.classifier import ComparisonOutcome, Equal, EqualWithinTolerance
from imgcmp.cleanup import cleanup_files
from imgcmp.errors import ImageCompareError
from imgcmp.formatters.json_fmt import outcome_to_dict, write_json
from imgcmp.image_compare import compare_images
from imgcmp.svg import DEFAULT_TIMEOUT_S, convert_svg_to_png


def _exit_code(outcome: ComparisonOutcome) -> int:
    return 0 if isinstance(outcome, (Equal, EqualWithinTolerance)) else 1


@click.command("compare")
@click.option(
    "--base",
    "base",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the base image.",
)
@click.option(
    "--compare",
    "other",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the image to compare.",
)
@click.option(
    "--tolerance",
    default=0.0,
    type=click.FloatRange(min=0.0),
    help="Tolerance level in percent of mismatched pixels.",
)
@click.option("--clean", is_flag=True, help="Remove intermediate and output files afterwards.")
@click.option(
    "--svg-timeout",
    default=DEFAULT_TIMEOUT_S,
    show_default=True,
    type=click.FloatRange(min=0.0, min_open=True),
    help="Seconds allowed for rendering an SVG input.",
)
@click.option("--json", "use_json", is_flag=True, help="JSON output.")
def compare_cmd(
    base: Path,
    other: Path,
    tolerance: float,
    clean: bool,
    svg_timeout: float,
    use_json: bool,
) -> None:
    """Compare two PNG, JPEG or SVG images pixel-by-pixel.

    Exit 0 if images are equal (within tolerance), exit 1 if they differ
    or have different dimensions, exit 2 on error.
    """
    converter = functools.partial(convert_svg_to_png, timeout=svg_timeout)
    try:
        outcome = compare_images(base, other, tolerance, svg_converter=converter)
    except (ImageCompareError, OSError, ValueError) as exc:
        click.echo(f"error: {exc}", err=True)
        sys.exit(2)

    if use_json:
        write_json(outcome_to_dict(outcome, tolerance=tolerance))
    else:
        click.echo(f"Comparison result: {outcome.describe()}")

    if clean:
        for path in cleanup_files(base, other, outcome):
            click.echo(f"removed: {path}", err=use_json)

    sys.exit(_exit_code(outcome))
