from __future__ import annotations

import sys
from dataclasses import dataclass

import click
import numpy as np
import PIL

from imgcmp.discover import BROWSER_ENV, find_browser


@dataclass(frozen=True)
class CheckResult:
    name: str
    ok: bool
    detail: str
    required: bool = True


def _check_python() -> CheckResult:
    return CheckResult("python", sys.version_info >= (3, 10), sys.version.split()[0])


def _check_pillow() -> CheckResult:
    from PIL import features

    ok = bool(features.check_codec("zlib")) and bool(features.check_codec("jpg"))
    detail = PIL.__version__ if ok else f"{PIL.__version__} (missing PNG or JPEG codec)"
    return CheckResult("pillow", ok, detail)


def _check_numpy() -> CheckResult:
    return CheckResult("numpy", True, np.__version__)


def _check_browser() -> CheckResult:
    path = find_browser()
    if path is None:
        return CheckResult(
            "browser", False, f"not found; SVG inputs unsupported (set {BROWSER_ENV})", False
        )
    return CheckResult("browser", True, str(path), False)


def run_checks() -> list[CheckResult]:
    return [_check_python(), _check_pillow(), _check_numpy(), _check_browser()]


@click.command("doctor")
def doctor_cmd() -> None:
    """Check that image decoding and SVG rendering are available."""
    results = run_checks()
    for r in results:
        if r.ok:
            mark = "ok"
        else:
            mark = "FAIL" if r.required else "warn"
        click.echo(f"[{mark}] {r.name}: {r.detail}")
    if any(not r.ok and r.required for r in results):
        raise SystemExit(1)
