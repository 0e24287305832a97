"""Tests for the doctor command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from imgcmp.cli import main
from imgcmp.commands.doctor import run_checks


def test_checks_cover_stack(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("imgcmp.commands.doctor.find_browser", lambda: None)
    names = [r.name for r in run_checks()]
    assert names == ["python", "pillow", "numpy", "browser"]


def test_missing_browser_is_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("imgcmp.commands.doctor.find_browser", lambda: None)
    result = CliRunner().invoke(main, ["doctor"])
    assert "[warn] browser" in result.output
    assert result.exit_code == 0


def test_browser_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("imgcmp.commands.doctor.find_browser", lambda: Path("/usr/bin/chromium"))
    result = CliRunner().invoke(main, ["doctor"])
    assert "[ok] browser: /usr/bin/chromium" in result.output
