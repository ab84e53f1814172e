"""Lint project docstrings with pydocstyle."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

APP_DIR = Path(__file__).resolve().parent.parent


@pytest.mark.skipif(
    shutil.which("pydocstyle") is None, reason="pydocstyle is not installed"
)
def test_pydocstyle() -> None:
    """Run pydocstyle on the admin, views and league scope modules."""
    result = subprocess.run(
        [
            "pydocstyle",
            str(APP_DIR / "admin.py"),
            str(APP_DIR / "site" / "views"),
            str(APP_DIR / "context.py"),
            str(APP_DIR / "catalog.py"),
            str(APP_DIR / "selection.py"),
            str(APP_DIR / "exceptions.py"),
            str(APP_DIR / "management" / "commands" / "load_demo_catalog.py"),
        ],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stdout + result.stderr
