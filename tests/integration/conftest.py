"""Integration test fixtures.

Documents are written to tmp_path so the file-loading path is exercised, and
CLI runs get an isolated environment with no inherited PAGEMENU__ settings.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def page_file(tmp_path: Path, sample_document: str) -> Path:
    path = tmp_path / "page.html"
    path.write_text(sample_document, encoding="utf-8")
    return path


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env for running the CLI as a subprocess.

    Drops any PAGEMENU__ variables from the caller's environment and points
    the platform config dir at an empty tmp directory.
    """
    env = {key: value for key, value in os.environ.items() if not key.startswith("PAGEMENU__")}
    env["XDG_CONFIG_HOME"] = str(tmp_path / "config")
    env["PAGEMENU__LOGGING__LEVEL"] = "ERROR"
    return env
