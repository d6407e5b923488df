"""Shared pytest fixtures for flyercompare tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from flyercompare.runtime.paths import reset_paths
from flyercompare.runtime.settings import reset_settings


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the data root at a temp dir so tests never touch ~/.flyercompare."""
    home = tmp_path / "flyercompare-home"
    monkeypatch.setenv("FLYERCOMPARE_HOME", str(home))
    monkeypatch.delenv("FLYERCOMPARE_CATALOG_URL", raising=False)
    monkeypatch.delenv("FLYERCOMPARE_CATALOG_KEY", raising=False)
    reset_paths()
    reset_settings()
    yield home
    reset_paths()
    reset_settings()
