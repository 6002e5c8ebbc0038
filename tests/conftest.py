"""Shared fixtures for devradar tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """A private storage directory for caches and the custom catalog."""
    path = tmp_path / "storage"
    path.mkdir()
    return path
