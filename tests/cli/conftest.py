"""Shared fixtures for CLI tests.

Every CLI test runs against a private DEVRADAR_HOME so nothing touches
the real ``~/.devradar``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from devradar.service import DevRadar

from tests.tools.helpers import FakeRunner, linux_env


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point DEVRADAR_HOME at a temp dir."""
    home = tmp_path / "devradar-home"
    monkeypatch.setenv("DEVRADAR_HOME", str(home))
    monkeypatch.delenv("DEVRADAR_CONFIG", raising=False)
    return home


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def fake_host(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    """Run commands against a synthetic Linux host.

    PATH holds a single ``bin`` directory under ``tmp_path``; every
    external command is answered by the returned ``FakeRunner``.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    runner = FakeRunner()
    env = linux_env([str(bin_dir)])
    monkeypatch.setattr(
        DevRadar, "from_config", classmethod(lambda cls, config: cls(config, env, runner=runner)),
    )
    return runner
