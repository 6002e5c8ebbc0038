"""Tests for ``devradar projects``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from devradar.cli.main import cli

from tests.projects.helpers import make_node_project, make_project


def _tree(root: Path) -> Path:
    make_project(root / "rusty", "Cargo.toml", mtime=1_000_000)
    make_project(root / "gopher", "go.mod", mtime=2_000_000)
    make_node_project(root / "web" / "node_modules" / "dep")
    return root


class TestProjectsScan:
    def test_text_output(self, runner: CliRunner, tmp_path: Path) -> None:
        root = _tree(tmp_path / "code")
        result = runner.invoke(cli, ["projects", str(root)])
        assert result.exit_code == 0, result.output
        assert "rusty" in result.output
        assert "gopher" in result.output
        assert "dep" not in result.output
        assert "2 project(s) found" in result.output

    def test_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        root = _tree(tmp_path / "code")
        result = runner.invoke(cli, ["projects", str(root), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["folder_path"] == str(root)
        assert [p["name"] for p in data["projects"]] == ["gopher", "rusty"]
        assert data["by_language"] == {"Go": [str(root / "gopher")], "Rust": [str(root / "rusty")]}
        assert set(data["by_type"]) == {"Go", "Rust"}
        assert "cached_at" not in data

    def test_group_by_language(self, runner: CliRunner, tmp_path: Path) -> None:
        root = _tree(tmp_path / "code")
        result = runner.invoke(cli, ["projects", str(root), "--group-by", "language"])
        assert result.exit_code == 0, result.output
        assert "Go (1)" in result.output
        assert "Rust (1)" in result.output

    def test_depth_option(self, runner: CliRunner, tmp_path: Path) -> None:
        make_project(tmp_path / "code" / "a" / "b" / "deep", "go.mod")
        shallow = runner.invoke(cli, ["projects", str(tmp_path / "code"), "--format", "json"])
        deep = runner.invoke(cli, ["projects", str(tmp_path / "code"), "--depth", "3", "--format", "json"])
        assert json.loads(shallow.stdout)["projects"] == []
        assert len(json.loads(deep.stdout)["projects"]) == 1

    def test_empty_tree(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["projects", str(tmp_path)])
        assert result.exit_code == 0
        assert "No projects found." in result.output

    def test_missing_root_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["projects", str(tmp_path / "nope")])
        assert result.exit_code == 2

    def test_negative_depth_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["projects", str(tmp_path), "--depth", "-1"])
        assert result.exit_code == 2


class TestProjectsCached:
    def test_cached_after_scan(self, runner: CliRunner, tmp_path: Path) -> None:
        root = _tree(tmp_path / "code")
        runner.invoke(cli, ["projects", str(root)])
        result = runner.invoke(cli, ["projects", "--cached", "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["folder_path"] == str(root)
        assert len(data["projects"]) == 2
        assert data["cached_at"]

    def test_no_root_uses_cache(self, runner: CliRunner, tmp_path: Path) -> None:
        runner.invoke(cli, ["projects", str(_tree(tmp_path / "code"))])
        result = runner.invoke(cli, ["projects"])
        assert result.exit_code == 0, result.output
        assert "Cached scan of" in result.output

    def test_no_cache(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["projects", "--cached"])
        assert result.exit_code == 1
        assert "No cached scan" in result.output


class TestConfigErrors:
    def test_broken_config(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("max_depth: [\n")
        monkeypatch.setenv("DEVRADAR_CONFIG", str(config))
        result = runner.invoke(cli, ["projects", str(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_config_depth_applies(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        make_project(tmp_path / "code" / "a" / "b" / "deep", "go.mod")
        config = tmp_path / "config.yaml"
        config.write_text("max_depth: 3\n")
        monkeypatch.setenv("DEVRADAR_CONFIG", str(config))
        result = runner.invoke(cli, ["projects", str(tmp_path / "code"), "--format", "json"])
        assert len(json.loads(result.stdout)["projects"]) == 1


class TestDepthAndCacheOptions:
    """--depth needs a fresh scan; --cached flags a cache for another root."""

    def test_depth_without_root_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["projects", "--depth", "3"])
        assert result.exit_code == 2
        assert "--depth only applies to a fresh scan" in result.output

    def test_depth_with_cached_rejected(self, runner: CliRunner, tmp_path: Path) -> None:
        runner.invoke(cli, ["projects", str(_tree(tmp_path / "code"))])
        result = runner.invoke(cli, ["projects", str(tmp_path / "code"), "--cached", "--depth", "1"])
        assert result.exit_code == 2

    def test_cached_for_other_root_warns(self, runner: CliRunner, tmp_path: Path) -> None:
        root = _tree(tmp_path / "code")
        other = tmp_path / "elsewhere"
        other.mkdir()
        runner.invoke(cli, ["projects", str(root)])

        result = runner.invoke(cli, ["projects", str(other), "--cached"])

        assert result.exit_code == 0, result.output
        assert f"cached scan is for {root}" in result.output
        assert "gopher" in result.output

    def test_cached_for_same_root_is_quiet(self, runner: CliRunner, tmp_path: Path) -> None:
        root = _tree(tmp_path / "code")
        runner.invoke(cli, ["projects", str(root)])
        result = runner.invoke(cli, ["projects", str(root), "--cached"])
        assert result.exit_code == 0, result.output
        assert "Warning" not in result.output
