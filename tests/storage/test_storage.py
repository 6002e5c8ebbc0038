"""Tests for the JSON-file stores: custom tools, scan caches, recents."""

from __future__ import annotations

import json
from pathlib import Path

from devradar.projects.models import ProjectRecord
from devradar.storage import CustomToolStore, ProjectsCache, RecentProjectsStore, ToolsCache
from devradar.storage.json_file import read_json, write_json
from devradar.tools.catalog import ToolCategory, ToolDefinition
from devradar.tools.models import ToolInfo, UnknownToolCandidate


# ---------------------------------------------------------------------------
# json_file
# ---------------------------------------------------------------------------


class TestJsonFile:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_json(tmp_path / "none.json") is None

    def test_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        assert read_json(path) is None

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "data.json"
        assert write_json(path, {"name": "café"})
        assert "café" in path.read_text(encoding="utf-8")
        assert read_json(path) == {"name": "café"}

    def test_unserialisable_data(self, tmp_path: Path) -> None:
        assert write_json(tmp_path / "x.json", {"bad": object()}) is False


# ---------------------------------------------------------------------------
# CustomToolStore
# ---------------------------------------------------------------------------


class TestCustomToolStore:
    def test_empty(self, storage_dir: Path) -> None:
        assert CustomToolStore(storage_dir).load() == []

    def test_save_and_load(self, storage_dir: Path) -> None:
        store = CustomToolStore(storage_dir)
        tools = [ToolDefinition("devbox", "Devbox", ToolCategory.CLI, "x", ("devbox",))]
        assert store.save(tools)
        assert store.load() == tools

    def test_file_format(self, storage_dir: Path) -> None:
        store = CustomToolStore(storage_dir)
        store.save([ToolDefinition("zed", "Zed", ToolCategory.IDE)])
        data = json.loads(store.path.read_text())
        assert data == [{
            "name": "zed", "display_name": "Zed", "category": "IDE",
            "icon": "", "command_aliases": [],
        }]

    def test_malformed_entries_dropped(self, storage_dir: Path) -> None:
        store = CustomToolStore(storage_dir)
        store.path.write_text(json.dumps([{"name": "ok"}, {"display_name": "no name"}, "junk", {"name": 3}]))
        assert [t.name for t in store.load()] == ["ok"]

    def test_non_list_document(self, storage_dir: Path) -> None:
        store = CustomToolStore(storage_dir)
        store.path.write_text(json.dumps({"name": "x"}))
        assert store.load() == []


# ---------------------------------------------------------------------------
# Caches
# ---------------------------------------------------------------------------


class TestProjectsCache:
    def test_round_trip(self, storage_dir: Path) -> None:
        cache = ProjectsCache(storage_dir)
        record = ProjectRecord("api", "/code/api", "Go", "Go", "Go project", True, 12.5)
        assert cache.save("/code", [record])
        loaded = cache.load()
        assert loaded is not None
        assert loaded.folder_path == "/code"
        assert loaded.projects == [record]
        assert loaded.cached_at

    def test_missing(self, storage_dir: Path) -> None:
        assert ProjectsCache(storage_dir).load() is None

    def test_wrong_shape(self, storage_dir: Path) -> None:
        cache = ProjectsCache(storage_dir)
        cache.path.write_text(json.dumps({"folder_path": "/x", "projects": [{"name": "no path"}]}))
        assert cache.load() is None


class TestToolsCache:
    def test_round_trip(self, storage_dir: Path) -> None:
        cache = ToolsCache(storage_dir)
        tools = [ToolInfo("git", "Git", ToolCategory.CLI, version="git version 2.40.0")]
        candidates = [UnknownToolCandidate("docker", "/usr/bin/docker")]
        cache.save(tools, candidates)
        loaded = cache.load()
        assert loaded is not None
        assert loaded.tools == tools
        assert loaded.unknown_candidates == candidates

    def test_bad_category(self, storage_dir: Path) -> None:
        cache = ToolsCache(storage_dir)
        cache.path.write_text(json.dumps({
            "tools": [{"name": "x", "category": "Gizmo"}], "unknown_candidates": [],
        }))
        assert cache.load() is None


# ---------------------------------------------------------------------------
# RecentProjectsStore
# ---------------------------------------------------------------------------


class TestRecentProjects:
    def test_add_moves_to_front(self, storage_dir: Path) -> None:
        store = RecentProjectsStore(storage_dir)
        store.add("a", "/a")
        store.add("b", "/b")
        recents = store.add("a", "/a")
        assert [r.path for r in recents] == ["/a", "/b"]
        assert [r.path for r in store.entries()] == ["/a", "/b"]

    def test_capped(self, storage_dir: Path) -> None:
        store = RecentProjectsStore(storage_dir, limit=3)
        for i in range(5):
            store.add(f"p{i}", f"/p{i}")
        assert [r.name for r in store.entries()] == ["p4", "p3", "p2"]

    def test_clear(self, storage_dir: Path) -> None:
        store = RecentProjectsStore(storage_dir)
        store.add("a", "/a")
        store.clear()
        assert store.entries() == []

    def test_malformed_entries_skipped(self, storage_dir: Path) -> None:
        store = RecentProjectsStore(storage_dir)
        store.path.write_text(json.dumps([{"name": "a", "path": "/a", "last_opened": "x"}, {"name": 1}]))
        [entry] = store.entries()
        assert entry.path == "/a"
        assert entry.last_opened == 0.0
