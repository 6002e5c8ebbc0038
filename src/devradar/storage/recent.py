"""Recently opened projects (``recent-projects.json``).

An explicit store object owned by whoever opens projects; there is no
module-level list of recents.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from devradar.storage.json_file import read_json, write_json

RECENT_PROJECTS_FILE = "recent-projects.json"
MAX_RECENT_PROJECTS = 10


@dataclass(frozen=True)
class RecentProject:
    name: str
    path: str
    last_opened: float


class RecentProjectsStore:
    """Most-recently-opened list, newest first, capped at ``limit``."""

    def __init__(self, storage_dir: Path, limit: int = MAX_RECENT_PROJECTS) -> None:
        self.path = storage_dir / RECENT_PROJECTS_FILE
        self.limit = limit

    def entries(self) -> list[RecentProject]:
        data = read_json(self.path)
        if not isinstance(data, list):
            return []
        recents: list[RecentProject] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            name, path = item.get("name"), item.get("path")
            if not isinstance(name, str) or not isinstance(path, str):
                continue
            opened = item.get("last_opened", 0)
            recents.append(RecentProject(name, path, float(opened) if isinstance(opened, (int, float)) else 0.0))
        return recents

    def add(self, name: str, path: str) -> list[RecentProject]:
        """Move ``path`` to the front (adding it if new) and persist.

        Returns:
            The updated list.
        """
        entry = RecentProject(name=name, path=path, last_opened=time.time())
        recents = [entry] + [r for r in self.entries() if r.path != path]
        recents = recents[: self.limit]
        self._save(recents)
        return recents

    def clear(self) -> None:
        self._save([])

    def _save(self, recents: list[RecentProject]) -> bool:
        return write_json(self.path, [
            {"name": r.name, "path": r.path, "last_opened": r.last_opened} for r in recents
        ])
