"""Snapshots of the last project and tool scans.

A cache payload carries the scan result plus an ISO-8601 ``cached_at``
timestamp. Payloads with the wrong shape load as None, same as a missing
file, so a stale format simply triggers a rescan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from devradar.projects.models import ProjectRecord
from devradar.storage.json_file import read_json, write_json
from devradar.tools.models import ToolInfo, UnknownToolCandidate

logger = logging.getLogger(__name__)

PROJECTS_CACHE_FILE = "projects-cache.json"
TOOLS_CACHE_FILE = "tools-cache.json"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class CachedProjects:
    folder_path: str
    projects: list[ProjectRecord]
    cached_at: str


@dataclass
class CachedTools:
    tools: list[ToolInfo]
    unknown_candidates: list[UnknownToolCandidate]
    cached_at: str


class ProjectsCache:
    """Last project scan, keyed by nothing: one root at a time."""

    def __init__(self, storage_dir: Path) -> None:
        self.path = storage_dir / PROJECTS_CACHE_FILE

    def save(self, folder_path: str, projects: list[ProjectRecord]) -> bool:
        return write_json(self.path, {
            "folder_path": folder_path,
            "projects": [p.to_dict() for p in projects],
            "cached_at": _now(),
        })

    def load(self) -> CachedProjects | None:
        data = read_json(self.path)
        if (
            not isinstance(data, dict)
            or not isinstance(data.get("folder_path"), str)
            or not isinstance(data.get("projects"), list)
        ):
            return None
        try:
            projects = [ProjectRecord.from_dict(item) for item in data["projects"]]
        except (KeyError, TypeError, AttributeError):
            logger.warning("Ignoring malformed projects cache %s", self.path)
            return None
        return CachedProjects(data["folder_path"], projects, str(data.get("cached_at", "")))


class ToolsCache:
    """Last tool scan, including the unknown candidates it produced."""

    def __init__(self, storage_dir: Path) -> None:
        self.path = storage_dir / TOOLS_CACHE_FILE

    def save(self, tools: list[ToolInfo], candidates: list[UnknownToolCandidate]) -> bool:
        return write_json(self.path, {
            "tools": [t.to_dict() for t in tools],
            "unknown_candidates": [c.to_dict() for c in candidates],
            "cached_at": _now(),
        })

    def load(self) -> CachedTools | None:
        data = read_json(self.path)
        if (
            not isinstance(data, dict)
            or not isinstance(data.get("tools"), list)
            or not isinstance(data.get("unknown_candidates"), list)
        ):
            return None
        try:
            tools = [ToolInfo.from_dict(item) for item in data["tools"]]
            candidates = [UnknownToolCandidate.from_dict(item) for item in data["unknown_candidates"]]
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.warning("Ignoring malformed tools cache %s", self.path)
            return None
        return CachedTools(tools, candidates, str(data.get("cached_at", "")))
