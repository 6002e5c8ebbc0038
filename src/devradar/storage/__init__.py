"""JSON-file persistence: custom tool catalog, scan caches, recent projects."""

from __future__ import annotations

from devradar.storage.caches import CachedProjects, CachedTools, ProjectsCache, ToolsCache
from devradar.storage.custom_tools import CustomToolStore
from devradar.storage.recent import RecentProject, RecentProjectsStore

__all__ = [
    "CachedProjects",
    "CachedTools",
    "CustomToolStore",
    "ProjectsCache",
    "RecentProject",
    "RecentProjectsStore",
    "ToolsCache",
]
