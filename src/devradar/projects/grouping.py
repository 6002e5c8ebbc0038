"""Group scanned projects by language or type for display."""

from __future__ import annotations

from devradar.projects.models import ProjectRecord
from devradar.projects.walker import sort_by_recency


def group_by_language(projects: list[ProjectRecord]) -> dict[str, list[ProjectRecord]]:
    """Group projects by language, newest first within each group."""
    grouped: dict[str, list[ProjectRecord]] = {}
    for project in sort_by_recency(projects):
        grouped.setdefault(project.language, []).append(project)
    return grouped


def group_by_type(projects: list[ProjectRecord]) -> dict[str, list[ProjectRecord]]:
    """Group projects by project type, newest first within each group."""
    grouped: dict[str, list[ProjectRecord]] = {}
    for project in sort_by_recency(projects):
        grouped.setdefault(project.project_type, []).append(project)
    return grouped
