"""Project discovery: classify directories and walk trees for project roots.

Public API::

    from devradar.projects import ProjectWalker

    walker = ProjectWalker()
    for project in walker.scan("/home/me/code", max_depth=2):
        print(f"{project.name}: {project.project_type}")
"""

from __future__ import annotations

from devradar.projects.classifier import classify
from devradar.projects.grouping import group_by_language, group_by_type
from devradar.projects.models import Classification, ProjectRecord
from devradar.projects.rules import IGNORE_DIRS, PROJECT_RULES, ClassificationRule
from devradar.projects.walker import DEFAULT_MAX_DEPTH, ProjectWalker, sort_by_recency

__all__ = [
    "Classification",
    "ClassificationRule",
    "DEFAULT_MAX_DEPTH",
    "IGNORE_DIRS",
    "PROJECT_RULES",
    "ProjectRecord",
    "ProjectWalker",
    "classify",
    "group_by_language",
    "group_by_type",
    "sort_by_recency",
]
