"""Depth-bounded project tree walker.

Scans a root directory for project roots using ``classify()``.

Walk Algorithm:
    1. Start at the root with depth 0.
    2. Stop if depth exceeds ``max_depth`` or the directory's real path
       was already visited in this scan (symlink cycles).
    3. Classify the directory from its entry names. On a match, emit a
       ``ProjectRecord`` and do NOT descend: nothing below a project root
       is ever classified.
    4. Otherwise recurse into each child directory whose name is not in
       the ignore set, at depth + 1.

Unreadable directories are skipped without affecting siblings. The result
is a fully built list sorted by last-modified time, newest first.
"""

from __future__ import annotations

import locale
import logging
import os
from pathlib import Path

from devradar.projects.classifier import classify
from devradar.projects.models import Classification, ProjectRecord
from devradar.projects.rules import IGNORE_DIRS, VCS_MARKER

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 2


def sort_by_recency(projects: list[ProjectRecord]) -> list[ProjectRecord]:
    """Return projects newest first, ties broken by locale-aware name order.

    Names are case-folded before collation so the C locale still orders
    "apple" before "Banana"; the raw name keeps the order total.
    """
    return sorted(
        projects,
        key=lambda p: (-(p.last_modified or 0), locale.strxfrm(p.name.casefold()), p.name),
    )


class ProjectWalker:
    """Discovers project roots below a directory.

    Usage::

        walker = ProjectWalker()
        for project in walker.scan("/home/me/code"):
            print(project.name, project.project_type)
    """

    def __init__(self, extra_ignore_dirs: list[str] | None = None) -> None:
        self.ignore_dirs: frozenset[str] = IGNORE_DIRS | frozenset(extra_ignore_dirs or [])

    def scan(self, root: str | Path, max_depth: int = DEFAULT_MAX_DEPTH) -> list[ProjectRecord]:
        """Scan ``root`` for projects.

        Args:
            root: Directory to scan.
            max_depth: Deepest level below ``root`` that is visited.

        Returns:
            Projects sorted newest first. Empty if nothing was found or
            the root is unreadable.
        """
        projects: list[ProjectRecord] = []
        visited: set[str] = set()
        self._visit(os.path.abspath(root), 0, max_depth, visited, projects)
        logger.info("Found %d project(s) under %s", len(projects), root)
        return sort_by_recency(projects)

    def _visit(
        self,
        dir_path: str,
        depth: int,
        max_depth: int,
        visited: set[str],
        projects: list[ProjectRecord],
    ) -> None:
        """Visit one directory and recurse into its eligible children."""
        if depth > max_depth:
            return
        real = os.path.realpath(dir_path)
        if real in visited:
            return
        visited.add(real)

        try:
            with os.scandir(dir_path) as it:
                entries = list(it)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", dir_path, exc)
            return

        names = [entry.name for entry in entries]
        verdict = classify(names, directory=Path(dir_path))
        if verdict is not None:
            projects.append(self._make_record(dir_path, verdict, names))
            return

        for entry in entries:
            if entry.name in self.ignore_dirs:
                continue
            try:
                if not entry.is_dir():
                    continue
            except OSError:
                continue
            self._visit(entry.path, depth + 1, max_depth, visited, projects)

    def _make_record(
        self, dir_path: str, verdict: Classification, names: list[str],
    ) -> ProjectRecord:
        """Build a record; mtime lookup is best effort."""
        try:
            last_modified = os.stat(dir_path).st_mtime
        except OSError:
            last_modified = 0.0
        return ProjectRecord(
            name=os.path.basename(dir_path) or dir_path,
            path=dir_path,
            language=verdict.language,
            project_type=verdict.project_type,
            description=verdict.description,
            has_git=VCS_MARKER in names,
            last_modified=last_modified,
        )
