"""Tests for project grouping helpers."""

from __future__ import annotations

from devradar.projects.grouping import group_by_language, group_by_type
from devradar.projects.models import ProjectRecord


def _record(name: str, language: str, project_type: str, mtime: float) -> ProjectRecord:
    return ProjectRecord(
        name=name, path=f"/code/{name}", language=language,
        project_type=project_type, last_modified=mtime,
    )


PROJECTS = [
    _record("api", "Python", "Python", 10.0),
    _record("cli", "Go", "Go", 30.0),
    _record("etl", "Python", "Python", 20.0),
    _record("game", "C/C++", "C/C++", 5.0),
]


class TestGroupByLanguage:
    def test_groups_and_orders(self) -> None:
        groups = group_by_language(PROJECTS)
        assert set(groups) == {"Python", "Go", "C/C++"}
        assert [p.name for p in groups["Python"]] == ["etl", "api"]

    def test_group_keys_follow_newest_member(self) -> None:
        """Group insertion order follows the newest project of each group."""
        assert list(group_by_language(PROJECTS)) == ["Go", "Python", "C/C++"]

    def test_empty(self) -> None:
        assert group_by_language([]) == {}


class TestGroupByType:
    def test_java_build_systems_are_separate(self) -> None:
        projects = [
            _record("svc", "Java", "Java/Maven", 1.0),
            _record("app", "Java", "Java/Gradle", 2.0),
        ]
        groups = group_by_type(projects)
        assert set(groups) == {"Java/Maven", "Java/Gradle"}
        assert group_by_language(projects)["Java"][0].name == "app"

    def test_preserves_every_project(self) -> None:
        groups = group_by_type(PROJECTS)
        assert sum(len(members) for members in groups.values()) == len(PROJECTS)
