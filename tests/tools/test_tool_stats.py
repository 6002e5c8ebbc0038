"""Tests for tool grouping and summary statistics."""

from __future__ import annotations

from devradar.tools.catalog import ToolCategory
from devradar.tools.grouping import compute_stats, group_by_category
from devradar.tools.models import ToolInfo


def _info(name: str, category: ToolCategory) -> ToolInfo:
    return ToolInfo(name=name, display_name=name.title(), category=category)


class TestGroupByCategory:
    def test_both_categories_always_present(self) -> None:
        assert group_by_category([]) == {"IDE": [], "CLI": []}

    def test_order_within_category(self) -> None:
        tools = [_info("vim", ToolCategory.IDE), _info("git", ToolCategory.CLI), _info("code", ToolCategory.IDE)]
        groups = group_by_category(tools)
        assert [t.name for t in groups["IDE"]] == ["vim", "code"]
        assert [t.name for t in groups["CLI"]] == ["git"]


class TestComputeStats:
    def test_counts(self) -> None:
        stats = compute_stats([_info("vim", ToolCategory.IDE), _info("git", ToolCategory.CLI)])
        assert (stats.installed, stats.total, stats.categories, stats.percentage) == (2, 2, 2, 100)

    def test_single_category(self) -> None:
        assert compute_stats([_info("git", ToolCategory.CLI)]).categories == 1

    def test_empty(self) -> None:
        stats = compute_stats([])
        assert (stats.installed, stats.categories, stats.percentage) == (0, 0, 0)
