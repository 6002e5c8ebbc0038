"""Group installed tools by category and summarise them."""

from __future__ import annotations

from devradar.tools.catalog import ToolCategory
from devradar.tools.models import ToolInfo, ToolStats


def group_by_category(tools: list[ToolInfo]) -> dict[str, list[ToolInfo]]:
    """Group tools by category; every category key is present."""
    grouped: dict[str, list[ToolInfo]] = {category.value: [] for category in ToolCategory}
    for tool in tools:
        grouped.setdefault(tool.category.value, []).append(tool)
    return grouped


def compute_stats(tools: list[ToolInfo]) -> ToolStats:
    """Summary counts. Only installed tools are ever listed, so
    ``installed == total`` and the percentage is 100 for any non-empty list.
    """
    count = len(tools)
    return ToolStats(
        installed=count,
        total=count,
        categories=len({tool.category for tool in tools}),
        percentage=100 if count else 0,
    )
