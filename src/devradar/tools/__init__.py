"""Tool discovery: catalog, installation probing, unknown-tool heuristics.

Public API::

    from devradar.tools import BUILTIN_TOOLS, HostEnvironment, InstallationProber

    prober = InstallationProber(HostEnvironment.from_os())
    for tool in prober.probe_all(BUILTIN_TOOLS):
        print(f"{tool.display_name}: {tool.version or 'unknown version'}")
"""

from __future__ import annotations

from devradar.tools.catalog import (
    BUILTIN_TOOLS,
    ToolCategory,
    ToolDefinition,
    known_aliases,
    merge_tool_definitions,
)
from devradar.tools.confirmation import (
    BatchChoice,
    CandidateChoice,
    ChoicePresenter,
    ReviewSession,
    ReviewState,
    confirm_tools,
    review_candidates,
)
from devradar.tools.discoverer import UnknownToolDiscoverer
from devradar.tools.environment import HostEnvironment
from devradar.tools.grouping import compute_stats, group_by_category
from devradar.tools.launcher import find_tool, launch_tool
from devradar.tools.models import ToolInfo, ToolsScanResult, ToolStats, UnknownToolCandidate
from devradar.tools.prober import InstallationProber
from devradar.tools.runner import CommandResult, CommandRunner, CommandStatus

__all__ = [
    "BUILTIN_TOOLS",
    "BatchChoice",
    "CandidateChoice",
    "ChoicePresenter",
    "CommandResult",
    "CommandRunner",
    "CommandStatus",
    "HostEnvironment",
    "InstallationProber",
    "ReviewSession",
    "ReviewState",
    "ToolCategory",
    "ToolDefinition",
    "ToolInfo",
    "ToolStats",
    "ToolsScanResult",
    "UnknownToolCandidate",
    "UnknownToolDiscoverer",
    "compute_stats",
    "confirm_tools",
    "find_tool",
    "group_by_category",
    "known_aliases",
    "launch_tool",
    "merge_tool_definitions",
    "review_candidates",
]
