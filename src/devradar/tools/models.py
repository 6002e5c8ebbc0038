"""Data models for tool scanning.

Contains the resolved ``ToolInfo`` for an installed tool, unknown-tool
candidates found on PATH, and the aggregate scan result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from devradar.tools.catalog import ToolCategory, ToolDefinition


@dataclass
class ToolInfo:
    """An installed tool.

    Uninstalled tools are omitted from scan results, so ``installed`` is
    always True for probed entries; it is kept for the cache format.
    """

    name: str
    display_name: str
    category: ToolCategory
    icon: str = ""
    installed: bool = True
    version: str | None = None

    @classmethod
    def from_definition(cls, definition: ToolDefinition, version: str | None) -> ToolInfo:
        return cls(
            name=definition.name,
            display_name=definition.display_name,
            category=definition.category,
            icon=definition.icon,
            installed=True,
            version=version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "category": self.category.value,
            "icon": self.icon,
            "installed": self.installed,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ToolInfo:
        return cls(
            name=data["name"],
            display_name=data.get("display_name") or data["name"],
            category=ToolCategory(data.get("category", ToolCategory.CLI.value)),
            icon=data.get("icon", ""),
            installed=bool(data.get("installed", True)),
            version=data.get("version"),
        )


@dataclass(frozen=True)
class UnknownToolCandidate:
    """An executable on PATH that looks like a dev tool but is not catalogued.

    Attributes:
        command: Normalised command name (lowercase, no ``.exe`` etc.).
        source_path: Where the executable was found.
    """

    command: str
    source_path: str

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "source_path": self.source_path}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnknownToolCandidate:
        return cls(command=data["command"], source_path=data.get("source_path", ""))


@dataclass
class ToolsScanResult:
    """Complete result of a tool scan.

    Attributes:
        tools: Installed tools in catalog order.
        unknown_candidates: Uncatalogued dev-tool lookalikes, sorted.
    """

    tools: list[ToolInfo] = field(default_factory=list)
    unknown_candidates: list[UnknownToolCandidate] = field(default_factory=list)


@dataclass(frozen=True)
class ToolStats:
    """Summary counts for a list of installed tools."""

    installed: int
    total: int
    categories: int
    percentage: int
