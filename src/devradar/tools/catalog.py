"""Static catalog of known development tools and how to detect them.

Each ``ToolDefinition`` names a tool, its category, and the command aliases
it may be invoked under. The built-in table is immutable; user-confirmed
tools live in a persisted extension list that is merged in at read time by
``merge_tool_definitions()``. The merge is rebuilt for every operation
rather than cached in a global registry, so a confirmation run is visible
to the next scan without hidden cross-call state.

Merge order: built-ins first, then custom entries; the first definition
with a given name wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ToolCategory(str, Enum):
    """Coarse tool classes used for grouping."""

    IDE = "IDE"
    CLI = "CLI"


IDE_ICON = "\U0001f4bb"
VCS_ICON = "\U0001f4c2"
AGENT_ICON = "\U0001f916"


@dataclass(frozen=True)
class ToolDefinition:
    """A recognisable development tool.

    Attributes:
        name: Canonical identifier, e.g. "code".
        display_name: Human-readable name, e.g. "VS Code".
        category: IDE-class or CLI-class.
        icon: Short icon reference shown next to the name.
        command_aliases: Command names the tool may be invoked as, in
            preference order. Empty means ``(name,)``.
    """

    name: str
    display_name: str
    category: ToolCategory
    icon: str = ""
    command_aliases: tuple[str, ...] = field(default_factory=tuple)

    @property
    def aliases(self) -> tuple[str, ...]:
        """Aliases to try, never empty."""
        return self.command_aliases if self.command_aliases else (self.name,)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the custom-tools JSON shape."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "category": self.category.value,
            "icon": self.icon,
            "command_aliases": list(self.command_aliases),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ToolDefinition:
        """Deserialize a custom-tools entry.

        Unknown categories fall back to CLI; a missing or non-string
        display name falls back to the canonical name. Aliases must be a
        list of strings (a bare string is one alias, never its characters)
        and a non-string icon becomes empty.

        Raises:
            KeyError: If ``name`` is missing.
        """
        raw_category = data.get("category", ToolCategory.CLI.value)
        try:
            category = ToolCategory(raw_category)
        except ValueError:
            category = ToolCategory.CLI
        aliases = data.get("command_aliases")
        if isinstance(aliases, str):
            aliases = [aliases]
        elif not isinstance(aliases, list):
            aliases = []
        display_name = data.get("display_name")
        icon = data.get("icon")
        return cls(
            name=data["name"],
            display_name=(
                display_name
                if isinstance(display_name, str) and display_name
                else data["name"]
            ),
            category=category,
            icon=icon if isinstance(icon, str) else "",
            command_aliases=tuple(a for a in aliases if isinstance(a, str) and a),
        )


def _ide(name: str, display_name: str, *aliases: str) -> ToolDefinition:
    return ToolDefinition(name, display_name, ToolCategory.IDE, IDE_ICON, aliases)


def _cli(name: str, display_name: str, icon: str, *aliases: str) -> ToolDefinition:
    return ToolDefinition(name, display_name, ToolCategory.CLI, icon, aliases)


def _build_builtin_tools() -> list[ToolDefinition]:
    """Build the built-in tool table.

    Returns:
        Ordered list of built-in definitions.
    """
    return [
        # -- Editors and IDEs --
        _ide("code", "VS Code", "code", "code-insiders"),
        _ide("cursor", "Cursor", "cursor"),
        _ide("idea", "IntelliJ IDEA", "idea", "idea64"),
        _ide("pycharm", "PyCharm", "pycharm", "pycharm64"),
        _ide("webstorm", "WebStorm", "webstorm", "webstorm64"),
        _ide("goland", "GoLand", "goland", "goland64"),
        _ide("clion", "CLion", "clion", "clion64"),
        _ide("rider", "Rider", "rider", "rider64"),
        _ide("rubymine", "RubyMine", "rubymine", "rubymine64"),
        _ide("datagrip", "DataGrip", "datagrip", "datagrip64"),
        _ide("vim", "Vim", "vim"),
        _ide("nvim", "Neovim", "nvim"),
        # -- Version control --
        _cli("git", "Git", VCS_ICON, "git"),
        _cli("svn", "SVN", VCS_ICON, "svn"),
        _cli("hg", "Mercurial", VCS_ICON, "hg"),
        # -- AI assistants --
        _cli("gemini", "Gemini CLI", AGENT_ICON, "gemini"),
        _cli("claude", "Claude Code", AGENT_ICON, "claude", "claude-code"),
        _cli("opencode", "OpenCode", AGENT_ICON, "opencode", "open-code"),
        _cli("codex", "OpenAI Codex", AGENT_ICON, "codex"),
        _ide("antigravity", "Antigravity", "antigravity"),
    ]


BUILTIN_TOOLS: list[ToolDefinition] = _build_builtin_tools()

# Explicit version commands per alias. Anything absent uses "<alias> --version".
VERSION_COMMANDS: dict[str, list[str]] = {
    "codex": ["codex", "-V"],
}

# JetBrains products ship a build.txt used as a version fallback.
JETBRAINS_TOOLS: frozenset[str] = frozenset({
    "idea", "pycharm", "webstorm", "goland", "clion", "rider", "rubymine", "datagrip",
})

# Substrings that make a command look like an editor rather than a CLI.
IDE_HINTS: tuple[str, ...] = (
    "code", "cursor", "studio", "idea", "pycharm", "webstorm", "goland",
    "clion", "rider", "rubymine", "datagrip", "antigravity",
)


def version_command(alias: str) -> list[str]:
    """Return the argv used to query ``alias`` for its version."""
    return list(VERSION_COMMANDS.get(alias, [alias, "--version"]))


def merge_tool_definitions(
    custom_tools: list[ToolDefinition],
    builtin_tools: list[ToolDefinition] | None = None,
) -> list[ToolDefinition]:
    """Merge built-in and custom definitions, first name wins.

    Args:
        custom_tools: User-confirmed definitions, in file order.
        builtin_tools: Override the built-in table (tests).

    Returns:
        Built-ins followed by custom tools whose names are new.
    """
    merged = list(BUILTIN_TOOLS if builtin_tools is None else builtin_tools)
    seen = {tool.name for tool in merged}
    for tool in custom_tools:
        if tool.name not in seen:
            merged.append(tool)
            seen.add(tool.name)
    return merged


def known_aliases(tools: list[ToolDefinition]) -> set[str]:
    """Lowercased aliases and names across ``tools``."""
    known: set[str] = set()
    for tool in tools:
        known.add(tool.name.lower())
        known.update(alias.lower() for alias in tool.aliases)
    return known


def build_alias_index(tools: list[ToolDefinition]) -> dict[str, ToolDefinition]:
    """Map each lowercased name and alias to its definition, first wins."""
    index: dict[str, ToolDefinition] = {}
    for tool in tools:
        for key in (tool.name, *tool.aliases):
            index.setdefault(key.lower(), tool)
    return index


def infer_category(command: str) -> ToolCategory:
    """Guess whether a bare command is an editor or a CLI."""
    lowered = command.lower()
    return ToolCategory.IDE if any(hint in lowered for hint in IDE_HINTS) else ToolCategory.CLI


def to_title_case(name: str) -> str:
    """Turn ``my-tool_name`` into ``My Tool Name``."""
    parts = name.replace("_", " ").replace("-", " ").split()
    return " ".join(part[:1].upper() + part[1:] for part in parts)
