"""Rich output formatting helpers for the DevRadar CLI.

Provides the project table (flat or grouped), the installed-tools table
with its summary line, the unknown-candidate list, and recent projects.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from devradar.projects.grouping import group_by_language, group_by_type
from devradar.projects.models import ProjectRecord
from devradar.storage.recent import RecentProject
from devradar.tools.catalog import ToolCategory
from devradar.tools.grouping import compute_stats, group_by_category
from devradar.tools.models import ToolInfo, UnknownToolCandidate

_CATEGORY_STYLES: dict[str, str] = {
    ToolCategory.IDE.value: "cyan",
    ToolCategory.CLI.value: "green",
}

console = Console()


def _format_mtime(timestamp: float | None) -> str:
    if not timestamp:
        return "-"
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def _short_path(path: str) -> str:
    home = str(Path.home())
    return "~" + path[len(home):] if path.startswith(home + "/") else path


def _project_table(title: str, projects: list[ProjectRecord]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Project", style="bold")
    table.add_column("Type")
    table.add_column("Language", style="dim")
    table.add_column("Git", justify="center")
    table.add_column("Modified", justify="right")
    table.add_column("Path", style="dim")
    for project in projects:
        git = Text("✓", style="green") if project.has_git else Text("-", style="dim")
        table.add_row(
            project.name,
            project.project_type,
            project.language,
            git,
            _format_mtime(project.last_modified),
            _short_path(project.path),
        )
    return table


def print_projects(projects: list[ProjectRecord], group_by: str = "none") -> None:
    """Print scanned projects, optionally grouped.

    Args:
        projects: Projects, newest first.
        group_by: ``none``, ``language`` or ``type``.
    """
    if not projects:
        console.print("[dim]No projects found.[/dim]")
        return

    if group_by == "language":
        groups = group_by_language(projects)
    elif group_by == "type":
        groups = group_by_type(projects)
    else:
        groups = {"Projects": projects}

    for title, members in groups.items():
        console.print(_project_table(f"{title} ({len(members)})", members))
    console.print(f"[bold]{len(projects)}[/bold] project(s) found")


def print_tools(tools: list[ToolInfo]) -> None:
    """Print installed tools grouped by category, then a summary line."""
    if not tools:
        console.print("[dim]No development tools found.[/dim]")
        return

    table = Table(title="Installed Development Tools", show_header=True, header_style="bold")
    table.add_column("Tool", style="bold")
    table.add_column("Category", justify="center")
    table.add_column("Command", style="dim")
    table.add_column("Version")
    for category, members in group_by_category(tools).items():
        style = _CATEGORY_STYLES.get(category, "white")
        for tool in members:
            table.add_row(
                f"{tool.icon} {tool.display_name}".strip(),
                Text(category, style=style),
                tool.name,
                tool.version or Text("unknown", style="dim"),
            )
    console.print(table)

    stats = compute_stats(tools)
    console.print(
        f"[bold]{stats.installed}[/bold] tool(s) installed across "
        f"{stats.categories} categor{'y' if stats.categories == 1 else 'ies'}"
    )


def print_candidates(candidates: list[UnknownToolCandidate]) -> None:
    """List unknown tool candidates found on PATH."""
    if not candidates:
        return
    console.print(f"\n[yellow]{len(candidates)} possible tool(s) not in the catalog:[/yellow]")
    for candidate in candidates:
        console.print(f"  [bold]{candidate.command}[/bold]  [dim]{candidate.source_path}[/dim]")


def print_recent(recents: list[RecentProject]) -> None:
    """Print recently opened projects, newest first."""
    if not recents:
        console.print("[dim]No recent projects.[/dim]")
        return
    for idx, recent in enumerate(recents, start=1):
        console.print(f"{idx:>2}. [bold]{recent.name}[/bold]  [dim]{_short_path(recent.path)}[/dim]")
