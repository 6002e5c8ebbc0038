"""Open a catalogued tool, optionally on a project directory."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from devradar.exceptions import ProjectNotFoundError, ToolNameRequiredError, ToolNotFoundError
from devradar.tools.catalog import ToolDefinition, build_alias_index
from devradar.tools.prober import InstallationProber

logger = logging.getLogger(__name__)


def find_tool(name: str, tools: list[ToolDefinition]) -> ToolDefinition:
    """Look a tool up by name or alias, case-insensitively.

    Raises:
        ToolNameRequiredError: If ``name`` is blank.
        ToolNotFoundError: If nothing matches.
    """
    normalized = name.strip().lower()
    if not normalized:
        raise ToolNameRequiredError()
    tool = build_alias_index(tools).get(normalized)
    if tool is None:
        raise ToolNotFoundError(name)
    return tool


def launch_tool(
    name: str,
    tools: list[ToolDefinition],
    prober: InstallationProber,
    project: str | Path | None = None,
) -> list[str]:
    """Start a tool detached from this process.

    The first alias resolvable on PATH is used; if none resolves, the
    first alias is tried anyway (Windows installs often lack PATH entries
    but register an App Path that ``start`` understands).

    Args:
        name: Tool name or alias.
        tools: The merged catalog.
        prober: Supplies PATH resolution and the host platform.
        project: Optional directory handed to the tool.

    Returns:
        The argv that was spawned.

    Raises:
        ToolNameRequiredError: Blank name.
        ToolNotFoundError: Unknown name.
        ProjectNotFoundError: ``project`` does not exist.
    """
    tool = find_tool(name, tools)
    if project is not None and not Path(project).exists():
        raise ProjectNotFoundError(str(project))

    alias = prober.resolve_alias(tool.aliases) or tool.aliases[0]
    argv = [alias] if project is None else [alias, str(project)]
    if prober.env.is_windows:
        argv = ["cmd", "/c", "start", "", *argv]

    logger.info("Launching %s", " ".join(argv))
    subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=not prober.env.is_windows,
    )
    return argv
