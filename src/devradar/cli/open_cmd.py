"""``devradar open TOOL [PROJECT]`` -- Launch a catalogued tool.

Exit Codes:
    0 -- Tool launched.
    1 -- Blank or unknown tool name, or missing project directory.
"""

from __future__ import annotations

import click

from devradar.cli.common import open_radar
from devradar.exceptions import DevRadarError


@click.command("open")
@click.argument("tool")
@click.argument("project", required=False, default=None)
def open_command(tool: str, project: str | None) -> None:
    """Open TOOL, optionally on the PROJECT directory.

    TOOL may be a catalog name (``code``) or any alias (``code-insiders``).
    Opened projects are remembered for ``devradar recent``.
    """
    radar = open_radar()
    try:
        argv = radar.open_tool(tool, project)
    except DevRadarError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Launched: {' '.join(argv)}")
