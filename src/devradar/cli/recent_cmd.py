"""``devradar recent`` -- Show or clear recently opened projects."""

from __future__ import annotations

import click

from devradar.cli.common import open_radar
from devradar.cli.output import print_recent


@click.command("recent")
@click.option("--clear", is_flag=True, default=False, help="Forget all recent projects.")
def recent_command(clear: bool) -> None:
    """List projects recently opened with ``devradar open``."""
    radar = open_radar()
    if clear:
        radar.recent.clear()
        click.echo("Recent projects cleared.")
        return
    print_recent(radar.recent.entries())
