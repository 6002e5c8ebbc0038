"""``devradar tools`` -- Inventory installed development tools.

Probes every catalogued tool (PATH lookup, then well-known install
locations on Windows), queries versions, and lists executables on PATH
that look like dev tools but are not catalogued. In an interactive
terminal those candidates can be reviewed and added to the catalog.

Exit Codes:
    0 -- Scan completed (an empty inventory is still a success).
    1 -- ``--cached`` with no cached scan, or config error.
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict

import click

from devradar.cli.common import open_radar
from devradar.cli.output import print_candidates, print_tools
from devradar.cli.prompts import QuestionaryPresenter
from devradar.tools.grouping import compute_stats, group_by_category
from devradar.tools.models import ToolInfo, UnknownToolCandidate


def _tools_to_json(
    tools: list[ToolInfo],
    candidates: list[UnknownToolCandidate],
    cached_at: str | None = None,
) -> dict:
    payload: dict = {
        "tools": [t.to_dict() for t in tools],
        "by_category": {k: [t.name for t in v] for k, v in group_by_category(tools).items()},
        "stats": asdict(compute_stats(tools)),
        "unknown_candidates": [c.to_dict() for c in candidates],
    }
    if cached_at is not None:
        payload["cached_at"] = cached_at
    return payload


@click.command("tools")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--review/--no-review",
    default=None,
    help="Review unknown candidates interactively (default: when stdin is a terminal).",
)
@click.option(
    "--cached",
    is_flag=True,
    default=False,
    help="Show the last scan instead of probing again.",
)
def tools_command(output_format: str, review: bool | None, cached: bool) -> None:
    """List installed editors, IDEs and CLIs with their versions."""
    radar = open_radar()

    cached_at: str | None = None
    if cached:
        snapshot = radar.cached_tools()
        if snapshot is None:
            raise click.ClickException("No cached scan. Run: devradar tools")
        tools, candidates, cached_at = snapshot.tools, snapshot.unknown_candidates, snapshot.cached_at
    else:
        result = radar.scan_tools()
        tools, candidates = result.tools, result.unknown_candidates

    if output_format == "json":
        click.echo(json.dumps(_tools_to_json(tools, candidates, cached_at), indent=2))
        return

    if cached_at:
        click.echo(f"Cached scan ({cached_at})")
    print_tools(tools)
    print_candidates(candidates)

    interactive = sys.stdin.isatty() if review is None else review
    if cached or not candidates or not interactive:
        return

    accepted = radar.review_candidates(candidates, QuestionaryPresenter())
    added = radar.confirm_tools(accepted)
    if not added:
        click.echo("No tools added.")
        return
    click.echo(f"Added {added} tool(s) to the catalog. Rescanning...")
    print_tools(radar.scan_tools().tools)
