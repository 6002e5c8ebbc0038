"""``devradar projects [ROOT]`` -- Scan a directory tree for projects.

Exit Codes:
    0 -- Scan completed (finding nothing is still a success).
    1 -- No ROOT given and no cached scan exists, or config error.
    2 -- Usage error, including --depth without a fresh scan of ROOT.
"""

from __future__ import annotations

import json
import os

import click

from devradar.cli.common import open_radar
from devradar.cli.output import print_projects
from devradar.projects.grouping import group_by_language, group_by_type
from devradar.projects.models import ProjectRecord


def _projects_to_json(
    folder: str, projects: list[ProjectRecord], cached_at: str | None = None,
) -> dict:
    """Build the JSON payload, including both groupings."""
    payload: dict = {
        "folder_path": folder,
        "projects": [p.to_dict() for p in projects],
        "by_language": {k: [p.path for p in v] for k, v in group_by_language(projects).items()},
        "by_type": {k: [p.path for p in v] for k, v in group_by_type(projects).items()},
    }
    if cached_at is not None:
        payload["cached_at"] = cached_at
    return payload


@click.command("projects")
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False),
    required=False,
    default=None,
)
@click.option(
    "--depth", "max_depth",
    type=click.IntRange(min=0),
    default=None,
    help="Directory levels below ROOT to visit (default from config, 2). Requires ROOT; not valid with --cached.",
)
@click.option(
    "--group-by",
    type=click.Choice(["none", "language", "type"]),
    default="none",
    help="Group the text output by language or project type.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--cached",
    is_flag=True,
    default=False,
    help="Show the last scan instead of scanning again. With ROOT, warns if the cache is for another folder.",
)
def projects_command(
    root: str | None,
    max_depth: int | None,
    group_by: str,
    output_format: str,
    cached: bool,
) -> None:
    """Find software projects under ROOT.

    A directory is a project when it holds a recognised marker file
    (package.json, Cargo.toml, go.mod, ...). Nothing below a project is
    scanned. Results are cached for ``--cached``.
    """
    if max_depth is not None and (cached or root is None):
        raise click.UsageError("--depth only applies to a fresh scan of ROOT.")

    radar = open_radar()

    if cached or root is None:
        snapshot = radar.cached_projects()
        if snapshot is None:
            raise click.ClickException("No cached scan. Run: devradar projects <root>")
        if root is not None and os.path.abspath(root) != snapshot.folder_path:
            click.echo(
                f"Warning: cached scan is for {snapshot.folder_path}, not {os.path.abspath(root)}. "
                "Omit --cached to rescan.",
                err=True,
            )
        folder, projects, cached_at = snapshot.folder_path, snapshot.projects, snapshot.cached_at
    else:
        folder = os.path.abspath(root)
        projects = radar.scan_projects(folder, max_depth=max_depth)
        cached_at = None

    if output_format == "json":
        click.echo(json.dumps(_projects_to_json(folder, projects, cached_at), indent=2))
        return
    if cached_at:
        click.echo(f"Cached scan of {folder} ({cached_at})")
    print_projects(projects, group_by)
