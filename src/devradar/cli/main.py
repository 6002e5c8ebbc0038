"""DevRadar CLI -- Find local projects and installed development tools.

Entry point for the ``devradar`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    projects -- Scan a directory tree for software projects.
    tools    -- Inventory installed editors and CLIs, review unknown ones.
    open     -- Launch a catalogued tool, optionally on a project.
    recent   -- Show or clear recently opened projects.

Usage::

    devradar projects ~/code
    devradar projects ~/code --group-by language
    devradar projects --cached --format json
    devradar tools
    devradar tools --no-review --format json
    devradar open code ~/code/my-app
    devradar recent
"""

from __future__ import annotations

import locale
import logging

import click

from devradar import __version__
from devradar.cli.open_cmd import open_command
from devradar.cli.projects_cmd import projects_command
from devradar.cli.recent_cmd import recent_command
from devradar.cli.tools_cmd import tools_command

logger = logging.getLogger(__name__)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug) to stderr.")
def cli(verbose: int) -> None:
    """DevRadar: find local projects and installed development tools."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbose, logging.DEBUG),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Host collation locale unavailable, using C order")


# Register all subcommands
cli.add_command(projects_command)
cli.add_command(tools_command)
cli.add_command(open_command)
cli.add_command(recent_command)
