"""Helpers shared by CLI commands."""

from __future__ import annotations

import click

from devradar.config import load_config
from devradar.exceptions import ConfigError
from devradar.service import DevRadar


def open_radar() -> DevRadar:
    """Build a ``DevRadar`` for this host from the user's config.

    Raises:
        click.ClickException: If the config file is broken.
    """
    try:
        config = load_config()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    return DevRadar.from_config(config)
