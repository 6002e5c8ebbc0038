"""Classify a single directory as a project root (or not).

``classify()`` looks only at the immediate entries of one directory. It
walks ``PROJECT_RULES`` in order and returns the first rule whose marker
is present, so the verdict never depends on filesystem listing order.

When no marker matches, a weaker heuristic applies: any entry with a known
source-code suffix makes the directory an "Unknown" project.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from devradar.projects.models import Classification
from devradar.projects.rules import (
    NODE_MANIFEST,
    NODE_PROJECT_TYPE,
    PROJECT_RULES,
    SOURCE_EXTENSIONS,
    UNKNOWN_DESCRIPTION,
    UNKNOWN_LANGUAGE,
    UNKNOWN_TYPE,
    ClassificationRule,
)

logger = logging.getLogger(__name__)


def _read_node_description(directory: Path) -> str | None:
    """Return the ``description`` field of ``package.json``, if usable."""
    manifest = directory / NODE_MANIFEST
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.debug("Could not read description from %s", manifest)
        return None
    if not isinstance(data, dict):
        return None
    description = data.get("description")
    if isinstance(description, str) and description.strip():
        return description
    return None


def classify(
    entries: Iterable[str],
    directory: Path | None = None,
    rules: list[ClassificationRule] | None = None,
) -> Classification | None:
    """Decide whether a directory is a project root.

    Args:
        entries: Names of the directory's immediate children.
        directory: The directory itself. Only needed to read the Node.js
            manifest for a richer description; classification proper is
            purely a function of ``entries``.
        rules: Override the rule table (defaults to ``PROJECT_RULES``).

    Returns:
        The classification, or None if the directory is not a project.
    """
    names = frozenset(entries)
    for rule in rules if rules is not None else PROJECT_RULES:
        if not rule.matches(names):
            continue
        description = rule.description
        if rule.project_type == NODE_PROJECT_TYPE and directory is not None:
            description = _read_node_description(directory) or description
        return Classification(
            project_type=rule.project_type,
            language=rule.language,
            description=description,
        )

    if any(name.endswith(SOURCE_EXTENSIONS) for name in names):
        return Classification(
            project_type=UNKNOWN_TYPE,
            language=UNKNOWN_LANGUAGE,
            description=UNKNOWN_DESCRIPTION,
        )
    return None
