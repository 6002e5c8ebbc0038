"""Shared helpers for building fake project trees on disk."""

from __future__ import annotations

import json
import os
from pathlib import Path


def make_project(path: Path, marker: str, content: str = "", mtime: float | None = None) -> Path:
    """Create ``path`` containing a single marker file."""
    path.mkdir(parents=True, exist_ok=True)
    (path / marker).write_text(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def make_node_project(path: Path, description: str | None = None) -> Path:
    """Create a Node.js project, optionally with a manifest description."""
    manifest: dict = {"name": path.name, "version": "1.0.0"}
    if description is not None:
        manifest["description"] = description
    return make_project(path, "package.json", json.dumps(manifest))
