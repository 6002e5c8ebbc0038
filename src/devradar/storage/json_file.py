"""Whole-file JSON persistence helpers.

Every DevRadar file is read completely, modified in memory, and written
back completely. There is no locking: concurrent writers race and the last
one wins, so callers serialise mutating operations themselves.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any | None:
    """Parse a JSON file.

    Returns:
        The decoded document, or None if the file is missing, unreadable,
        or not valid JSON. Corrupt files are logged, never raised.
    """
    if not path.is_file():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring corrupt JSON file %s: %s", path, exc)
    return None


def write_json(path: Path, data: Any) -> bool:
    """Write ``data`` as indented JSON, creating parent directories.

    Returns:
        True on success, False if the write failed (logged).
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Cannot write %s: %s", path, exc)
        return False
    return True
