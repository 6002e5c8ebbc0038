"""Persisted extension list for the tool catalog (``custom-tools.json``)."""

from __future__ import annotations

import logging
from pathlib import Path

from devradar.storage.json_file import read_json, write_json
from devradar.tools.catalog import ToolDefinition

logger = logging.getLogger(__name__)

CUSTOM_TOOLS_FILE = "custom-tools.json"


class CustomToolStore:
    """Loads and saves user-confirmed tool definitions.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, storage_dir: Path) -> None:
        self.path = storage_dir / CUSTOM_TOOLS_FILE

    def load(self) -> list[ToolDefinition]:
        """Return stored definitions; absent or corrupt files give [].

        Entries that are not objects with a string ``name`` are dropped.
        """
        data = read_json(self.path)
        if not isinstance(data, list):
            return []
        tools: list[ToolDefinition] = []
        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("name"), str):
                logger.debug("Dropping malformed custom tool entry: %r", item)
                continue
            tools.append(ToolDefinition.from_dict(item))
        return tools

    def save(self, tools: list[ToolDefinition]) -> bool:
        """Overwrite the file with ``tools``."""
        return write_json(self.path, [tool.to_dict() for tool in tools])
