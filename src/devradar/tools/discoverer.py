"""Heuristic discovery of uncatalogued developer tools on PATH.

PATH can hold thousands of unrelated executables, so only names that
contain a developer-tool keyword are kept, and the result is capped.

Discovery Algorithm:
    1. List every PATH directory (concurrently). Merge listings in PATH
       order so the first directory providing a command wins, exactly as
       the shell would resolve it.
    2. Normalise each file name (lowercase, strip ``.exe`` and friends).
       Skip names that are empty, already known, or keyword-free.
    3. Windows only: probe ``%LOCALAPPDATA%\\Programs\\<app>`` for
       ``<app>.exe``, ``bin\\<app>.cmd`` and ``bin\\<app>.exe``.
    4. Sort by command and truncate.
"""

from __future__ import annotations

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from devradar.tools.environment import HostEnvironment
from devradar.tools.models import UnknownToolCandidate

logger = logging.getLogger(__name__)

DISCOVERY_LIMIT = 20

# A command must contain one of these to count as a dev-tool lookalike.
DISCOVERY_KEYWORDS: tuple[str, ...] = (
    # editors and IDEs
    "code", "cursor", "studio", "ide", "vim", "nvim", "jetbrains", "pycharm",
    "webstorm", "goland", "clion", "rider", "rubymine", "datagrip", "antigravity",
    # AI assistants
    "codex", "claude", "gemini", "open", "agent", "dev",
    # cloud and infra
    "docker", "kubectl", "terraform", "ansible", "gh",
    # language runtimes and package managers
    "node", "npm", "pnpm", "yarn", "bun", "python", "pip", "go", "cargo",
    "rust", "gradle", "mvn", "dotnet",
)

_EXECUTABLE_SUFFIX_RE = re.compile(r"\.(exe|cmd|bat|com|ps1)$", re.IGNORECASE)


def normalize_executable_name(file_name: str) -> str:
    """Lowercase a file name and strip a trailing executable suffix."""
    return _EXECUTABLE_SUFFIX_RE.sub("", file_name.lower()).strip()


def is_potential_dev_tool(command: str) -> bool:
    """Keyword heuristic for developer tools."""
    if len(command) < 2 or command.startswith("_"):
        return False
    return any(keyword in command for keyword in DISCOVERY_KEYWORDS)


def _list_files(directory: str) -> list[tuple[str, str]]:
    """(name, full path) for every non-directory entry; [] if unreadable."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError:
        logger.debug("Skipping unreadable PATH entry %s", directory)
        return []
    files: list[tuple[str, str]] = []
    for entry in entries:
        try:
            if entry.is_dir():
                continue
        except OSError:
            continue
        files.append((entry.name, entry.path))
    # Sorted: scandir order is arbitrary.
    return sorted(files)


class UnknownToolDiscoverer:
    """Finds dev-tool lookalikes on PATH that the catalog does not know.

    Usage::

        discoverer = UnknownToolDiscoverer(HostEnvironment.from_os())
        for candidate in discoverer.discover(known_aliases(tools)):
            print(candidate.command, candidate.source_path)
    """

    def __init__(
        self,
        env: HostEnvironment,
        limit: int = DISCOVERY_LIMIT,
        max_workers: int = 8,
    ) -> None:
        self.env = env
        self.limit = limit
        self.max_workers = max(1, max_workers)

    def discover(self, known: set[str]) -> list[UnknownToolCandidate]:
        """Return at most ``limit`` candidates, sorted by command.

        Args:
            known: Known aliases and names; compared case-insensitively.

        Returns:
            Deterministic, de-duplicated candidate list.
        """
        known_lower = {alias.lower() for alias in known}
        found: dict[str, UnknownToolCandidate] = {}

        directories = list(dict.fromkeys(self.env.path_entries))
        if directories:
            workers = min(self.max_workers, len(directories))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                listings = list(pool.map(_list_files, directories))
            for files in listings:
                for name, path in files:
                    self._consider(name, path, known_lower, found)

        if self.env.is_windows:
            for name, path in self._local_program_executables():
                self._consider(name, path, known_lower, found)

        ordered = sorted(found.values(), key=lambda c: c.command)
        return ordered[: self.limit]

    @staticmethod
    def _consider(
        file_name: str,
        source_path: str,
        known: set[str],
        found: dict[str, UnknownToolCandidate],
    ) -> None:
        command = normalize_executable_name(file_name)
        if not command or command in known or command in found:
            return
        if not is_potential_dev_tool(command):
            return
        found[command] = UnknownToolCandidate(command=command, source_path=source_path)

    def _local_program_executables(self) -> list[tuple[str, str]]:
        """Candidate executables under ``%LOCALAPPDATA%\\Programs``."""
        if not self.env.local_app_data:
            return []
        programs_root = Path(self.env.local_app_data) / "Programs"
        try:
            with os.scandir(programs_root) as it:
                apps = sorted(e.name for e in it if e.is_dir())
        except OSError:
            return []

        results: list[tuple[str, str]] = []
        for app in apps:
            app_dir = programs_root / app
            for candidate in (
                app_dir / f"{app}.exe",
                app_dir / "bin" / f"{app}.cmd",
                app_dir / "bin" / f"{app}.exe",
            ):
                if candidate.exists():
                    results.append((candidate.name, str(candidate)))
        return results
