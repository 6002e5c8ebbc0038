"""Installation prober: is a catalogued tool installed, and which version?

Probe Algorithm:
    1. Command resolution: ask ``which`` (``where`` on Windows) for each
       alias in order. The first success means installed.
    2. Windows only: check the tool's well-known absolute install paths.
    3. Windows only: search the tool's program roots (depth <= 4) for one
       of its expected executable names, case-insensitively.
    4. If installed, run the version command for each alias until one
       yields a non-blank first line. JetBrains IDEs on Windows fall back
       to a ``build.txt`` found next to the installation.

Every step is best effort. Missing binaries, non-zero exits and timeouts
only mean "not installed" or "no version"; nothing is raised.

``probe_all()`` probes definitions concurrently on a bounded thread pool.
Timeouts are enforced per subprocess, so a hung tool only costs its own
worker, and results come back in catalog order.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from devradar.tools.catalog import JETBRAINS_TOOLS, ToolDefinition, version_command
from devradar.tools.environment import (
    WINDOWS_EXECUTABLE_NAMES,
    HostEnvironment,
    known_install_paths,
    program_search_roots,
)
from devradar.tools.models import ToolInfo
from devradar.tools.runner import CommandRunner

logger = logging.getLogger(__name__)

WHICH_TIMEOUT = 2.0
VERSION_TIMEOUT = 5.0
SEARCH_DEPTH = 4
BUILD_FILE = "build.txt"


def find_executable_in_dir(directory: Path, exe_names: list[str], max_depth: int) -> Path | None:
    """Depth-bounded search for a file whose lowercased name is in ``exe_names``.

    Args:
        directory: Root of the search.
        exe_names: Lowercased file names to match.
        max_depth: Levels below ``directory`` still searched.

    Returns:
        The first matching file, or None.
    """
    if max_depth < 0:
        return None
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError:
        return None

    wanted = {name.lower() for name in exe_names}
    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError:
            continue
        if not is_dir:
            if entry.name.lower() in wanted:
                return Path(entry.path)
            continue
        found = find_executable_in_dir(Path(entry.path), exe_names, max_depth - 1)
        if found is not None:
            return found
    return None


class InstallationProber:
    """Determines install status and version for tool definitions.

    Usage::

        prober = InstallationProber(HostEnvironment.from_os())
        for info in prober.probe_all(BUILTIN_TOOLS):
            print(info.display_name, info.version)
    """

    def __init__(
        self,
        env: HostEnvironment,
        runner: CommandRunner | None = None,
        which_timeout: float = WHICH_TIMEOUT,
        version_timeout: float = VERSION_TIMEOUT,
        max_workers: int = 8,
    ) -> None:
        self.env = env
        self.runner = runner if runner is not None else CommandRunner()
        self.which_timeout = which_timeout
        self.version_timeout = version_timeout
        self.max_workers = max(1, max_workers)

    # -- Installation ------------------------------------------------------

    def resolve_alias(self, aliases: tuple[str, ...] | list[str]) -> str | None:
        """Return the first alias the host can resolve on PATH."""
        for alias in aliases:
            result = self.runner.run([self.env.locate_command, alias], self.which_timeout)
            if result.ok:
                return alias
        return None

    def is_installed(self, definition: ToolDefinition) -> bool:
        """Check PATH, then (Windows only) known paths and program roots."""
        if self.resolve_alias(definition.aliases) is not None:
            return True
        if not self.env.is_windows:
            return False

        for path in known_install_paths(definition.name, self.env):
            if path.exists():
                logger.debug("Found %s at known path %s", definition.name, path)
                return True

        exe_names = WINDOWS_EXECUTABLE_NAMES.get(definition.name, [])
        if not exe_names:
            return False
        for root in program_search_roots(definition.name, self.env):
            found = find_executable_in_dir(root, exe_names, SEARCH_DEPTH)
            if found is not None:
                logger.debug("Found %s by search at %s", definition.name, found)
                return True
        return False

    # -- Version -----------------------------------------------------------

    def get_version(self, definition: ToolDefinition) -> str | None:
        """First non-blank line of the first successful version command."""
        for alias in definition.aliases:
            result = self.runner.run(version_command(alias), self.version_timeout)
            if not result.ok:
                logger.debug("Version query for %s: %s", alias, result.status.value)
                continue
            line = result.first_line()
            if line:
                return line
        return None

    def read_build_version(self, definition: ToolDefinition) -> str | None:
        """JetBrains fallback: contents of the first non-empty ``build.txt``.

        Only immediate product directories under each search root are
        checked (``<root>/<product>/build.txt``).
        """
        if not self.env.is_windows or definition.name not in JETBRAINS_TOOLS:
            return None
        for root in program_search_roots(definition.name, self.env):
            try:
                with os.scandir(root) as it:
                    products = sorted(Path(e.path) for e in it if e.is_dir())
            except OSError:
                continue
            for product in products:
                build_file = product / BUILD_FILE
                try:
                    build = build_file.read_text(encoding="utf-8").strip()
                except (OSError, UnicodeDecodeError):
                    continue
                if build:
                    return build
        return None

    # -- Probing -----------------------------------------------------------

    def probe(self, definition: ToolDefinition) -> ToolInfo | None:
        """Probe one tool.

        Args:
            definition: The tool to look for.

        Returns:
            A ``ToolInfo`` if installed, otherwise None.
        """
        try:
            if not self.is_installed(definition):
                return None
            version = self.get_version(definition) or self.read_build_version(definition)
        except Exception:
            logger.warning("Probe failed for %s", definition.name, exc_info=True)
            return None
        return ToolInfo.from_definition(definition, version)

    def probe_all(self, definitions: list[ToolDefinition]) -> list[ToolInfo]:
        """Probe many tools concurrently; installed tools in input order."""
        if not definitions:
            return []
        workers = min(self.max_workers, len(definitions))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(self.probe, definitions))
        return [info for info in results if info is not None]
