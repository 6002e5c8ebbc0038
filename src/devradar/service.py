"""High-level DevRadar API tying scanners, catalog and persistence together.

Usage::

    radar = DevRadar.from_config(load_config())
    projects = radar.scan_projects("~/code")
    result = radar.scan_tools()
    added = radar.confirm_tools(result.unknown_candidates[:2])

Every scan returns a (possibly empty) result; "nothing found" is not an
error. Results are written to the caches after each scan.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from devradar.config import DevRadarConfig
from devradar.exceptions import ProjectNotFoundError
from devradar.projects.models import ProjectRecord
from devradar.projects.walker import ProjectWalker
from devradar.storage import (
    CachedProjects,
    CachedTools,
    CustomToolStore,
    ProjectsCache,
    RecentProjectsStore,
    ToolsCache,
)
from devradar.tools.catalog import ToolDefinition, known_aliases, merge_tool_definitions
from devradar.tools.confirmation import ChoicePresenter, confirm_tools, review_candidates
from devradar.tools.discoverer import UnknownToolDiscoverer
from devradar.tools.environment import HostEnvironment
from devradar.tools.launcher import launch_tool
from devradar.tools.models import ToolsScanResult, UnknownToolCandidate
from devradar.tools.prober import InstallationProber
from devradar.tools.runner import CommandRunner

logger = logging.getLogger(__name__)


class DevRadar:
    """Facade over project scanning, tool scanning and confirmation.

    Collaborators are injected so tests can supply a fake runner, a
    synthetic host environment and a temporary storage directory.
    """

    def __init__(
        self,
        config: DevRadarConfig,
        env: HostEnvironment,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config
        self.env = env
        self.walker = ProjectWalker(extra_ignore_dirs=config.extra_ignore_dirs)
        self.prober = InstallationProber(
            env,
            runner=runner,
            which_timeout=config.which_timeout,
            version_timeout=config.version_timeout,
            max_workers=config.max_workers,
        )
        self.discoverer = UnknownToolDiscoverer(
            env, limit=config.discovery_limit, max_workers=config.max_workers,
        )
        self.custom_tools = CustomToolStore(config.storage_dir)
        self.projects_cache = ProjectsCache(config.storage_dir)
        self.tools_cache = ToolsCache(config.storage_dir)
        self.recent = RecentProjectsStore(config.storage_dir)

    @classmethod
    def from_config(cls, config: DevRadarConfig) -> DevRadar:
        """Build an instance for the running host."""
        return cls(config, HostEnvironment.from_os())

    # -- Projects ----------------------------------------------------------

    def scan_projects(self, root: str | Path, max_depth: int | None = None) -> list[ProjectRecord]:
        """Scan ``root`` and cache the result.

        Args:
            root: Directory to scan; ``~`` is expanded.
            max_depth: Override the configured depth bound.

        Returns:
            Projects newest first.
        """
        folder = os.path.abspath(os.path.expanduser(str(root)))
        depth = self.config.max_depth if max_depth is None else max_depth
        projects = self.walker.scan(folder, max_depth=depth)
        self.projects_cache.save(folder, projects)
        return projects

    def cached_projects(self) -> CachedProjects | None:
        return self.projects_cache.load()

    # -- Tools -------------------------------------------------------------

    def catalog(self) -> list[ToolDefinition]:
        """Built-in plus custom definitions, rebuilt on every call."""
        return merge_tool_definitions(self.custom_tools.load())

    def scan_tools(self) -> ToolsScanResult:
        """Probe every catalogued tool and look for unknown candidates."""
        tools = self.catalog()
        installed = self.prober.probe_all(tools)
        candidates = self.discoverer.discover(known_aliases(tools))
        logger.info(
            "%d of %d catalogued tool(s) installed, %d unknown candidate(s)",
            len(installed), len(tools), len(candidates),
        )
        self.tools_cache.save(installed, candidates)
        return ToolsScanResult(tools=installed, unknown_candidates=candidates)

    def cached_tools(self) -> CachedTools | None:
        return self.tools_cache.load()

    def review_candidates(
        self,
        candidates: list[UnknownToolCandidate],
        presenter: ChoicePresenter,
    ) -> list[UnknownToolCandidate]:
        """Run the interactive review; returns the accepted candidates."""
        return review_candidates(candidates, presenter)

    def confirm_tools(self, candidates: list[UnknownToolCandidate]) -> int:
        """Add candidates to the custom catalog.

        The new tools appear in probe results from the next ``scan_tools()``.
        """
        return confirm_tools(candidates, self.custom_tools)

    def open_tool(self, name: str, project: str | Path | None = None) -> list[str]:
        """Launch a tool, recording ``project`` as recently opened.

        Raises:
            ToolNameRequiredError: Blank name.
            ToolNotFoundError: Unknown name.
            ProjectNotFoundError: Missing project directory.
        """
        project_path = None
        if project is not None:
            project_path = os.path.abspath(os.path.expanduser(str(project)))
            if not os.path.isdir(project_path):
                raise ProjectNotFoundError(project_path)
        argv = launch_tool(name, self.catalog(), self.prober, project_path)
        if project_path is not None:
            self.recent.add(os.path.basename(project_path) or project_path, project_path)
        return argv
