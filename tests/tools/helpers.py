"""Shared test helpers: a scripted command runner and host environments."""

from __future__ import annotations

import threading
from pathlib import Path

from devradar.tools.environment import LINUX, WINDOWS, HostEnvironment
from devradar.tools.runner import CommandResult, CommandStatus


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(CommandStatus.OK, stdout, 0)


def failed(stdout: str = "") -> CommandResult:
    return CommandResult(CommandStatus.FAILED, stdout, 1)


TIMEOUT = CommandResult(CommandStatus.TIMEOUT)


class FakeRunner:
    """``CommandRunner`` stand-in returning scripted results.

    Unscripted commands behave like a missing binary.
    """

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[tuple[str, ...], float]] = []
        self._lock = threading.Lock()

    def installed(self, alias: str, version_output: str | None = None, locate: str = "which") -> FakeRunner:
        """Script ``alias`` as resolvable, optionally with version output."""
        self.responses[(locate, alias)] = ok(f"/usr/bin/{alias}\n")
        if version_output is not None:
            self.responses[(alias, "--version")] = ok(version_output)
        return self

    def run(self, argv: list[str], timeout: float) -> CommandResult:
        with self._lock:
            self.calls.append((tuple(argv), timeout))
        return self.responses.get(tuple(argv), CommandResult(CommandStatus.NOT_FOUND))

    def commands(self) -> list[tuple[str, ...]]:
        return [argv for argv, _ in self.calls]


def linux_env(path_entries: list[str] | None = None) -> HostEnvironment:
    return HostEnvironment(platform=LINUX, path_entries=list(path_entries or []))


def windows_env(root: Path, path_entries: list[str] | None = None) -> HostEnvironment:
    """A Windows host whose well-known roots live under ``root``."""
    return HostEnvironment(
        platform=WINDOWS,
        path_entries=list(path_entries or []),
        program_files=str(root / "Program Files"),
        program_files_x86=str(root / "Program Files (x86)"),
        local_app_data=str(root / "AppData" / "Local"),
        user_profile=str(root / "Users" / "me"),
    )
