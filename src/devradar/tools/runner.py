"""Bounded external command execution.

Every process DevRadar spawns goes through ``CommandRunner.run()``, which
always carries a timeout. ``subprocess.run`` kills the child when the
timeout expires, so a hung tool cannot stall a scan.

Failures are reported as values, not exceptions: a ``CommandResult``
states whether the command ran, failed, timed out, or could not be found.
Callers treat anything but ``OK`` as "absent".

Output is decoded as UTF-8 with undecodable bytes replaced, so a tool
printing a stray legacy-encoded byte still reports its version line.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class CommandStatus(Enum):
    """Outcome of one external command."""

    OK = "ok"
    FAILED = "failed"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class CommandResult:
    """Result of running an external command.

    Attributes:
        status: What happened.
        stdout: Captured standard output (empty unless the process ran).
        returncode: Exit status, or None if the process never finished.
    """

    status: CommandStatus
    stdout: str = ""
    returncode: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.OK

    def first_line(self) -> str | None:
        """First non-blank stdout line, stripped, or None."""
        for line in self.stdout.splitlines():
            if line.strip():
                return line.strip()
        return None


class CommandRunner:
    """Runs commands with a mandatory timeout.

    Windows version shims are usually ``.cmd`` batch files, which only run
    through the shell, so commands go through ``cmd`` there.
    """

    def __init__(self, use_shell: bool | None = None) -> None:
        self.use_shell = os.name == "nt" if use_shell is None else use_shell

    def run(self, argv: list[str], timeout: float) -> CommandResult:
        """Run ``argv`` and capture its output.

        Args:
            argv: Command and arguments.
            timeout: Seconds before the process is killed.

        Returns:
            A ``CommandResult``; never raises for process failures.
        """
        command: list[str] | str = subprocess.list2cmdline(argv) if self.use_shell else argv
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                shell=self.use_shell,
                stdin=subprocess.DEVNULL,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Command timed out after %ss: %s", timeout, argv)
            return CommandResult(CommandStatus.TIMEOUT)
        except FileNotFoundError:
            return CommandResult(CommandStatus.NOT_FOUND)
        except (OSError, subprocess.SubprocessError, ValueError) as exc:
            logger.debug("Command failed to start: %s (%s)", argv, exc)
            return CommandResult(CommandStatus.ERROR)

        status = CommandStatus.OK if proc.returncode == 0 else CommandStatus.FAILED
        return CommandResult(status, proc.stdout or "", proc.returncode)
