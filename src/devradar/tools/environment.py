"""Host environment facts used by tool probing and discovery.

``HostEnvironment`` is a plain snapshot of the platform identifier and the
environment-variable-sourced roots the probers need. Probers take it as a
constructor argument instead of reading ``os.environ`` themselves, which
lets tests describe a Windows host from a Linux box.

Platform Notes:
    Auxiliary filesystem probing (known install paths, program-root
    search, JetBrains ``build.txt``) only runs on Windows, where GUI
    editors are frequently installed without a PATH entry.
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"


def current_platform() -> str:
    """Return the current platform identifier."""
    system = platform.system().lower()
    if system == "darwin":
        return MACOS
    return WINDOWS if system == "windows" else LINUX


def split_path_entries(raw_path: str, separator: str = os.pathsep) -> list[str]:
    """Split a PATH-like value into unique, non-empty entries, order kept."""
    entries = [entry.strip() for entry in raw_path.split(separator)]
    return list(dict.fromkeys(entry for entry in entries if entry))


@dataclass(frozen=True)
class HostEnvironment:
    """Snapshot of the host facts that drive tool probing.

    Attributes:
        platform: One of ``windows``, ``macos``, ``linux``.
        path_entries: De-duplicated PATH directories in search order.
        program_files: ``%ProgramFiles%`` (Windows only).
        program_files_x86: ``%ProgramFiles(x86)%`` (Windows only).
        local_app_data: ``%LOCALAPPDATA%`` (Windows only, may be empty).
        user_profile: ``%USERPROFILE%`` (Windows only, may be empty).
    """

    platform: str
    path_entries: list[str] = field(default_factory=list)
    program_files: str = ""
    program_files_x86: str = ""
    local_app_data: str = ""
    user_profile: str = ""

    @property
    def is_windows(self) -> bool:
        return self.platform == WINDOWS

    @property
    def locate_command(self) -> str:
        """Shell facility that resolves a command on PATH."""
        return "where" if self.is_windows else "which"

    @classmethod
    def from_os(cls) -> HostEnvironment:
        """Capture the running process's environment."""
        env = os.environ
        return cls(
            platform=current_platform(),
            path_entries=split_path_entries(env.get("PATH", "")),
            program_files=env.get("ProgramFiles", "C:\\Program Files"),
            program_files_x86=env.get("ProgramFiles(x86)", "C:\\Program Files (x86)"),
            local_app_data=env.get("LOCALAPPDATA", ""),
            user_profile=env.get("USERPROFILE", ""),
        )


# ---------------------------------------------------------------------------
# Windows install locations
# ---------------------------------------------------------------------------

# Executable file names searched for under program roots, lowercased.
WINDOWS_EXECUTABLE_NAMES: dict[str, list[str]] = {
    "code": ["code.exe", "code - insiders.exe"],
    "cursor": ["cursor.exe"],
    "idea": ["idea64.exe", "idea.exe"],
    "pycharm": ["pycharm64.exe", "pycharm.exe"],
    "webstorm": ["webstorm64.exe", "webstorm.exe"],
    "goland": ["goland64.exe", "goland.exe"],
    "clion": ["clion64.exe", "clion.exe"],
    "rider": ["rider64.exe", "rider.exe"],
    "rubymine": ["rubymine64.exe", "rubymine.exe"],
    "datagrip": ["datagrip64.exe", "datagrip.exe"],
    "antigravity": ["antigravity.exe", "antigravity.cmd", "antigravity"],
    "vim": ["vim.exe"],
    "nvim": ["nvim.exe"],
}


def _join(root: str, *parts: str) -> Path | None:
    # An unset root variable must not turn into a relative path.
    return Path(root, *parts) if root else None


def known_install_paths(tool_name: str, env: HostEnvironment) -> list[Path]:
    """Well-known absolute executable paths for ``tool_name`` on Windows."""
    local = env.local_app_data
    pf = env.program_files
    pf86 = env.program_files_x86
    table: dict[str, list[Path | None]] = {
        "code": [
            _join(local, "Programs", "Microsoft VS Code", "Code.exe"),
            _join(pf, "Microsoft VS Code", "Code.exe"),
            _join(pf86, "Microsoft VS Code", "Code.exe"),
            _join(local, "Programs", "Microsoft VS Code Insiders", "Code - Insiders.exe"),
        ],
        "cursor": [
            _join(local, "Programs", "cursor", "Cursor.exe"),
            _join(local, "Programs", "Cursor", "Cursor.exe"),
            _join(pf, "Cursor", "Cursor.exe"),
            _join(pf86, "Cursor", "Cursor.exe"),
        ],
        "idea": [
            _join(local, "Programs", "IntelliJ IDEA", "bin", "idea64.exe"),
            _join(pf, "JetBrains", "IntelliJ IDEA", "bin", "idea64.exe"),
            _join(pf86, "JetBrains", "IntelliJ IDEA", "bin", "idea64.exe"),
        ],
        "pycharm": [
            _join(local, "Programs", "PyCharm Community", "bin", "pycharm64.exe"),
            _join(local, "Programs", "PyCharm Professional", "bin", "pycharm64.exe"),
            _join(pf, "JetBrains", "PyCharm", "bin", "pycharm64.exe"),
        ],
        "webstorm": [_join(local, "Programs", "WebStorm", "bin", "webstorm64.exe")],
        "goland": [_join(local, "Programs", "GoLand", "bin", "goland64.exe")],
        "clion": [_join(local, "Programs", "CLion", "bin", "clion64.exe")],
        "rider": [_join(local, "Programs", "Rider", "bin", "rider64.exe")],
        "rubymine": [_join(local, "Programs", "RubyMine", "bin", "rubymine64.exe")],
        "datagrip": [_join(local, "Programs", "DataGrip", "bin", "datagrip64.exe")],
        "antigravity": [
            _join(local, "Programs", "Antigravity", "Antigravity.exe"),
            _join(local, "Programs", "Antigravity", "bin", "antigravity.cmd"),
            _join(local, "Programs", "Antigravity", "bin", "antigravity"),
        ],
        "vim": [
            _join(pf, "Vim", "vim90", "vim.exe"),
            _join(pf86, "Vim", "vim90", "vim.exe"),
        ],
        "nvim": [
            _join(local, "nvim", "nvim.exe"),
            _join(pf, "Neovim", "bin", "nvim.exe"),
            _join(pf86, "Neovim", "bin", "nvim.exe"),
            _join(env.user_profile, "scoop", "apps", "neovim", "current", "bin", "nvim.exe"),
        ],
    }
    return [p for p in table.get(tool_name, []) if p is not None]


def program_search_roots(tool_name: str, env: HostEnvironment) -> list[Path]:
    """Directories searched (bounded depth) for a tool's executables."""
    local = env.local_app_data
    pf = env.program_files
    pf86 = env.program_files_x86
    jetbrains = [
        _join(local, "Programs"),
        _join(pf, "JetBrains"),
        _join(pf86, "JetBrains"),
        _join(local, "JetBrains", "Toolbox", "apps"),
    ]
    table: dict[str, list[Path | None]] = {
        "code": [_join(local, "Programs"), _join(pf), _join(pf86)],
        "cursor": [
            _join(local, "Programs"),
            _join(pf),
            _join(pf86),
            _join(env.user_profile, "AppData", "Local", "cursor-updater"),
        ],
        "antigravity": [_join(local, "Programs"), _join(pf), _join(pf86)],
        "vim": [_join(pf, "Vim"), _join(pf86, "Vim")],
        "nvim": [
            _join(pf, "Neovim"),
            _join(pf86, "Neovim"),
            _join(env.user_profile, "scoop", "apps", "neovim"),
            _join(local, "nvim"),
        ],
    }
    for name in ("idea", "pycharm", "webstorm", "goland", "clion", "rider", "rubymine", "datagrip"):
        table[name] = jetbrains
    return [p for p in table.get(tool_name, []) if p is not None]
