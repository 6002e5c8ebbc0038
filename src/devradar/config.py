"""User configuration for DevRadar.

Configuration is optional. When present it is a small YAML mapping read
from ``$DEVRADAR_CONFIG`` or ``~/.devradar/config.yaml``::

    max_depth: 3
    extra_ignore_dirs: [".terraform", "Pods"]
    which_timeout: 2
    version_timeout: 5
    max_workers: 8
    discovery_limit: 20
    storage_dir: ~/.cache/devradar

Unknown keys are ignored so that older versions can read newer files.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from devradar.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVRADAR_CONFIG"
HOME_ENV_VAR = "DEVRADAR_HOME"
CONFIG_FILENAME = "config.yaml"


def default_storage_dir() -> Path:
    """Return the directory holding DevRadar's JSON files."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".devradar"


@dataclass
class DevRadarConfig:
    """Tunable knobs for scans and persistence.

    Attributes:
        max_depth: Directory levels below the scan root the walker visits.
        extra_ignore_dirs: Directory names skipped in addition to the
            built-in ignore set.
        which_timeout: Seconds allowed for each PATH lookup.
        version_timeout: Seconds allowed for each version query.
        max_workers: Thread pool size for concurrent tool probes.
        discovery_limit: Maximum unknown-tool candidates reported.
        storage_dir: Directory for caches and the custom tool catalog.
    """

    max_depth: int = 2
    extra_ignore_dirs: list[str] = field(default_factory=list)
    which_timeout: float = 2.0
    version_timeout: float = 5.0
    max_workers: int = 8
    discovery_limit: int = 20
    storage_dir: Path = field(default_factory=default_storage_dir)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DevRadarConfig:
        """Build a config from a parsed YAML mapping.

        Args:
            data: Mapping of config keys to values.

        Returns:
            A validated ``DevRadarConfig``.

        Raises:
            ConfigError: If a known key has a value of the wrong type.
        """
        config = cls()
        for key in ("max_depth", "max_workers", "discovery_limit"):
            if key in data:
                value = data[key]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
                setattr(config, key, value)
        for key in ("which_timeout", "version_timeout"):
            if key in data:
                value = data[key]
                if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                    raise ConfigError(f"{key} must be a positive number, got {value!r}")
                setattr(config, key, float(value))
        if "extra_ignore_dirs" in data:
            dirs = data["extra_ignore_dirs"]
            if not isinstance(dirs, list) or not all(isinstance(d, str) for d in dirs):
                raise ConfigError("extra_ignore_dirs must be a list of strings")
            config.extra_ignore_dirs = list(dirs)
        if "storage_dir" in data:
            storage = data["storage_dir"]
            if not isinstance(storage, str) or not storage.strip():
                raise ConfigError("storage_dir must be a non-empty string")
            config.storage_dir = Path(storage).expanduser()
        if config.max_workers == 0:
            config.max_workers = 1
        return config


def config_path() -> Path:
    """Return the config file location, honouring ``$DEVRADAR_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return default_storage_dir() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> DevRadarConfig:
    """Load configuration from disk, falling back to defaults.

    Args:
        path: Explicit config file. Defaults to ``config_path()``.

    Returns:
        The loaded configuration, or defaults when the file is absent.

    Raises:
        ConfigError: If the file exists but is not valid YAML or fails
            validation.
    """
    target = path if path is not None else config_path()
    if not target.is_file():
        logger.debug("No config file at %s, using defaults", target)
        return DevRadarConfig()

    try:
        raw = target.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {target}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {target}: {exc}") from exc

    if data is None:
        return DevRadarConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {target} must contain a mapping")
    return DevRadarConfig.from_dict(data)
