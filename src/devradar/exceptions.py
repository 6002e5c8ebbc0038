"""DevRadar exception hierarchy.

All public exceptions inherit from DevRadarError, giving callers a single
base class to catch when they want to handle any DevRadar-specific failure
without swallowing unrelated errors.

Discovery itself never raises: an empty scan is a valid result. These
exceptions cover caller-input errors and broken configuration only.
"""


class DevRadarError(Exception):
    """Base exception for all DevRadar errors."""


class ToolNameRequiredError(DevRadarError):
    """Raised when a tool operation is requested with an empty name."""

    def __init__(self) -> None:
        super().__init__("Tool name is required")


class ToolNotFoundError(DevRadarError):
    """Raised when a tool name matches no catalog entry or alias.

    Attributes:
        name: The tool name as given by the caller.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ProjectNotFoundError(DevRadarError):
    """Raised when a project path handed to a launcher no longer exists."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Project not found: {path}")


class ConfigError(DevRadarError):
    """Raised when the configuration file cannot be parsed or validated.

    Covers malformed YAML, a non-mapping top level, and keys whose values
    have the wrong type.
    """
