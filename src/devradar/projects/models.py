"""Data models for project discovery.

Contains the classifier's verdict for a single directory and the record
produced for every project root the walker finds.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Classification:
    """What kind of project a directory is.

    Attributes:
        project_type: Type label, e.g. "Node.js" or "Java/Gradle".
        language: Language label, e.g. "JavaScript/TypeScript".
        description: Human description (generic unless a manifest had one).
    """

    project_type: str
    language: str
    description: str


@dataclass
class ProjectRecord:
    """A project root discovered by a scan.

    Identity is ``path``: one scan never yields two records for the same
    directory, nor a record nested under another.

    Attributes:
        name: Directory basename.
        path: Absolute directory path.
        language: Detected language label.
        project_type: Detected project type label.
        description: Optional human description.
        has_git: Whether a ``.git`` entry exists in the root, if known.
        last_modified: Directory mtime in seconds since the epoch
            (0 when the stat failed).
    """

    name: str
    path: str
    language: str
    project_type: str
    description: str | None = None
    has_git: bool | None = None
    last_modified: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectRecord:
        """Deserialize from the dict shape produced by ``to_dict()``.

        Raises:
            KeyError: If an identity field is missing.
        """
        return cls(
            name=data["name"],
            path=data["path"],
            language=data.get("language", ""),
            project_type=data.get("project_type", ""),
            description=data.get("description"),
            has_git=data.get("has_git"),
            last_modified=data.get("last_modified"),
        )
