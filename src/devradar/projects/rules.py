"""Static rule table for recognising project roots.

Each ``ClassificationRule`` names a marker file whose presence in a
directory identifies a project ecosystem. Rule ORDER IS SIGNIFICANT: when
a directory carries markers for several ecosystems (``package.json`` next
to a ``Makefile``, say) the earliest rule wins.

The module also holds the ignore set used by the tree walker and the
source-file suffixes used by the weak "Unknown" fallback.
"""

from __future__ import annotations

from dataclasses import dataclass

# Project type whose manifest is read for a human description.
NODE_PROJECT_TYPE = "Node.js"
NODE_MANIFEST = "package.json"

UNKNOWN_TYPE = "Unknown"
UNKNOWN_LANGUAGE = "Unknown"
UNKNOWN_DESCRIPTION = "Unrecognized project type"

VCS_MARKER = ".git"


@dataclass(frozen=True)
class ClassificationRule:
    """A marker file and the classification it implies.

    Attributes:
        marker: File name (or suffix, see ``suffix``) to look for.
        project_type: Project type label, e.g. "Java/Maven".
        language: Primary language label.
        description: Generic description used when nothing richer exists.
        suffix: When True, ``marker`` matches any entry ending with it
            (``.csproj`` files carry the project name as their stem).
    """

    marker: str
    project_type: str
    language: str
    description: str
    suffix: bool = False

    def matches(self, names: frozenset[str]) -> bool:
        """Return True if any entry name satisfies this rule's marker."""
        if not self.suffix:
            return self.marker in names
        return any(name.endswith(self.marker) and name != self.marker for name in names)


def _build_rules() -> list[ClassificationRule]:
    """Build the ordered rule table.

    Returns:
        Rules in precedence order.
    """
    return [
        # -- JavaScript / TypeScript --
        ClassificationRule("package.json", "Node.js", "JavaScript/TypeScript", "Node.js project"),
        # -- Python --
        ClassificationRule("requirements.txt", "Python", "Python", "Python project"),
        ClassificationRule("setup.py", "Python", "Python", "Python project"),
        ClassificationRule("pyproject.toml", "Python", "Python", "Python project"),
        # -- Go / Rust / Ruby --
        ClassificationRule("go.mod", "Go", "Go", "Go project"),
        ClassificationRule("Cargo.toml", "Rust", "Rust", "Rust project"),
        ClassificationRule("Gemfile", "Ruby", "Ruby", "Ruby project"),
        # -- JVM --
        ClassificationRule("pom.xml", "Java/Maven", "Java", "Maven project"),
        ClassificationRule("build.gradle", "Java/Gradle", "Java", "Gradle project"),
        # -- .NET --
        ClassificationRule(".csproj", ".NET", "C#", ".NET project", suffix=True),
        ClassificationRule("project.json", ".NET", "C#", ".NET project"),
        # -- Others --
        ClassificationRule("composer.json", "PHP", "PHP", "PHP project"),
        ClassificationRule("pubspec.yaml", "Dart/Flutter", "Dart", "Dart/Flutter project"),
        ClassificationRule("Package.swift", "Swift", "Swift", "Swift Package"),
        ClassificationRule("CMakeLists.txt", "C/C++", "C/C++", "CMake project"),
        ClassificationRule("Makefile", "C/C++", "C/C++", "C/C++ project"),
    ]


PROJECT_RULES: list[ClassificationRule] = _build_rules()

# Suffixes that mark a directory as "some kind of code" when no rule fires.
SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".js", ".ts", ".py", ".go", ".rs", ".java",
    ".cs", ".cpp", ".c", ".vue", ".jsx", ".tsx",
)

# Directory names never descended into: dependency caches, build output,
# VCS internals and editor state.
IGNORE_DIRS: frozenset[str] = frozenset({
    "node_modules",
    ".git",
    "dist",
    "build",
    "target",
    "bin",
    "obj",
    "out",
    ".vscode",
    ".idea",
    "coverage",
    "__pycache__",
    ".venv",
    "venv",
    "env",
    ".next",
    ".nuxt",
    "vendor",
    "tmp",
    "temp",
})
