"""Core data models shared across docmake components."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

SUPPORTED_STACKS = ("go", "python", "node")


@dataclass(frozen=True)
class FileMeta:
    """Metadata for an individual repository file."""

    path: str
    language: Optional[str]


@dataclass(frozen=True)
class RepoManifest:
    """Sorted view of the repository files consumed by the detectors."""

    root: str
    files: Tuple[FileMeta, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", tuple(self.files))

    def paths_with_suffix(self, *suffixes: str) -> List[str]:
        return [file.path for file in self.files if file.path.endswith(suffixes)]


@dataclass(frozen=True)
class TechStack:
    """Primary language ecosystem plus an optional framework hint.

    ``from_marker`` is False when the stack was guessed from file extensions.
    """

    primary: str
    framework: Optional[str] = None
    from_marker: bool = True

    @property
    def supported(self) -> bool:
        return self.primary in SUPPORTED_STACKS


@dataclass(frozen=True)
class DatabaseInfo:
    """Database dependency detected in a repository."""

    type: str = ""
    port: str = ""
    env_var: str = ""
    default_uri: str = ""

    @property
    def detected(self) -> bool:
        return bool(self.type)


@dataclass(frozen=True)
class ProjectMeta:
    """Runtime details inferred for a project; each stage returns a new copy.

    ``env`` is stored as a read-only mapping. Instances compare by value but
    are not hashable.
    """

    entry_file: str = ""
    port: str = ""
    framework: Optional[str] = None
    database: DatabaseInfo = field(default_factory=DatabaseInfo)
    env: Mapping[str, str] = field(default_factory=dict)
    env_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "env", MappingProxyType(dict(self.env)))


@dataclass(frozen=True)
class MultiService:
    """Frontend/backend directories of a split repository."""

    frontend_path: Optional[str] = None
    backend_path: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(self.frontend_path and self.backend_path)
