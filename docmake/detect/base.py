"""Base classes for project metadata detectors."""

from abc import ABC, abstractmethod

from ..models import ProjectMeta, RepoManifest, TechStack


class ProjectDetector(ABC):
    """Contract for detectors that infer runtime details for one stack family."""

    @abstractmethod
    def supports(self, stack: TechStack) -> bool:
        """Return True when this detector handles the given stack."""

    @abstractmethod
    def detect(self, manifest: RepoManifest) -> ProjectMeta:
        """Infer entry file, port and framework from the repository."""
