"""Project metadata detectors for the supported stack families."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..logging import get_logger
from ..models import ProjectMeta, RepoManifest, TechStack
from .base import ProjectDetector
from .utils import load_package_json, package_dependencies, read_text

logger = get_logger("detect.project")


class NodeProjectDetector(ProjectDetector):
    """Reads package.json and scans JavaScript sources for a listening port."""

    DEFAULT_PORT = "3000"
    DEFAULT_ENTRY = "index.js"
    ENTRY_CANDIDATES = ("server.js", "app.js", "index.js")
    # Independent checks: a later match overrides an earlier one.
    FRAMEWORK_DEPENDENCIES = (
        ("express", "express"),
        ("next", "nextjs"),
        ("react", "react"),
        ("nest", "nestjs"),
    )
    LISTEN_PATTERN = re.compile(r"listen\((\d+)\)")

    def supports(self, stack: TechStack) -> bool:
        return stack.primary == "node"

    def detect(self, manifest: RepoManifest) -> ProjectMeta:
        root = Path(manifest.root)
        package = load_package_json(root)

        entry_file = ""
        main = package.get("main")
        if isinstance(main, str):
            entry_file = main

        framework: Optional[str] = None
        deps = package_dependencies(package)
        for dependency, name in self.FRAMEWORK_DEPENDENCIES:
            if dependency in deps:
                framework = name

        # Conventional filenames win over the "main" field.
        for candidate in self.ENTRY_CANDIDATES:
            if (root / candidate).exists():
                entry_file = candidate
                break

        port = _last_match(root, manifest.paths_with_suffix(".js"), self.LISTEN_PATTERN)

        meta = ProjectMeta(
            entry_file=entry_file or self.DEFAULT_ENTRY,
            port=port or self.DEFAULT_PORT,
            framework=framework,
        )
        logger.debug("Node project: %s", meta)
        return meta


class PythonProjectDetector(ProjectDetector):
    """Recognises Django, Flask and FastAPI projects and their ports."""

    ENTRY_CANDIDATES = ("app.py", "main.py", "run.py")
    RUN_PORT_PATTERN = re.compile(r"run\(.*port\s*=\s*(\d+)")

    def supports(self, stack: TechStack) -> bool:
        return stack.primary == "python"

    def detect(self, manifest: RepoManifest) -> ProjectMeta:
        root = Path(manifest.root)

        entry_file = self.ENTRY_CANDIDATES[0]
        for candidate in self.ENTRY_CANDIDATES:
            if (root / candidate).exists():
                entry_file = candidate
                break

        if (root / "manage.py").exists():
            logger.debug("manage.py present; treating %s as Django", root)
            return ProjectMeta(entry_file="manage.py", port="8000", framework="django")

        framework: Optional[str] = None
        port = ""
        for rel_path in manifest.paths_with_suffix(".py"):
            text = read_text(root / rel_path)
            if text is None:
                continue
            if "from flask" in text:
                framework = "flask"
            if "fastapi import" in text:
                framework = "fastapi"
            match = self.RUN_PORT_PATTERN.search(text)
            if match:
                port = match.group(1)

        if not port:
            port = "5000" if framework == "flask" else "8000"

        meta = ProjectMeta(entry_file=entry_file, port=port, framework=framework)
        logger.debug("Python project: %s", meta)
        return meta


class DefaultProjectDetector(ProjectDetector):
    """Fixed Go-style defaults for every other stack; reads nothing."""

    def supports(self, stack: TechStack) -> bool:
        return True

    def detect(self, manifest: RepoManifest) -> ProjectMeta:
        return ProjectMeta(entry_file="main.go", port="8080")


def _last_match(root: Path, rel_paths: Iterable[str], pattern: re.Pattern[str]) -> str:
    found = ""
    for rel_path in rel_paths:
        text = read_text(root / rel_path)
        if text is None:
            continue
        match = pattern.search(text)
        if match:
            found = match.group(1)
    return found


_DETECTORS: Sequence[ProjectDetector] = (
    NodeProjectDetector(),
    PythonProjectDetector(),
    DefaultProjectDetector(),
)


def detect_project(
    manifest: RepoManifest,
    stack: TechStack,
    detectors: Sequence[ProjectDetector] | None = None,
) -> ProjectMeta:
    """Run the first detector that supports *stack*."""
    for detector in detectors or _DETECTORS:
        if detector.supports(stack):
            return detector.detect(manifest)
    return ProjectMeta()
