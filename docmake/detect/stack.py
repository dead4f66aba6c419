"""Stack detection from marker files and source extensions."""

from __future__ import annotations

import os
from collections import Counter
from pathlib import Path

from ..logging import get_logger
from ..models import TechStack
from ..repo_scanner import RepoScanner
from .utils import load_package_json, package_dependencies

# Checked in this order regardless of directory listing order.
MARKER_FILES = (
    ("go.mod", "go"),
    ("requirements.txt", "python"),
    ("package.json", "node"),
    ("pom.xml", "java-maven"),
    ("build.gradle", "java-gradle"),
)

logger = get_logger("detect.stack")


def detect_node_stack(root: Path) -> TechStack:
    """Classify a Node project as Next.js, React or plain Node."""
    deps = package_dependencies(load_package_json(root))
    if "next" in deps:
        return TechStack(primary="node", framework="nextjs")
    if "react" in deps:
        return TechStack(primary="node", framework="react")
    return TechStack(primary="node")


class StackDetector:
    """Picks the primary language ecosystem of a repository."""

    def __init__(self, scanner: RepoScanner | None = None) -> None:
        self.scanner = scanner or RepoScanner()

    def detect(self, root: str | Path) -> TechStack:
        """Return the detected stack; listing errors on *root* propagate."""
        root_path = Path(root)
        entries = set(os.listdir(root_path))

        for marker, primary in MARKER_FILES:
            if marker not in entries:
                continue
            logger.debug("Found marker %s in %s", marker, root_path)
            if primary == "node":
                return detect_node_stack(root_path)
            return TechStack(primary=primary)

        return self._detect_by_extension(root_path)

    def _detect_by_extension(self, root: Path) -> TechStack:
        manifest = self.scanner.scan(root)
        counts = Counter(file.language for file in manifest.files if file.language)
        logger.debug("No marker file found; extension counts: %s", dict(counts))

        ranked = counts.most_common(2)
        if not ranked or (len(ranked) > 1 and ranked[0][1] == ranked[1][1]):
            return TechStack(primary="unknown", from_marker=False)
        return TechStack(primary=ranked[0][0], from_marker=False)


__all__ = ["MARKER_FILES", "StackDetector", "detect_node_stack"]
