"""Repository cloning via the git CLI."""

from __future__ import annotations

import re
from pathlib import Path

from ..logging import get_logger
from ..process import Runner, default_runner, run_stage

logger = get_logger("git.clone")


def repository_name(repo_url: str) -> str:
    """Return the final path segment of *repo_url* without a ``.git`` suffix."""
    segment = re.split(r"[/:]", repo_url.strip().rstrip("/"))[-1]
    if segment.endswith(".git"):
        segment = segment[: -len(".git")]
    if not segment:
        raise ValueError(f"Cannot derive a directory name from {repo_url!r}")
    return segment


class Cloner:
    """Clones repositories into a working directory, reusing existing checkouts."""

    def __init__(self, runner: Runner | None = None, workdir: Path | None = None) -> None:
        self._runner = runner or default_runner
        self.workdir = workdir or Path.cwd()

    def clone(self, repo_url: str) -> Path:
        name = repository_name(repo_url)
        destination = self.workdir / name
        if destination.exists():
            logger.warning("Repository already exists: %s", destination)
            return destination

        logger.info("Cloning %s into %s", repo_url, destination)
        run_stage(self._runner, "clone", ["git", "clone", repo_url, name], cwd=self.workdir)
        return destination
