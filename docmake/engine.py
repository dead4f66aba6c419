"""Container engine collaborators: build, login, push and compose startup."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .process import Runner, default_runner, run_stage

logger = get_logger("engine")


class ContainerEngine:
    """Thin wrapper over the docker CLI; every failure raises ExternalProcessError."""

    def __init__(self, runner: Runner | None = None, executable: str = "docker") -> None:
        self._runner = runner or default_runner
        self.executable = executable

    def build_image(self, context_dir: Path, image_name: str) -> None:
        logger.info("Building image %s", image_name)
        run_stage(
            self._runner,
            "build",
            [self.executable, "build", "-t", image_name, "-f", "Dockerfile", "."],
            cwd=Path(context_dir),
        )

    def login(self, username: str, password: str) -> bool:
        """Log into the registry; returns False when skipped for missing credentials."""
        if not username or not password:
            logger.warning("Registry login skipped (credentials missing)")
            return False
        logger.info("Logging into registry as %s", username)
        run_stage(
            self._runner,
            "login",
            [self.executable, "login", "-u", username, "--password-stdin"],
            input_text=password,
        )
        return True

    def push_image(self, image_name: str) -> None:
        logger.info("Pushing image %s", image_name)
        run_stage(self._runner, "push", [self.executable, "push", image_name])

    def compose_up(self, context_dir: Path) -> None:
        logger.info("Starting services from %s", context_dir)
        run_stage(
            self._runner,
            "start",
            [self.executable, "compose", "up", "-d"],
            cwd=Path(context_dir),
        )
