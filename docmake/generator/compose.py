"""docker-compose.yml rendering for single and split repositories."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..logging import get_logger
from ..models import ProjectMeta, TechStack
from .base import UnsupportedStackError, create_environment

COMPOSE_NAME = "docker-compose.yml"

logger = get_logger("generator.compose")


def environment_entries(meta: ProjectMeta) -> List[str]:
    """Return the inline ``KEY=value`` entries for the application service.

    Variables from ``meta.env`` are inlined only when no env file is referenced.
    The database connection variable is appended unless ``meta.env`` defines it.
    """
    entries: List[str] = []
    if not meta.env_file_path:
        for key, value in meta.env.items():
            escaped = value.replace('"', "'")
            entries.append(f"{key}={escaped}")

    database = meta.database
    if database.detected and database.default_uri:
        env_var = database.env_var or "DATABASE_URL"
        if env_var not in meta.env:
            entries.append(f"{env_var}={database.default_uri}")
    return entries


class ComposeRenderer:
    """Builds the compose document for the detected stack."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._env = create_environment(templates_dir)

    def service_kind(self, stack: TechStack, meta: ProjectMeta) -> str:
        if stack.primary == "node":
            return "node"
        if stack.primary == "python":
            return "django" if meta.framework == "django" else "python"
        if stack.primary == "go":
            return "go"
        raise UnsupportedStackError(stack.primary)

    def render(self, stack: TechStack, meta: ProjectMeta, image_name: str) -> str:
        kind = self.service_kind(stack, meta)
        logger.debug("Rendering %s compose service for %s", kind, image_name)
        template = self._env.get_template("compose/app.j2")
        return template.render(
            kind=kind,
            meta=meta,
            image=image_name,
            environment=environment_entries(meta),
            database=meta.database,
        )

    def render_multi(
        self,
        frontend: ProjectMeta,
        backend: ProjectMeta,
        frontend_image: str,
        backend_image: str,
    ) -> str:
        """Render the frontend + backend layout with its bundled mongo service."""
        template = self._env.get_template("compose/multi.j2")
        return template.render(
            frontend=frontend,
            backend=backend,
            frontend_image=frontend_image,
            backend_image=backend_image,
        )

    def write(self, directory: Path, content: str) -> Path:
        path = Path(directory) / COMPOSE_NAME
        path.write_text(content, encoding="utf-8")
        return path
