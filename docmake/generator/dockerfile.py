"""Dockerfile rendering for the supported stacks."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from ..models import ProjectMeta, TechStack
from .base import UnsupportedStackError, create_environment

DOCKERFILE_NAME = "Dockerfile"

_NODE_TEMPLATES = {
    "nextjs": "dockerfile/nextjs.j2",
    "react": "dockerfile/react.j2",
}

logger = get_logger("generator.dockerfile")


class DockerfileRenderer:
    """Selects and renders one of the fixed Dockerfile templates."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._env = create_environment(templates_dir)

    def template_name(self, stack: TechStack, meta: ProjectMeta) -> str:
        if stack.primary == "go":
            return "dockerfile/go.j2"
        if stack.primary == "python":
            return "dockerfile/python.j2"
        if stack.primary == "node":
            # express, nestjs and plain Node share the generic runtime image.
            return _NODE_TEMPLATES.get(meta.framework or "", "dockerfile/node.j2")
        raise UnsupportedStackError(stack.primary)

    def render(self, stack: TechStack, meta: ProjectMeta) -> str:
        name = self.template_name(stack, meta)
        logger.debug("Rendering %s for %s", name, stack.primary)
        return self._env.get_template(name).render(meta=meta)

    def write(self, directory: Path, stack: TechStack, meta: ProjectMeta) -> Path:
        """Render and write the Dockerfile into *directory*, replacing any existing one."""
        content = self.render(stack, meta)
        path = Path(directory) / DOCKERFILE_NAME
        path.write_text(content, encoding="utf-8")
        return path
