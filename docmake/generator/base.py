"""Shared Jinja environment and errors for the artifact renderers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from jinja2 import FileSystemLoader
from jinja2.sandbox import SandboxedEnvironment

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


class UnsupportedStackError(ValueError):
    """Raised when no template exists for the detected stack."""

    def __init__(self, primary: str) -> None:
        super().__init__(f"unsupported tech stack: {primary}")
        self.primary = primary


def quoted(value: object) -> str:
    """Render *value* as a double-quoted scalar valid in both YAML and JSON."""
    return json.dumps(str(value), ensure_ascii=False)


def create_environment(templates_dir: Path | None = None) -> SandboxedEnvironment:
    """Return a sandboxed Jinja environment searching *templates_dir* before the bundled templates.

    User templates ship inside the cloned repository, so they are rendered
    without access to Python internals.
    """
    directories: List[str] = []
    if templates_dir:
        directories.append(str(templates_dir))
    default_dir = str(DEFAULT_TEMPLATES_DIR)
    if default_dir not in directories:
        directories.append(default_dir)
    env = SandboxedEnvironment(
        loader=FileSystemLoader(directories),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["quoted"] = quoted
    return env
