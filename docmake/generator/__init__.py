"""Dockerfile and compose renderers."""

from .base import UnsupportedStackError
from .compose import ComposeRenderer, environment_entries
from .dockerfile import DockerfileRenderer

__all__ = [
    "ComposeRenderer",
    "DockerfileRenderer",
    "UnsupportedStackError",
    "environment_entries",
]
