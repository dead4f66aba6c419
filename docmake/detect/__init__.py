"""Repository inspection: stack, project metadata, database and environment."""

from __future__ import annotations

from .base import ProjectDetector
from .database import DatabaseDetector, match_database
from .env import parse_env, read_env_file
from .multiservice import detect_multi_service
from .project import (
    DefaultProjectDetector,
    NodeProjectDetector,
    PythonProjectDetector,
    detect_project,
)
from .stack import StackDetector

__all__ = [
    "DatabaseDetector",
    "DefaultProjectDetector",
    "NodeProjectDetector",
    "ProjectDetector",
    "PythonProjectDetector",
    "StackDetector",
    "detect_multi_service",
    "detect_project",
    "match_database",
    "parse_env",
    "read_env_file",
]
