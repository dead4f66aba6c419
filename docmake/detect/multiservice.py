"""Detection of split frontend/backend repositories."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from ..models import MultiService

FRONTEND_DIRS = ("frontend", "client", "web", "ui")
BACKEND_DIRS = ("backend", "server", "api")


def _first_existing(root: Path, candidates: Sequence[str]) -> Optional[str]:
    for name in candidates:
        path = root / name
        if path.is_dir():
            return str(path)
    return None


def detect_multi_service(root: Path) -> MultiService:
    """Return the first conventional frontend and backend directories found."""
    root = Path(root)
    return MultiService(
        frontend_path=_first_existing(root, FRONTEND_DIRS),
        backend_path=_first_existing(root, BACKEND_DIRS),
    )
