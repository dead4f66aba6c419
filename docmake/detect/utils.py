"""Shared helpers for detector implementations.

Every read here returns an optional result: a file that is missing, unreadable
or not valid UTF-8 counts as "no evidence" and never raises.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional


def read_text(path: Path) -> Optional[str]:
    """Return the file contents or ``None`` when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def load_package_json(root: Path) -> Dict[str, object]:
    """Return the parsed package.json contents or an empty dict."""
    text = read_text(root / "package.json")
    if text is None:
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return {}
    if isinstance(data, dict):
        return data
    return {}


def package_dependencies(package: Dict[str, object]) -> Dict[str, object]:
    """Return the runtime ``dependencies`` mapping of a parsed package.json."""
    deps = package.get("dependencies")
    if isinstance(deps, dict):
        return deps
    return {}
