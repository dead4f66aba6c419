"""Reader for ``.env`` files at the repository root."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from .utils import read_text

ENV_FILENAME = ".env"


def parse_env(text: str) -> Dict[str, str]:
    """Parse ``KEY=value`` lines, ignoring blanks, comments and lines without ``=``."""
    values: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
            value = value[1:-1]
        values[key] = value
    return values


def read_env_file(root: Path) -> Tuple[Dict[str, str], Optional[str]]:
    """Return the parsed ``.env`` mapping and its path relative to *root*.

    A missing file is not an error: the mapping is empty and the path is ``None``.
    """
    text = read_text(Path(root) / ENV_FILENAME)
    if text is None:
        return {}, None
    return parse_env(text), ENV_FILENAME
