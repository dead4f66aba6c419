"""Configuration loading for docmake (.docmake.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".docmake.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ImageConfig:
    """Naming of the image built for the repository."""

    name: Optional[str] = None
    tag: str = "latest"


@dataclass
class PublishConfig:
    """Registry publishing switches."""

    push: bool = True


@dataclass
class ComposeConfig:
    """Local orchestration switches."""

    start: bool = True


@dataclass
class DocMakeConfig:
    """Represents the settings defined in .docmake.yml."""

    root: Path
    exclude_paths: List[str] = field(default_factory=list)
    templates_dir: Optional[Path] = None
    image: ImageConfig = field(default_factory=ImageConfig)
    publish: PublishConfig = field(default_factory=PublishConfig)
    compose: ComposeConfig = field(default_factory=ComposeConfig)


def load_config(config_path: Path) -> DocMakeConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocMakeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = _resolve_templates_dir(root, templates_dir_str) if templates_dir_str else None

    image_data = _as_dict(data.get("image"))
    image = ImageConfig()
    if image_data:
        image.name = _as_str(image_data.get("name"))
        image.tag = _as_str(image_data.get("tag")) or image.tag

    publish_data = _as_dict(data.get("publish"))
    publish = PublishConfig()
    push = _as_bool(publish_data.get("push"))
    if push is not None:
        publish.push = push

    compose_data = _as_dict(data.get("compose"))
    compose = ComposeConfig()
    start = _as_bool(compose_data.get("start"))
    if start is not None:
        compose.start = start

    return DocMakeConfig(
        root=root,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        templates_dir=templates_dir,
        image=image,
        publish=publish,
        compose=compose,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _resolve_templates_dir(root: Path, value: str) -> Path:
    templates_dir = (root / value).resolve()
    if not templates_dir.is_relative_to(root):
        raise ConfigError(f"templates_dir must stay inside the repository: {value}")
    return templates_dir


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
