"""Project configuration file handling for the pageprobe CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

PROJECT_CONFIG_FILE = "pageprobe.yml"


def load_project_config(path: Path | None = None) -> dict[str, Any]:
    """Load project-level configuration from pageprobe.yml.

    Args:
        path: Config file to read. Defaults to ``pageprobe.yml`` in the
            current directory.

    Returns:
        Configuration dictionary, or empty dict if not found
    """
    config_path = path or Path(PROJECT_CONFIG_FILE)
    if not config_path.exists():
        return {}

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping, got {type(data).__name__}")
    return data


def merge_overrides(base: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Overlay the options that were actually given (not None) onto ``base``."""
    merged = dict(base)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged


__all__ = [
    "PROJECT_CONFIG_FILE",
    "load_project_config",
    "merge_overrides",
]
