"""Configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

from bookpress.config.models import BookpressConfig

CONFIG_NAMES = ["bookpress.yaml", "bookpress.yml", ".bookpress.yaml", ".bookpress.yml"]


def load_config(config_path: Path, overrides: dict[str, Any] | None = None) -> BookpressConfig:
    """Load configuration from a YAML file, optionally deep-merging overrides."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if overrides:
        data = merge_configs(data, overrides)

    return BookpressConfig(**data)


def find_config_file(start_dir: Path) -> Path | None:
    """Return the nearest config file in ``start_dir`` or one of its parents."""
    start = start_dir.resolve()
    candidates = (directory / name for directory in (start, *start.parents) for name in CONFIG_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge ``override`` into a copy of ``base``; nested sections merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        merged[key] = (
            merge_configs(current, value)
            if isinstance(current, dict) and isinstance(value, dict)
            else value
        )
    return merged
