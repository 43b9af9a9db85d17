"""Logic for loading and merging resolver settings."""

import copy
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "archive_schemes": ["jar", "zip"],
    "classpath": [],
    "packages": [],
    "log_level": "WARNING",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults.

    Keys set to null in the file keep their default value.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            # An explicit null keeps the default
            user_config = {k: v for k, v in user_config.items() if v is not None}
            config = deep_merge(config, user_config)
    return config
