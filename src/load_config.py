"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from src.constants import DEFAULT_ENCODING, DEFAULT_EXPIRES_MINUTES
from src.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "server": {
        "host": "127.0.0.1",
        "port": 8080,
    },
    "resources": {
        "root": ".",
        "context_path": "",
        "encoding": DEFAULT_ENCODING,
    },
    "cache": {
        "use_cache": True,
    },
    "headers": {
        "expires_minutes": DEFAULT_EXPIRES_MINUTES,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            return config
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in config file {path}: {e}"
            raise SystemExit(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Config file {path} must contain a mapping"
            raise SystemExit(msg)
        config = deep_merge(config, user_config)
    return config
