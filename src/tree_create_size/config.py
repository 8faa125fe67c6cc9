from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tree_create_size.utils.pathing import default_config_path

DEFAULT_CONFIG: Dict[str, Any] = {
    "debug": False,
    "paths": {"logs_dir": "logs"},
    "logging": {
        "level": "INFO",
        "file": "tree_create_size.log",
        "rotate": False,
    },
    "cli": {"max_render_nodes": 200},
}


class GPConfig:
    def __init__(self, data: Dict[str, Any]):
        self.paths = {**DEFAULT_CONFIG["paths"], **(data.get("paths") or {})}
        self.logging = {**DEFAULT_CONFIG["logging"], **(data.get("logging") or {})}
        self.cli = {**DEFAULT_CONFIG["cli"], **(data.get("cli") or {})}
        self.debug = bool(data.get("debug", False))


def load_config(path: Optional[Path] = None) -> GPConfig:
    """
    Read the YAML config file; fall back to built-in defaults when it is absent.
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return GPConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return GPConfig(data)


_config_cache: Optional[GPConfig] = None


def get_config() -> GPConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
