# src/tree_create_size/utils/pathing.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/tree_create_size/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/tree_create_size/utils
#   [1] .../src/tree_create_size
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

CONFIG_ENV_VAR = "TREE_CREATE_SIZE_CONFIG"


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains src/, tests/ and config/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Absolute paths are returned unchanged.
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def default_config_path() -> Path:
    """
    Return the YAML config location, honouring ``TREE_CREATE_SIZE_CONFIG``.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return resolve_project_path(Path("config") / "tree_create_size.yml")
