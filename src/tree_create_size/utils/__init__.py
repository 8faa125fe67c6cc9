# src/tree_create_size/utils/__init__.py

from .pathing import (
    project_root,
    resolve_project_path,
    default_config_path,
)

__all__ = [
    "project_root",
    "resolve_project_path",
    "default_config_path",
]
