# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tree_create_size import config as config_module
from tree_create_size.config import get_config, load_config, reset_config
from tree_create_size.utils.pathing import (
    CONFIG_ENV_VAR,
    default_config_path,
    project_root,
    resolve_project_path,
)


def test_shipped_config_file_exists() -> None:
    path = resolve_project_path("config/tree_create_size.yml")
    assert path.is_file(), f"Expected config file at: {path}"


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text(
        "debug: true\nlogging:\n  level: DEBUG\ncli:\n  max_render_nodes: 5\n",
        encoding="utf-8",
    )
    cfg = load_config(path)

    assert cfg.debug is True
    assert cfg.logging["level"] == "DEBUG"
    # unspecified keys keep their defaults
    assert cfg.logging["file"] == "tree_create_size.log"
    assert cfg.cli["max_render_nodes"] == 5
    assert cfg.paths["logs_dir"] == "logs"


def test_missing_config_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yml")

    assert cfg.debug is False
    assert cfg.cli["max_render_nodes"] == 200


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_env_var_overrides_config_path(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "override.yml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert default_config_path() == path


def test_get_config_is_cached() -> None:
    saved = config_module._config_cache
    try:
        reset_config()
        first = get_config()
        assert get_config() is first
    finally:
        config_module._config_cache = saved


def test_resolve_project_path_keeps_absolute_paths(tmp_path: Path) -> None:
    assert resolve_project_path(tmp_path) == tmp_path
    assert resolve_project_path("logs") == project_root() / "logs"
