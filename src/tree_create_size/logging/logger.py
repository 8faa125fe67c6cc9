"""
Logging setup for tree_create_size.

Importing the library never touches the filesystem: module loggers are plain
children of the ``tree_create_size`` logger, which carries a NullHandler until
``configure_logging`` attaches the master log file and console handlers.
Relative log directories from ``config/tree_create_size.yml`` resolve against
the current working directory.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from tree_create_size.config import GPConfig, get_config

BASE_LOGGER_NAME = "tree_create_size"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(BASE_LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_log_dir(cfg: GPConfig) -> Path:
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = Path.cwd() / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def configure_logging(cfg: Optional[GPConfig] = None) -> Logger:
    """Attach the master log file and console handlers to the base logger.

    * Level comes from ``logging.level``; the ``debug`` flag forces DEBUG.
    * The console only shows WARNING and above unless debugging.
    * Calling it again replaces the handlers it attached before.
    """
    cfg = cfg or get_config()
    base_logger = logging.getLogger(BASE_LOGGER_NAME)

    for handler in [h for h in base_logger.handlers if getattr(h, "is_project_handler", False)]:
        base_logger.removeHandler(handler)
        handler.close()

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    debug_enabled = bool(cfg.debug)
    level = logging.DEBUG if debug_enabled else getattr(logging, level_name, logging.INFO)

    log_path = _resolve_log_dir(cfg) / cfg.logging.get("file", "tree_create_size.log")
    file_handler = _build_file_handler(log_path, level, bool(cfg.logging.get("rotate", False)))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    for handler in (file_handler, console):
        handler.is_project_handler = True  # type: ignore[attr-defined]
        base_logger.addHandler(handler)

    base_logger.setLevel(level)
    base_logger.propagate = False
    return base_logger


def get_logger(name: str | None = None) -> Logger:
    """Return a logger under the ``tree_create_size`` hierarchy. No handlers are created."""
    return logging.getLogger(name or BASE_LOGGER_NAME)
