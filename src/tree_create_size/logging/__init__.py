"""
Logging package for ``tree_create_size``.

Library modules call ``get_logger(__name__)``; handlers are attached only by
``configure_logging()``, which the command-line entry point calls.
"""

from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
