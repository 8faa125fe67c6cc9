"""
CLI package for tree_create_size.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from tree_create_size.cli.app import app, main

__all__ = [
    "app",
    "main",
]
