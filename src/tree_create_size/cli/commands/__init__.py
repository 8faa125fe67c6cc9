"""
CLI command modules for tree_create_size.

Each command module defines a single Typer-compatible command function.
"""

from tree_create_size.cli.commands.show import show_command
from tree_create_size.cli.commands.stats import stats_command

__all__ = [
    "show_command",
    "stats_command",
]
