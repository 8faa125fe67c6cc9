from __future__ import annotations

from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.tree import Tree

from tree_create_size.cli.utils import build_from_options, err_console
from tree_create_size.config import get_config
from tree_create_size.core.exceptions import TreeConfigError
from tree_create_size.core.shape import resolve_level_counts

console = Console()


def _label(node: Any, index: int) -> str:
    return f"L{node.level} #{index}"


def build_render_tree(root: Any) -> Tree:
    """Mirror the node tree as a rich Tree without recursing."""
    tree = Tree(_label(root, 0))
    stack = [(root, tree)]
    while stack:
        node, branch = stack.pop()
        for i, child in enumerate(node.children):
            stack.append((child, branch.add(_label(child, i))))
    return tree


def show_command(
    height: Optional[int] = typer.Option(
        None,
        "--height",
        "-H",
        help="Tree height (0 = root only). Requires --num-children.",
    ),
    num_children: Optional[int] = typer.Option(
        None,
        "--num-children",
        "-c",
        help="Children per node, used with --height",
    ),
    levels: Optional[List[int]] = typer.Option(
        None,
        "--level",
        "-l",
        help="Total node count for the next level; repeat once per level",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Render even when the tree exceeds cli.max_render_nodes",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Build a tree and print it.
    """
    limit = int(get_config().cli.get("max_render_nodes", 200))
    try:
        counts = resolve_level_counts(height, num_children, list(levels) if levels else None)
    except TreeConfigError:
        # build_from_options reports the error
        counts = []
    total = 1 + sum(counts)
    if total > limit and not force:
        err_console.print(
            f"[red]Refusing to render {total} nodes (limit {limit}); use --force[/red]"
        )
        raise typer.Exit(code=1)

    root = build_from_options(height, num_children, levels, verbose=verbose)

    console.print(build_render_tree(root))
