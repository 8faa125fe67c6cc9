from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from tree_create_size.cli.utils import build_from_options, summarize_levels

console = Console()


def stats_command(
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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Build a tree and show per-level node counts and child distribution.
    """
    root = build_from_options(height, num_children, levels, verbose=verbose)
    summaries, total = summarize_levels(root)

    table = Table(title="Tree Shape")
    table.add_column("Level", justify="right", style="bold")
    table.add_column("Nodes", justify="right")
    table.add_column("Parents", justify="right")
    table.add_column("Children/parent", justify="right")

    table.add_row("0", "1", "-", "-")
    for s in summaries:
        spread = (
            str(s.min_children)
            if s.min_children == s.max_children
            else f"{s.min_children}-{s.max_children}"
        )
        table.add_row(str(s.level), str(s.nodes), str(s.parents), spread)

    console.print(table)
    console.print(f"Total nodes: {total}")
