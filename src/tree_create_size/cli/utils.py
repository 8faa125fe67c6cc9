from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import typer
from rich.console import Console

from tree_create_size.core.builder import create_tree
from tree_create_size.core.exceptions import TreeConfigError
from tree_create_size.logging import get_logger
from tree_create_size.nodes import Node

console = Console()
err_console = Console(stderr=True)
log = get_logger(__name__)


@dataclass
class LevelSummary:
    level: int
    nodes: int
    parents: int
    min_children: int
    max_children: int


def _create_node(level: int, parent: Optional[Node]) -> Node:
    return Node(level=level)


def build_from_options(
    height: Optional[int],
    num_children: Optional[int],
    levels: Optional[Sequence[int]],
    *,
    verbose: bool = False,
) -> Node:
    """
    Validate CLI shape options and build a tree of ``Node``.

    Exits with code 2 on a configuration error.
    """
    t0 = time.perf_counter()
    try:
        root = create_tree(
            height=height,
            num_children=num_children,
            num_nodes_per_level=list(levels) if levels else None,
            node_class=Node,
            create_node=_create_node,
        )
    except TreeConfigError as exc:
        log.warning("Rejected tree options: %s", exc)
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)

    elapsed = time.perf_counter() - t0
    if verbose:
        console.log(f"Built tree in {elapsed:.3f}s")
    return root


def iter_levels(root: Any) -> List[List[Any]]:
    """Return the nodes of each level, root level first."""
    levels: List[List[Any]] = []
    current = [root]
    while current:
        levels.append(current)
        current = [child for node in current for child in node.children]
    return levels


def summarize_levels(root: Any) -> Tuple[List[LevelSummary], int]:
    """
    Per-level node counts and the spread of children across each level's parents.

    Returns the summaries for levels >= 1 and the total node count.
    """
    levels = iter_levels(root)
    summaries: List[LevelSummary] = []
    for depth in range(1, len(levels)):
        per_parent = [len(p.children) for p in levels[depth - 1]]
        summaries.append(
            LevelSummary(
                level=depth,
                nodes=len(levels[depth]),
                parents=len(per_parent),
                min_children=min(per_parent),
                max_children=max(per_parent),
            )
        )
    total = sum(len(nodes) for nodes in levels)
    return summaries, total
