# src/tree_create_size/core/builder.py

"""
Build a tree of a given size.

    create_tree(height=2, num_children=2, node_class=Node)
    create_tree(num_nodes_per_level=[3, 7], node_class=Node)

The tree is built breadth-first, one level at a time. Each level's nodes are
spread evenly over the previous level's nodes (see ``distribute_children``),
and every node's ``children`` is assigned exactly once, leaves included.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from tree_create_size.core.exceptions import TreeConfigError
from tree_create_size.core.shape import distribute_children, resolve_level_counts
from tree_create_size.logging import get_logger

log = get_logger(__name__)

NodeFactory = Callable[[int, Optional[Any]], Any]


@dataclass
class TreeConfig:
    """
    Arguments for ``create_tree``.

    Attributes:
        height: Height of the tree. 0 is a root-only tree, 1 adds the root's
            children, and so on. Requires ``num_children``.
        num_children: Number of children of every non-leaf node.
        num_nodes_per_level: Total node count at level 1, level 2, ... (not
            the number of children per parent). Mutually exclusive with
            ``height``.
        node_class: Class (or any zero-argument callable) producing nodes.
        create_node: Optional ``(level, parent) -> node`` factory used instead
            of ``node_class()``. It must not set the node's parent itself.
            The node class is not passed in; a factory that needs it should
            close over it.
    """

    height: Optional[int] = None
    num_children: Optional[int] = None
    num_nodes_per_level: Optional[Sequence[int]] = None
    node_class: Optional[Callable[[], Any]] = None
    create_node: Optional[NodeFactory] = None

    def validate(self) -> List[int]:
        """Check the configuration and return the resolved per-level counts."""
        counts = resolve_level_counts(
            height=self.height,
            num_children=self.num_children,
            num_nodes_per_level=self.num_nodes_per_level,
        )
        if self.node_class is None:
            raise TreeConfigError("Please specify 'node_class'")
        if not callable(self.node_class):
            raise TreeConfigError(
                f"'node_class' must be callable, got {self.node_class!r}"
            )
        if self.create_node is not None and not callable(self.create_node):
            raise TreeConfigError(
                f"'create_node' must be callable, got {self.create_node!r}"
            )
        return counts


class _NodeMaker:
    """Calls the configured factory and wires the new node to its parent."""

    def __init__(self, config: TreeConfig):
        self.node_class = config.node_class
        self.create_node = config.create_node
        self.created = 0

    def __call__(self, level: int, parent: Optional[Any]) -> Any:
        try:
            if self.create_node is not None:
                node = self.create_node(level, parent)
            else:
                node = self.node_class()
        except Exception:
            log.error("Node creation failed at level %d (after %d nodes)", level, self.created)
            raise

        if parent is not None:
            node.parent = parent
        self.created += 1
        return node


def create_tree(config: Optional[TreeConfig] = None, **kwargs: Any) -> Any:
    """
    Create a tree and return its root node.

    Pass either a ``TreeConfig`` or its fields as keyword arguments.

    Raises:
        TreeConfigError: invalid or conflicting arguments. Raised before any
            node is created.
        Exception: whatever the node factory raises, unchanged.
    """
    if config is None:
        try:
            config = TreeConfig(**kwargs)
        except TypeError as exc:
            raise TreeConfigError(str(exc)) from exc
    elif kwargs:
        raise TreeConfigError("Pass either a TreeConfig or keyword arguments, not both")

    level_counts = config.validate()
    log.info(
        "Creating tree: %d level(s) below root, %d node(s) total",
        len(level_counts),
        1 + sum(level_counts),
    )

    make_node = _NodeMaker(config)
    root = make_node(0, None)

    parents: List[Any] = [root]
    for level, num_nodes in enumerate(level_counts, start=1):
        # key = parent index, val = [child, ...]
        pending: Dict[int, List[Any]] = {}
        for parent_idx in distribute_children(num_nodes, len(parents)):
            child = make_node(level, parents[parent_idx])
            pending.setdefault(parent_idx, []).append(child)

        for parent_idx, parent in enumerate(parents):
            parent.children = pending.get(parent_idx, [])

        log.debug(
            "Level %d: %d node(s) under %d parent(s)", level, num_nodes, len(parents)
        )
        parents = [child for idx in range(len(parents)) for child in pending.get(idx, [])]

    # Deepest level (or a lone root) still gets an explicit empty child list
    for leaf in parents:
        leaf.children = []

    return root
