"""
tree_create_size: create a tree object of a certain size.

    from tree_create_size import Node, create_tree

    root = create_tree(height=4, num_children=2, node_class=Node)
    root = create_tree(num_nodes_per_level=[100, 3000, 5000], node_class=Node)
"""

from tree_create_size.core.builder import TreeConfig, create_tree
from tree_create_size.core.exceptions import TreeConfigError, TreeCreateError
from tree_create_size.core.shape import (
    children_per_parent,
    distribute_children,
    resolve_level_counts,
)
from tree_create_size.nodes import Node, TreeNode

__all__ = [
    "Node",
    "TreeConfig",
    "TreeConfigError",
    "TreeCreateError",
    "TreeNode",
    "children_per_parent",
    "create_tree",
    "distribute_children",
    "resolve_level_counts",
]
