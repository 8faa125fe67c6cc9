# tests/test_nodes.py

from __future__ import annotations

from tree_create_size.nodes import Node, TreeNode


def test_node_defaults() -> None:
    node = Node()
    assert node.parent is None
    assert node.children == []
    assert node.level is None


def test_node_satisfies_tree_node_protocol() -> None:
    assert isinstance(Node(), TreeNode)


def test_foreign_class_with_parent_and_children_satisfies_protocol() -> None:
    class Plain:
        def __init__(self) -> None:
            self.parent = None
            self.children = []

    assert isinstance(Plain(), TreeNode)
    assert not isinstance(object(), TreeNode)


def test_nodes_compare_by_identity() -> None:
    a, b = Node(level=1), Node(level=1)
    assert a != b
    assert [a, b].count(a) == 1


def test_iter_subtree_is_depth_first() -> None:
    root = Node(level=0)
    left, right = Node(level=1), Node(level=1)
    leaf = Node(level=2)
    root.children = [left, right]
    left.children = [leaf]

    assert list(root.iter_subtree()) == [root, left, leaf, right]


def test_iter_subtree_handles_deep_chains() -> None:
    root = Node(level=0)
    node = root
    for level in range(1, 3001):
        child = Node(level=level, parent=node)
        node.children = [child]
        node = child

    levels = [n.level for n in root.iter_subtree()]
    assert levels == list(range(3001))
