# src/tree_create_size/nodes.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class TreeNode(Protocol):
    """
    What the tree builder needs from a node: assignable ``parent`` and
    ``children``. Nothing else about the node is inspected.
    """

    parent: Any
    children: Sequence[Any]


@dataclass(eq=False)
class Node:
    """
    A minimal tree node satisfying ``TreeNode``.

    Attributes:
        level: Depth in the tree (0 for the root). Filled in by
            ``create_node`` factories; ``None`` when built with ``Node()``.
        data: Optional payload.
        parent: Parent node, ``None`` for the root.
        children: Ordered child nodes.
    """

    level: Optional[int] = None
    data: Any = None
    parent: Optional["Node"] = field(default=None, repr=False)
    children: List["Node"] = field(default_factory=list, repr=False)

    def iter_subtree(self) -> Iterator["Node"]:
        """Yield this node and all descendants in depth-first order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"<Node level={self.level} children={len(self.children)}>"
