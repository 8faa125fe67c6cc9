"""
Core building blocks: exceptions, level-count resolution and the tree builder.
"""

from tree_create_size.core.exceptions import TreeConfigError, TreeCreateError

__all__ = [
    "TreeConfigError",
    "TreeCreateError",
]
