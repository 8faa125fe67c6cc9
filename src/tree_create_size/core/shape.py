# src/tree_create_size/core/shape.py

"""
Tree shape resolution and the even child-distribution policy.

A shape is given either as ``height`` + ``num_children`` (a uniform tree) or
as ``num_nodes_per_level`` (total node count at level 1, level 2, ...). Both
forms resolve to the same thing: a list of per-level node counts, with the
root (level 0) implied.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from tree_create_size.core.exceptions import TreeConfigError


def _check_int(name: str, value: object, minimum: int) -> int:
    # bool is an int subclass; True is not a height
    if isinstance(value, bool) or not isinstance(value, int):
        raise TreeConfigError(
            f"'{name}' must be an integer, got {type(value).__name__}"
        )
    if value < minimum:
        raise TreeConfigError(f"'{name}' must be >= {minimum}, got {value}")
    return value


def resolve_level_counts(
    height: Optional[int] = None,
    num_children: Optional[int] = None,
    num_nodes_per_level: Optional[Sequence[int]] = None,
) -> List[int]:
    """
    Resolve the shape arguments into a list of per-level node counts.

    Rules:
        - Exactly one of ``height`` and ``num_nodes_per_level`` is given.
        - ``height`` and ``num_children`` go together.
        - ``height >= 0``, ``num_children >= 1``, each level count ``>= 1``.

    Returns:
        ``[b, b**2, ..., b**height]`` for the uniform form, otherwise a copy of
        ``num_nodes_per_level``. An empty list means a root-only tree.

    Raises:
        TreeConfigError: on a missing, conflicting or out-of-range argument.
    """
    if height is not None and num_nodes_per_level is not None:
        raise TreeConfigError(
            "Specify either 'height' + 'num_children' or 'num_nodes_per_level', not both"
        )

    if num_nodes_per_level is not None:
        if num_children is not None:
            raise TreeConfigError(
                "'num_children' is only valid together with 'height'"
            )
        if isinstance(num_nodes_per_level, (str, bytes)):
            raise TreeConfigError("'num_nodes_per_level' must be a sequence of integers")
        try:
            counts = list(num_nodes_per_level)
        except TypeError:
            raise TreeConfigError(
                "'num_nodes_per_level' must be a sequence of integers"
            ) from None
        return [
            _check_int(f"num_nodes_per_level[{i}]", count, 1)
            for i, count in enumerate(counts)
        ]

    if height is None:
        if num_children is not None:
            raise TreeConfigError("'num_children' requires 'height'")
        raise TreeConfigError(
            "Please specify 'height' + 'num_children' or 'num_nodes_per_level'"
        )

    if num_children is None:
        raise TreeConfigError("'height' requires 'num_children'")

    height = _check_int("height", height, 0)
    num_children = _check_int("num_children", num_children, 1)

    counts: List[int] = []
    n = num_children
    for _ in range(height):
        counts.append(n)
        n *= num_children
    return counts


def distribute_children(num_children: int, num_parents: int) -> List[int]:
    """
    Return the 0-based parent index for each of ``num_children`` children.

    Child ``i`` (1-based) goes to parent ``floor((i - 1) / n * p)``. The
    indices are non-decreasing, so each parent receives a contiguous run of
    children, and every parent ends up with ``floor(n/p)`` or ``ceil(n/p)``.
    Integer arithmetic keeps the result exact for large levels.
    """
    if num_children <= 0:
        return []
    if num_parents <= 0:
        raise ValueError("num_parents must be positive when there are children")
    return [(i * num_parents) // num_children for i in range(num_children)]


def children_per_parent(num_children: int, num_parents: int) -> List[int]:
    """
    Return how many children each parent receives, in parent order.
    """
    counts = [0] * num_parents
    for parent_idx in distribute_children(num_children, num_parents):
        counts[parent_idx] += 1
    return counts
