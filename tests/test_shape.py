# tests/test_shape.py

from __future__ import annotations

import math

import pytest

from tree_create_size.core.exceptions import TreeConfigError
from tree_create_size.core.shape import (
    children_per_parent,
    distribute_children,
    resolve_level_counts,
)


def test_height_form_yields_powers_of_branching_factor() -> None:
    assert resolve_level_counts(height=4, num_children=2) == [2, 4, 8, 16]
    assert resolve_level_counts(height=3, num_children=1) == [1, 1, 1]


def test_height_zero_is_root_only() -> None:
    assert resolve_level_counts(height=0, num_children=5) == []


def test_explicit_levels_are_copied() -> None:
    levels = (3, 7)
    counts = resolve_level_counts(num_nodes_per_level=levels)
    assert counts == [3, 7]
    assert isinstance(counts, list)


def test_empty_levels_are_allowed() -> None:
    assert resolve_level_counts(num_nodes_per_level=[]) == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"height": 2, "num_children": 2, "num_nodes_per_level": [1]},
        {"height": 2},
        {"num_children": 2},
        {"num_nodes_per_level": [2], "num_children": 2},
        {"height": -1, "num_children": 2},
        {"height": 2, "num_children": 0},
        {"num_nodes_per_level": [3, 0]},
        {"num_nodes_per_level": [3, 2.5]},
        {"num_nodes_per_level": "37"},
        {"num_nodes_per_level": 3},
        {"height": True, "num_children": 2},
    ],
)
def test_invalid_shapes_raise_config_error(kwargs) -> None:
    with pytest.raises(TreeConfigError):
        resolve_level_counts(**kwargs)


def test_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        resolve_level_counts()


def test_distribution_of_seven_over_three() -> None:
    assert distribute_children(7, 3) == [0, 0, 0, 1, 1, 2, 2]
    assert children_per_parent(7, 3) == [3, 2, 2]


def test_fewer_children_than_parents_leaves_some_parents_empty() -> None:
    assert children_per_parent(2, 4) == [1, 0, 1, 0]
    assert children_per_parent(1, 5) == [1, 0, 0, 0, 0]


def test_zero_children_gives_empty_distribution() -> None:
    assert distribute_children(0, 3) == []
    assert children_per_parent(0, 3) == [0, 0, 0]


@pytest.mark.parametrize("n,p", [(1, 1), (5, 2), (10, 3), (3, 7), (100, 7), (12, 4)])
def test_distribution_is_even_and_ordered(n: int, p: int) -> None:
    indices = distribute_children(n, p)
    assert len(indices) == n
    assert indices == sorted(indices)
    assert indices[0] == 0
    assert all(0 <= idx < p for idx in indices)

    counts = children_per_parent(n, p)
    assert sum(counts) == n
    assert set(counts) <= {n // p, math.ceil(n / p)}


def test_large_level_uses_exact_integer_arithmetic() -> None:
    n, p = 10**6 + 3, 999
    counts = children_per_parent(n, p)
    assert sum(counts) == n
    assert set(counts) <= {n // p, n // p + 1}
