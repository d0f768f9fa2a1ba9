"""
Unit tests for the degree-capped Tree.
"""

import pytest

from edges import EdgeArena
from errors import InvalidTreeInsertionError
from tree import Tree


def _insert(tree: Tree, arena: EdgeArena, a: str, b: str, weight: int) -> None:
    tree.insert(a, b, arena.new(a, b, weight))


def test_insert_sequence_with_duplicate_and_cycle_rejections():
    """Accepted inserts form a path; rejected ones leave no trace."""
    cases = [
        ("a", "b", 2, False),
        ("b", "c", 4, False),
        ("c", "d", 2, False),
        ("c", "d", 2, True),  # duplicate pair, caught as both-present
        ("d", "e", 4, False),
        ("e", "f", 2, False),
        ("c", "e", 2, True),  # both endpoints already present
    ]
    tree = Tree()
    arena = EdgeArena()
    expected_weight = 0
    expected_nodes = set()

    for a, b, weight, should_fail in cases:
        if should_fail:
            with pytest.raises(InvalidTreeInsertionError):
                _insert(tree, arena, a, b, weight)
        else:
            _insert(tree, arena, a, b, weight)
            expected_weight += weight
            expected_nodes.update((a, b))

    edges = list(tree.iter_edges())
    visited = {node for edge in edges for node in edge.nodes}

    assert expected_weight == 14
    assert sum(edge.weight for edge in edges) == expected_weight
    assert tree.total_weight() == expected_weight
    assert visited == expected_nodes == set("abcdef")
    assert tree.edge_count() == 5


def test_traversal_runs_endpoint_to_endpoint():
    tree = Tree()
    arena = EdgeArena()
    for a, b, w in [("a", "b", 2), ("b", "c", 4), ("c", "d", 2)]:
        _insert(tree, arena, a, b, w)

    path = tree.path()

    assert path in (list("abcd"), list("dcba"))
    weights = [edge.weight for edge in tree.iter_edges()]
    assert weights == [2, 4, 2]


def test_degree_cap_rejects_third_edge_without_mutation():
    tree = Tree()
    arena = EdgeArena()
    _insert(tree, arena, "a", "b", 1)
    _insert(tree, arena, "b", "c", 1)

    with pytest.raises(InvalidTreeInsertionError):
        _insert(tree, arena, "b", "d", 1)

    assert tree.degree("b") == 2
    assert "d" not in tree
    assert len(tree) == 3
    assert tree.edge_count() == 2


def test_cycle_guard_rejects_edge_between_present_nodes():
    tree = Tree()
    arena = EdgeArena()
    _insert(tree, arena, "a", "b", 1)
    _insert(tree, arena, "b", "c", 1)

    with pytest.raises(InvalidTreeInsertionError):
        _insert(tree, arena, "a", "c", 1)

    assert tree.degree("a") == 1
    assert tree.degree("c") == 1
    assert tree.total_weight() == 2


def test_per_node_validation_rejects_existing_neighbour_and_full_degree():
    """Each side of the two-phase insert is checked independently of the cycle guard."""
    tree = Tree()
    arena = EdgeArena()
    _insert(tree, arena, "a", "b", 1)
    _insert(tree, arena, "b", "c", 1)

    with pytest.raises(InvalidTreeInsertionError, match="already connected"):
        tree._validate("a", "b")
    with pytest.raises(InvalidTreeInsertionError, match="already has 2 edges"):
        tree._validate("b", "z")
    # A fresh neighbour on a degree-1 node passes.
    tree._validate("c", "z")

    assert tree.edge_count() == 2


def test_self_loop_is_rejected():
    tree = Tree()
    arena = EdgeArena()

    with pytest.raises(InvalidTreeInsertionError):
        _insert(tree, arena, "a", "a", 1)

    assert len(tree) == 0


def test_rejection_is_also_a_value_error():
    tree = Tree()
    arena = EdgeArena()
    _insert(tree, arena, "a", "b", 1)

    with pytest.raises(ValueError):
        _insert(tree, arena, "b", "a", 1)


def test_empty_tree_traversal_is_a_no_op():
    tree = Tree()

    assert list(tree.iter_edges()) == []
    assert tree.path() == []
    assert tree.total_weight() == 0
    assert tree.nodes() == []
