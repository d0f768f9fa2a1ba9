"""
Unit tests for random complete-graph generation.
"""

import pytest

from graph_builder import build_complete_graph, node_name


def test_node_names_are_unpadded_base64():
    assert node_name(0) == "MA"
    assert node_name(10) == "MTA"
    assert node_name(123) == "MTIz"


def test_complete_graph_has_edge_per_ordered_pair():
    g = build_complete_graph(6, seed=1)

    assert g.node_count() == 6
    assert g.edge_count() == 6 * 5
    # Each node is an endpoint of two edges per other node.
    for node in g.iter_nodes():
        assert g.get(node).size() == 2 * 5


def test_weights_stay_in_range():
    g = build_complete_graph(8, seed=2, min_weight=3, max_weight=7)

    weights = {edge.weight for edge in g.iter_edges()}

    assert weights
    assert min(weights) >= 3
    assert max(weights) < 7


def test_same_seed_same_graph():
    first = build_complete_graph(7, seed=42)
    second = build_complete_graph(7, seed=42)

    def signature(g):
        return sorted((e.node_a, e.node_b, e.weight) for e in g.iter_edges())

    assert signature(first) == signature(second)


def test_zero_nodes_is_empty():
    assert build_complete_graph(0).node_count() == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"total_nodes": -1},
        {"total_nodes": 3, "min_weight": 5, "max_weight": 5},
    ],
)
def test_invalid_arguments_raise(kwargs):
    with pytest.raises(ValueError):
        build_complete_graph(**kwargs)
