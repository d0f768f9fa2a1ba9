"""
Random graph generation for benchmarks and tests.
"""

from base64 import b64encode
from typing import List, Optional
import random

from heap_graph import HeapGraph

MIN_WEIGHT = 10
MAX_WEIGHT = 1000


def node_name(index: int) -> str:
    """Base64 of the decimal index with '=' padding removed, e.g. 0 -> 'MA'."""
    return b64encode(str(index).encode("ascii")).decode("ascii").replace("=", "")


def build_complete_graph(
    total_nodes: int,
    seed: Optional[int] = None,
    min_weight: int = MIN_WEIGHT,
    max_weight: int = MAX_WEIGHT,
) -> HeapGraph:
    """
    Generate a complete graph over total_nodes named nodes.

    Every ordered pair (u, v) with u != v gets its own edge with a weight
    drawn uniformly from [min_weight, max_weight), so each unordered pair is
    joined by two parallel edges of independent weight.

    Args:
        total_nodes: number of nodes to create.
        seed: Optional RNG seed for a reproducible graph.
        min_weight: inclusive lower bound on edge weight.
        max_weight: exclusive upper bound on edge weight.

    Raises:
        ValueError: negative node count or an empty weight range.
    """
    if total_nodes < 0:
        raise ValueError("total_nodes must be non-negative.")
    if min_weight >= max_weight:
        raise ValueError("min_weight must be smaller than max_weight.")

    rng = random.Random(seed)
    nodes: List[str] = [node_name(i) for i in range(total_nodes)]

    graph = HeapGraph()
    for index, node in enumerate(nodes):
        for sibling_index, sibling in enumerate(nodes):
            if sibling_index == index:
                continue
            graph.insert(node, sibling, rng.randrange(min_weight, max_weight))
    return graph
