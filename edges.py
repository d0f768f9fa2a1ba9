"""
Weighted undirected edges and the per-graph arena that owns them.

An edge is created once by its arena and then shared by reference: both
endpoint heaps hold the same instance, and so does any tree built from the
graph. The arena hands out a stable integer handle per edge, which is what
deduplication keys on.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from nodes import Node


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected edge node_a <-> node_b with an integer weight.

    Equality and hashing are by identity: two edges with the same endpoints
    and weight are still distinct edges (multigraphs are allowed).
    """

    handle: int
    node_a: Node
    node_b: Node
    weight: int

    @property
    def nodes(self) -> Tuple[Node, Node]:
        return (self.node_a, self.node_b)

    def other(self, node: Node) -> Node:
        """Endpoint opposite to node (node itself for a self-loop)."""
        if node == self.node_a:
            return self.node_b
        return self.node_a

    def less_than(self, other: "Edge") -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"{self.node_a}<-{self.weight}->{self.node_b}"


class EdgeArena:
    """
    Owns every edge of one graph, addressed by handle.

    Handles are assigned sequentially from 0 and never reused.
    """

    def __init__(self) -> None:
        self._edges: List[Edge] = []

    def new(self, node_a: Node, node_b: Node, weight: int) -> Edge:
        edge = Edge(len(self._edges), node_a, node_b, weight)
        self._edges.append(edge)
        return edge

    def __getitem__(self, handle: int) -> Edge:
        return self._edges[handle]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)
