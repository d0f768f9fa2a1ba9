"""
Degree-capped, cycle-free output structure for the spanning-structure builder.

Every node holds at most two neighbours, so a tree grown by attaching new
nodes to the current endpoint is a simple path and can be walked from one
end to the other.
"""

from typing import Dict, Iterator, List, Set, Tuple

from edges import Edge
from errors import InvalidTreeInsertionError
from nodes import Node

MAX_DEGREE = 2


class Tree:
    """
    Node -> (neighbour -> edge) mapping with all-or-nothing inserts.
    """

    def __init__(self) -> None:
        self._adj: Dict[Node, Dict[Node, Edge]] = {}

    def insert(self, node_a: Node, node_b: Node, edge: Edge) -> None:
        """
        Record edge between node_a and node_b.

        Both sides are validated before either is written, so a rejected
        insert leaves the tree exactly as it was.

        Raises:
            InvalidTreeInsertionError: both nodes are already in the tree,
                the pair is already connected, or either node is at the
                degree cap.
        """
        if node_a == node_b:
            raise InvalidTreeInsertionError(f"self-loop on {node_a!r} would close a cycle")
        if node_a in self._adj and node_b in self._adj:
            raise InvalidTreeInsertionError("both nodes already exist in the tree")

        self._validate(node_a, node_b)
        self._validate(node_b, node_a)

        self._adj.setdefault(node_a, {})[node_b] = edge
        self._adj.setdefault(node_b, {})[node_a] = edge

    def _validate(self, node: Node, neighbour: Node) -> None:
        neighbours = self._adj.get(node, {})
        # Through insert() a connected pair is already caught by the
        # both-present check; this covers each side on its own.
        if neighbour in neighbours:
            raise InvalidTreeInsertionError(f"{node!r} is already connected to {neighbour!r}")
        if len(neighbours) >= MAX_DEGREE:
            raise InvalidTreeInsertionError(f"{node!r} already has {MAX_DEGREE} edges")

    def iter_edges(self) -> Iterator[Edge]:
        """
        Walk from a degree-1 endpoint to the other end, one edge at a time.

        An empty tree yields nothing.
        """
        for _, _, edge in self._walk():
            yield edge

    def path(self) -> List[Node]:
        """Nodes in walk order, endpoint first."""
        nodes: List[Node] = []
        for node, neighbour, _ in self._walk():
            if not nodes:
                nodes.append(node)
            nodes.append(neighbour)
        return nodes

    def _walk(self) -> Iterator[Tuple[Node, Node, Edge]]:
        # Yields (from, to, edge) per step.
        for current, neighbours in self._adj.items():
            if len(neighbours) == 1:
                break
        else:
            return

        traversed: Set[Edge] = set()
        while True:
            for neighbour, edge in self._adj[current].items():
                if edge not in traversed:
                    break
            else:
                return

            traversed.add(edge)
            yield current, neighbour, edge
            current = neighbour

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def nodes(self) -> List[Node]:
        return list(self._adj)

    def degree(self, node: Node) -> int:
        return len(self._adj.get(node, {}))

    def edge_count(self) -> int:
        return sum(len(neighbours) for neighbours in self._adj.values()) // 2

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.iter_edges())
