"""
Concrete undirected, weighted graph for the spanning-structure builder.

Implements the Graph interface with one min-heap of incident edges per node,
so the cheapest edge at a node is available in O(1) and removable in
O(log degree).
"""

from typing import Dict, Iterator, List, Set

from edges import Edge, EdgeArena
from errors import NodeNotFoundError
from graph import Graph
from min_heap import MinHeap
from nodes import Node


class HeapGraph(Graph):
    """
    Undirected graph backed by a node -> MinHeap[Edge] mapping.

    Nodes appear lazily on their first insert; a node with no edges is never
    stored. Not safe to mutate while one of its iterators is running.
    """

    def __init__(self) -> None:
        self._heaps: Dict[Node, MinHeap[Edge]] = {}
        self._arena = EdgeArena()

    # --- Graph interface -----------------------------------------------------

    def insert(self, node_a: Node, node_b: Node, weight: int) -> Edge:
        edge = self._arena.new(node_a, node_b, weight)
        # A self-loop lands in the same heap twice, once per endpoint.
        for node in (node_a, node_b):
            heap = self._heaps.get(node)
            if heap is None:
                heap = self._heaps[node] = MinHeap()
            heap.insert(edge)
        return edge

    def get(self, node: Node) -> MinHeap[Edge]:
        """
        Live heap for node; callers that pop from it must put edges back.
        """
        try:
            return self._heaps[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    def iter_nodes(self) -> Iterator[Node]:
        yield from self._heaps

    def iter_edges(self) -> Iterator[Edge]:
        """
        Enumerate each edge once, deduplicated by handle.

        The heaps have no non-destructive traversal, so each one is drained
        and refilled before any of its edges are handed out. Stopping early
        therefore leaves every heap intact.
        """
        seen: Set[int] = set()
        for heap in self._heaps.values():
            popped: List[Edge] = list(heap.drain())
            for edge in popped:
                heap.insert(edge)

            for edge in popped:
                if edge.handle in seen:
                    continue
                seen.add(edge.handle)
                yield edge

    # --- Convenience ---------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._heaps

    def node_count(self) -> int:
        return len(self._heaps)

    def edge_count(self) -> int:
        return len(self._arena)

    def edge(self, handle: int) -> Edge:
        """Edge for a handle issued by this graph."""
        return self._arena[handle]
