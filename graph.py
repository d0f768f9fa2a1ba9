"""
Undirected, weighted graph abstraction.

Nodes are any hashable values.
Edges are undirected: a <-> b with an integer weight, stored once and shared
by both endpoints.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from edges import Edge
from min_heap import MinHeap
from nodes import Node


class Graph(ABC):
    """Undirected, weighted graph exposing per-node cheapest-edge access."""

    @abstractmethod
    def insert(self, node_a: Node, node_b: Node, weight: int) -> Edge:
        """
        Connect node_a and node_b with a new edge of the given weight.

        Duplicate edges and self-loops are accepted as-is.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, node: Node) -> MinHeap[Edge]:
        """
        Heap of edges incident to node, cheapest at the root.

        Raises NodeNotFoundError for a node that has never been inserted.
        """
        raise NotImplementedError

    @abstractmethod
    def iter_nodes(self) -> Iterator[Node]:
        """Each distinct node once, in no particular order."""
        raise NotImplementedError

    @abstractmethod
    def iter_edges(self) -> Iterator[Edge]:
        """Each distinct edge once, in no particular order."""
        raise NotImplementedError
