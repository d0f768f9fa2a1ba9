"""
Algorithm interfaces for spanning-structure construction.

Keeps the construction strategy separate from graph storage and from the
benchmark harness.
"""

from abc import ABC, abstractmethod
from typing import Any

from graph import Graph
from tree import Tree

# Marker for "let the engine pick the start node"; any hashable, None
# included, is a legal node.
ANY_START: Any = object()


class SpanningTreeEngine(ABC):
    """
    Interface for building a spanning structure over a Graph.
    """

    @abstractmethod
    def build(self, graph: Graph, start: Any = ANY_START) -> Tree:
        """
        Grow a Tree that touches every node of graph.

        Args:
            graph: populated graph; its per-node edge sets must be unchanged
                when this returns, whether it succeeds or raises.
            start: node to grow from; an arbitrary node when omitted.

        Returns:
            The completed Tree. Nothing partial is returned on failure.
        """
        raise NotImplementedError
