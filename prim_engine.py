"""
Greedy single-frontier spanning-structure engine.

Grows a Tree one node at a time from the current frontier node, always
trying that node's cheapest incident edge first, using the per-node heaps of
a Graph.
"""

from typing import Any, List
import logging

from algorithms import ANY_START, SpanningTreeEngine
from edges import Edge
from errors import ConstructionExhaustedError, EmptyGraphError, InvalidTreeInsertionError
from graph import Graph
from tree import Tree

logger = logging.getLogger(__name__)


class GreedyPrimEngine(SpanningTreeEngine):
    """
    Prim-style nearest-neighbour walk.

    Only edges incident to the current frontier node are considered, and the
    Tree caps every node at two edges, so the result is a path visiting every
    node rather than a textbook minimum spanning tree. Weight ties follow heap
    pop order.

    Complexity:
        O(V * d log d) for maximum degree d, plus the cost of rejected
        candidates at each step.
    """

    def build(self, graph: Graph, start: Any = ANY_START) -> Tree:
        """
        Walk the graph from start, attaching the cheapest legal neighbour.

        At each step the frontier node's heap is popped cheapest-first until
        the Tree accepts an edge; rejected candidates (degree cap, cycle
        guard) are skipped. Every popped edge goes back into the heap before
        the step ends, so the graph is left as it was found.

        Raises:
            EmptyGraphError: graph has no nodes.
            NodeNotFoundError: start is not a node of graph.
            ConstructionExhaustedError: the frontier node ran out of edges
                before every node was reached.
        """
        required = list(graph.iter_nodes())
        if not required:
            raise EmptyGraphError("cannot build a spanning structure over an empty graph")

        current = required[0] if start is ANY_START else start
        graph.get(current)
        tree = Tree()
        added = 0

        while added < len(required) - 1:
            heap = graph.get(current)
            popped: List[Edge] = []
            try:
                while True:
                    if not heap:
                        logger.debug(
                            "frontier %r exhausted after %d/%d nodes",
                            current, added + 1, len(required),
                        )
                        raise ConstructionExhaustedError(
                            f"Unable to find a node to continue building the tree from {current!r}"
                        )

                    edge = heap.pop()
                    popped.append(edge)
                    candidate = edge.other(current)
                    try:
                        tree.insert(current, candidate, edge)
                    except InvalidTreeInsertionError:
                        continue
                    break
            finally:
                for returned in popped:
                    heap.insert(returned)

            logger.debug("attached %r via %s (%d rejected)", candidate, edge, len(popped) - 1)
            current = candidate
            added += 1

        return tree
