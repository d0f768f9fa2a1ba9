"""
Exception hierarchy for the spanning-structure library.

Each error also derives from the builtin exception that matches its meaning,
so callers can catch either the specific type or the familiar builtin.
"""


class SpanningStructureError(Exception):
    """Base class for every error raised by this library."""


class EmptyHeapError(SpanningStructureError, IndexError):
    """Pop or fetch on a heap with no elements."""


class NodeNotFoundError(SpanningStructureError, KeyError):
    """Lookup of a node that was never inserted into the graph."""

    def __init__(self, node: object) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node not found: {self.node!r}"


class InvalidTreeInsertionError(SpanningStructureError, ValueError):
    """
    Tree insertion rejected.

    Raised for a duplicate pair, a degree-cap violation, or when both
    endpoints are already present (cycle guard). The tree is left untouched.
    """


class EmptyGraphError(SpanningStructureError, ValueError):
    """Spanning structure requested for a graph with no nodes."""


class ConstructionExhaustedError(SpanningStructureError, RuntimeError):
    """The frontier node has no remaining edge that can legally extend the tree."""
