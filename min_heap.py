"""
Array-backed binary min-heap over self-comparing elements.

Unlike heapq, ordering comes from the elements themselves: every element
implements ``less_than(other)`` against a peer of the same concrete type.
A heap instance is parametrised on that single element type, so mixing kinds
inside one heap is a type error rather than a runtime check.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Protocol, TypeVar
import logging

from errors import EmptyHeapError

logger = logging.getLogger(__name__)


class Ordered(Protocol):
    """Anything that can say whether it sorts before a peer."""

    def less_than(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=Ordered)


class MinHeap(Generic[T]):
    """
    Binary min-heap with the minimum at index 0.

    Children of index i live at 2i+1 and 2i+2, the parent at (i-1)//2.
    Ties between two equal children go to the left child, and an element
    equal to its parent or child is never swapped, so the sift stops early.

    The initial elements are copied into a new list, which is then heapified
    in place; the caller's sequence is never reordered.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._items: List[T] = list(elements)
        if len(self._items) <= 1:
            return

        # Floyd's heapify: sift down every interior node, deepest first.
        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index)
        logger.debug("heapified %d elements", len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"MinHeap(size={len(self._items)})"

    def size(self) -> int:
        return len(self._items)

    def insert(self, element: T) -> None:
        """Add an element and restore heap order in O(log n) swaps."""
        self._items.append(element)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """
        Remove and return the minimum.

        Raises:
            EmptyHeapError: the heap holds no elements.
        """
        if not self._items:
            raise EmptyHeapError("MinHeap is empty")

        items = self._items
        items[0], items[-1] = items[-1], items[0]
        minimum = items.pop()
        if items:
            self._sift_down(0)
        return minimum

    def fetch(self) -> T:
        """
        Return the minimum without removing it.

        Raises:
            EmptyHeapError: the heap holds no elements.
        """
        if not self._items:
            raise EmptyHeapError("MinHeap is empty")
        return self._items[0]

    def drain(self) -> Iterator[T]:
        """Pop elements in non-decreasing order until the heap is empty."""
        while self._items:
            yield self.pop()

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[index].less_than(items[parent]):
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * index + 1
            if child >= size:
                return

            right = child + 1
            if right < size and items[right].less_than(items[child]):
                child = right

            if not items[child].less_than(items[index]):
                return
            items[index], items[child] = items[child], items[index]
            index = child
