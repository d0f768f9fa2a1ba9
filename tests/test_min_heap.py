"""
Unit tests for MinHeap.
"""

from dataclasses import dataclass
import random

import pytest

from errors import EmptyHeapError
from min_heap import MinHeap


@dataclass(frozen=True)
class Item:
    """
    Minimal self-comparing heap element.
    """

    value: int
    label: str = ""

    def less_than(self, other: "Item") -> bool:
        return self.value < other.value


def _random_items(seed: int, count: int = 100) -> list[Item]:
    rng = random.Random(seed)
    return [Item(rng.randrange(100)) for _ in range(count)]


def test_heapify_then_drain_is_non_decreasing():
    items = _random_items(seed=1)
    heap = MinHeap(items)

    drained = [item.value for item in heap.drain()]

    assert drained == sorted(item.value for item in items)
    assert len(heap) == 0


def test_repeated_insert_then_pop_is_non_decreasing():
    heap: MinHeap[Item] = MinHeap()
    for item in _random_items(seed=2):
        heap.insert(item)

    last = heap.pop()
    while heap:
        current = heap.pop()
        assert not current.less_than(last)
        last = current


def test_size_tracks_inserts_minus_pops():
    heap = MinHeap(_random_items(seed=3, count=10))
    assert heap.size() == 10

    heap.insert(Item(5))
    heap.insert(Item(50))
    assert heap.size() == 12

    for expected in range(11, 5, -1):
        heap.pop()
        assert heap.size() == expected
        assert len(heap) == expected


def test_fetch_returns_minimum_without_removing():
    heap = MinHeap([Item(7), Item(3), Item(9)])

    assert heap.fetch() == Item(3)
    assert heap.size() == 3
    assert heap.pop() == Item(3)
    assert heap.fetch() == Item(7)


def test_empty_and_singleton_construction():
    assert MinHeap([]).size() == 0
    single = MinHeap([Item(4)])
    assert single.pop() == Item(4)
    assert not single


def test_pop_and_fetch_on_empty_heap_raise():
    """Empty heap signals EmptyHeapError, never a placeholder element."""
    heap: MinHeap[Item] = MinHeap()

    with pytest.raises(EmptyHeapError):
        heap.pop()
    with pytest.raises(EmptyHeapError):
        heap.fetch()
    # Also catchable as the builtin it specialises.
    with pytest.raises(IndexError):
        heap.pop()


def test_equal_children_prefer_left():
    # Already heap-ordered, so construction leaves positions alone.
    heap = MinHeap([Item(0, "root"), Item(5, "left"), Item(5, "right"), Item(9, "tail")])

    assert heap.pop().label == "root"
    assert heap.fetch().label == "left"


def test_heapify_handles_duplicates():
    heap = MinHeap([Item(2), Item(2), Item(1), Item(2), Item(1)])

    assert [item.value for item in heap.drain()] == [1, 1, 2, 2, 2]


def test_construction_leaves_callers_sequence_untouched():
    items = [Item(9), Item(4), Item(7), Item(1)]
    original = list(items)

    heap = MinHeap(items)
    heap.pop()

    assert items == original
