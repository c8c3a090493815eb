"""A binary heap ordered by a comparison function, drained by iteration."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """A binary heap; comparator(a, b) is true when a belongs above b.

    Iterating the heap removes and yields its values in priority order.
    """

    def __init__(self, comparator: Callable[[T, T], bool]) -> None:
        self._items: list[T] = []
        self._comparator = comparator

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the heap holds nothing."""
        return not self._items

    def add(self, value: T) -> None:
        """Insert a value."""
        items = self._items
        items.append(value)
        idx = len(items) - 1
        while idx > 0:
            parent = (idx - 1) // 2
            if not self._comparator(items[idx], items[parent]):
                break
            items[idx], items[parent] = items[parent], items[idx]
            idx = parent

    def _top_child(self, idx: int) -> int:
        left = 2 * idx + 1
        right = left + 1
        if right < len(self._items) and self._comparator(self._items[right], self._items[left]):
            return right
        return left

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        items = self._items
        if not items:
            raise StopIteration
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            idx = 0
            while 2 * idx + 1 < len(items):
                child = self._top_child(idx)
                if not self._comparator(items[child], items[idx]):
                    break
                items[idx], items[child] = items[child], items[idx]
                idx = child
        return top


def min_heap() -> Heap:
    """Return a heap that yields the smallest value first."""
    return Heap(lambda a, b: a < b)


def max_heap() -> Heap:
    """Return a heap that yields the largest value first."""
    return Heap(lambda a, b: a > b)