"""Singly and doubly linked lists with sorted merge and in-place reversal."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import islice
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    next: Optional["_DoubleNode"] = None
    prev: Optional["_DoubleNode"] = None


class SinglyLinkedList(Generic[T]):
    """A singly linked list that appends at its tail."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for value in values:
            self.add(value)

    def add(self, value: T) -> None:
        """Append a value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def get(self, index: int) -> Optional[T]:
        """Return the value at index, or None when there is none."""
        if index < 0:
            return None
        return next(islice(self, index, None), None)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(v) for v in self)}])"


class DoublyLinkedList(Generic[T]):
    """A doubly linked list that appends at its tail and can reverse in place."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._length = 0
        for value in values:
            self.add(value)

    def add(self, value: T) -> None:
        """Append a value at the end."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def get(self, index: int) -> Optional[T]:
        """Return the value at index, or None when there is none."""
        if index < 0:
            return None
        return next(islice(self, index, None), None)

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        node = self._head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(v) for v in self)}])"


def merge_sorted(list_a: SinglyLinkedList[T], list_b: SinglyLinkedList[T]) -> SinglyLinkedList[T]:
    """Merge two ascending lists into a new ascending list."""
    return SinglyLinkedList(heapq.merge(list_a, list_b))