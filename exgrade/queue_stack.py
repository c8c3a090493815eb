"""A FIFO queue and a stack built from two such queues."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyError(IndexError):
    """Raised when taking a value from an empty container."""


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._elements: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Add a value at the back."""
        self._elements.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self._elements:
            raise EmptyError("Queue is empty")
        return self._elements.popleft()

    def peek(self) -> T:
        """Return the front value without removing it."""
        if not self._elements:
            raise EmptyError("Queue is empty")
        return self._elements[0]

    def size(self) -> int:
        """Return the number of values held."""
        return len(self._elements)

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)


class QueueStack(Generic[T]):
    """A last-in, first-out stack that uses only queue operations."""

    def __init__(self) -> None:
        self._main: Queue[T] = Queue()
        self._spare: Queue[T] = Queue()

    def push(self, value: T) -> None:
        """Put a value on top."""
        self._main.enqueue(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._main.is_empty():
            raise EmptyError("Stack is empty")
        while self._main.size() > 1:
            self._spare.enqueue(self._main.dequeue())
        top = self._main.dequeue()
        self._main, self._spare = self._spare, self._main
        return top

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return self._main.is_empty()

    def __len__(self) -> int:
        return self._main.size()