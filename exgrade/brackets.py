"""A stack and a bracket matcher built on it."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def push(self, value: T) -> None:
        """Put a value on top."""
        self._data.append(value)

    def pop(self) -> Optional[T]:
        """Remove and return the top value, or None when empty."""
        return self._data.pop() if self._data else None

    def peek(self) -> Optional[T]:
        """Return the top value without removing it, or None when empty."""
        return self._data[-1] if self._data else None

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._data

    def clear(self) -> None:
        """Remove every value."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down."""
        return reversed(self._data)


def bracket_match(text: str) -> bool:
    """Tell whether the (), [] and {} brackets in text are balanced."""
    stack: Stack[str] = Stack()
    for char in text:
        if char in _OPENING:
            stack.push(char)
        elif char in _PAIRS:
            if stack.pop() != _PAIRS[char]:
                return False
    return stack.is_empty()