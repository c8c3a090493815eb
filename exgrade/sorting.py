"""In-place sorting of a mutable sequence."""

from __future__ import annotations

from typing import Any, MutableSequence


def sort(array: MutableSequence[Any]) -> None:
    """Sort the sequence in place in ascending order."""
    array[:] = sorted(array)