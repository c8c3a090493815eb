"""Array puzzles: missing number, duplicates, rotation, intersection, intervals."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, MutableSequence, Sequence


def find_missing_number(nums: Sequence[int]) -> int:
    """Return the one number missing from a permutation of 1..n with one gap."""
    n = len(nums) + 1
    return n * (n + 1) // 2 - sum(nums)


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return each value that occurs more than once, in ascending order."""
    counts = Counter(nums)
    return sorted(value for value, count in counts.items() if count > 1)


def rotate_matrix_90_degrees(matrix: MutableSequence[list[int]]) -> None:
    """Rotate the matrix 90 degrees clockwise in place; it need not be square."""
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in first-input order."""
    wanted = set(nums2)
    seen: set[int] = set()
    result = []
    for value in nums1:
        if value in wanted and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping inclusive intervals and return them sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged