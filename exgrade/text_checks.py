"""String puzzles: palindromes, anagrams and the longest repeat-free substring."""

from __future__ import annotations

from collections import Counter


def _letters(text: str) -> str:
    return "".join(char.lower() for char in text if char.isalpha())


def is_palindrome(text: str) -> bool:
    """Tell whether the letters of text read the same both ways, ignoring case."""
    letters = _letters(text)
    return letters == letters[::-1]


def are_anagrams(first: str, second: str) -> bool:
    """Tell whether two strings use the same letters, ignoring case and non-letters."""
    return Counter(_letters(first)) == Counter(_letters(second))


def longest_substring_without_repeating_chars(text: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    window_start = 0
    best = 0
    for position, char in enumerate(text):
        previous = last_seen.get(char)
        if previous is not None and previous >= window_start:
            window_start = previous + 1
        last_seen[char] = position
        best = max(best, position - window_start + 1)
    return best