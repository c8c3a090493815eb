import pytest

from exgrade.text_checks import (
    are_anagrams,
    is_palindrome,
    longest_substring_without_repeating_chars,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A man, a plan, a canal, Panama", True),
        ("Racecar", True),
        ("Hello, World!", False),
        ("No 'x' in Nixon", True),
        ("Was it a car or a cat I saw?", True),
    ],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


def test_empty_string_is_palindrome():
    assert is_palindrome("") is True


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("listen", "silent", True),
        ("evil", "vile", True),
        ("hello", "world", False),
        ("Clint Eastwood", "Old West Action", True),
        ("Astronomer", "Moon starer", True),
    ],
)
def test_are_anagrams(first, second, expected):
    assert are_anagrams(first, second) is expected


def test_anagrams_require_same_counts():
    assert are_anagrams("aab", "abb") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abcabcbb", 3),
        ("bbbbb", 1),
        ("pwwkew", 3),
        ("", 0),
        ("abcde", 5),
    ],
)
def test_longest_substring(text, expected):
    assert longest_substring_without_repeating_chars(text) == expected


def test_longest_substring_window_does_not_move_back():
    assert longest_substring_without_repeating_chars("abba") == 2