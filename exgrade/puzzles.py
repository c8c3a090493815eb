"""Small number and string puzzles: distinct items, bases, birthdays, coins, Fibonacci."""

from __future__ import annotations

import math
import re
import string

COINS = (1, 2, 5, 10, 20, 30, 50, 100)
DAYS_IN_YEAR = 365

_DIGITS = string.digits + string.ascii_lowercase
_NUMBER_WITH_BASE = re.compile(r"\s*([0-9A-Za-z]+)\((\d+)\)\s*")


def count_distinct(text: str) -> int:
    """Return how many distinct comma-separated items text holds."""
    return len(set(text.split(",")))


def _check_base(base: int) -> None:
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")


def convert_base(num_str: str, to_base: int) -> str:
    """Convert a number written as 'digits(base)' to to_base, using lower-case digits."""
    match = _NUMBER_WITH_BASE.fullmatch(num_str)
    if match is None:
        raise ValueError(f"expected a number of the form 'digits(base)', got {num_str!r}")
    digits, from_base = match.group(1), int(match.group(2))
    _check_base(from_base)
    _check_base(to_base)
    value = int(digits, from_base)
    if value == 0:
        return "0"
    out = []
    while value:
        value, remainder = divmod(value, to_base)
        out.append(_DIGITS[remainder])
    return "".join(reversed(out))


def birthday_probability(n: int) -> float:
    """Return the chance that at least two of n people share a birthday."""
    if n < 0:
        raise ValueError("the number of people must not be negative")
    if n > DAYS_IN_YEAR:
        return 1.0
    all_distinct = math.prod((DAYS_IN_YEAR - i) / DAYS_IN_YEAR for i in range(n))
    return 1.0 - all_distinct


def min_coins(amount: int) -> int:
    """Return the fewest notes from COINS that add up to amount."""
    if amount < 0:
        raise ValueError("the amount must not be negative")
    best = [0] + [amount + 1] * amount
    for total in range(1, amount + 1):
        best[total] = 1 + min(best[total - coin] for coin in COINS if coin <= total)
    return best[amount]


def odd_fibonacci_sum(threshold: int) -> int:
    """Return the sum of the odd Fibonacci numbers below threshold."""
    total = 0
    current, following = 0, 1
    while current < threshold:
        if current % 2:
            total += current
        current, following = following, current + following
    return total