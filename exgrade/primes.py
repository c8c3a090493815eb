"""Prime testing, Goldbach's other conjecture and largest prime factors."""

from __future__ import annotations

import math
from itertools import count
from typing import Iterator

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73)
_TRIAL_LIMIT = 1000


def is_prime(n: int) -> bool:
    """Tell whether n is prime, using Miller-Rabin over fixed small bases."""
    if n < 2:
        return False
    for prime in _SMALL_PRIMES:
        if n % prime == 0:
            return n == prime
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for base in _SMALL_PRIMES:
        x = pow(base, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def _is_prime_plus_twice_square(n: int) -> bool:
    return any(is_prime(n - 2 * k * k) for k in range(1, math.isqrt(n // 2) + 1))


def goldbach_conjecture() -> str:
    """Return the two smallest odd composites that are not a prime plus twice a square."""
    found = []
    for n in count(9, 2):
        if is_prime(n) or _is_prime_plus_twice_square(n):
            continue
        found.append(n)
        if len(found) == 2:
            return ",".join(map(str, found))
    raise AssertionError("unreachable")


def _pollard_brent(n: int) -> int:
    """Return a non-trivial factor of the odd composite n."""
    for c in count(1):
        y, m, g, r, q = 2, 128, 1, 1, 1
        x = ys = y
        while g == 1:
            x = y
            for _ in range(r):
                y = (y * y + c) % n
            k = 0
            while k < r and g == 1:
                ys = y
                for _ in range(min(m, r - k)):
                    y = (y * y + c) % n
                    q = q * abs(x - y) % n
                g = math.gcd(q, n)
                k += m
            r *= 2
        if g == n:
            g = 1
            while g == 1:
                ys = (ys * ys + c) % n
                g = math.gcd(abs(x - ys), n)
        if g != n:
            return g
    raise AssertionError("unreachable")


def _prime_factors(n: int) -> Iterator[int]:
    for divisor in range(2, _TRIAL_LIMIT):
        while n % divisor == 0:
            yield divisor
            n //= divisor
    pending = [n] if n > 1 else []
    while pending:
        m = pending.pop()
        if is_prime(m):
            yield m
            continue
        root = math.isqrt(m)
        if root * root == m:
            pending.extend((root, root))
            continue
        factor = _pollard_brent(m)
        pending.extend((factor, m // factor))


def find_max_prime_factor(number: int) -> int:
    """Return the largest prime factor of number, which must be at least 2."""
    if number < 2:
        raise ValueError("the number must be at least 2")
    return max(_prime_factors(number))