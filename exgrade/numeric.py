"""Numeric puzzles: Fibonacci by matrix powers and addition by bit operations."""

from __future__ import annotations

_Matrix = tuple[int, int, int, int]

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def _multiply(x: _Matrix, y: _Matrix) -> _Matrix:
    a, b, c, d = x
    e, f, g, h = y
    return (a * e + b * g, a * f + b * h, c * e + d * g, c * f + d * h)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    result: _Matrix = (1, 0, 0, 1)
    base: _Matrix = (1, 1, 1, 0)
    while n:
        if n & 1:
            result = _multiply(result, base)
        base = _multiply(base, base)
        n >>= 1
    return result[1]


def get_sum(a: int, b: int) -> int:
    """Add two 32-bit signed integers with bit operations, wrapping on overflow."""
    a &= _MASK
    b &= _MASK
    while b:
        a, b = (a ^ b) & _MASK, ((a & b) << 1) & _MASK
    return a - (1 << 32) if a & _SIGN else a