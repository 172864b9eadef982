"""Digit-based number properties."""

from __future__ import annotations

__all__ = ["is_armstrong"]


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of the cubes of its decimal digits.

    Negative numbers use negative digits, so ``-153`` qualifies like ``153``.
    """
    sign = -1 if n < 0 else 1
    total = sum(int(digit) ** 3 for digit in str(abs(n)))
    return sign * total == n