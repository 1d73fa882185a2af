"""Sieve of Eratosthenes over an inclusive range.

See https://en.wikipedia.org/wiki/Sieve_of_Eratosthenes
"""

from __future__ import annotations

import math


def sieve_primes(start: int, end: int) -> list[int]:
    """Return the primes ``p`` with ``start <= p <= end`` in ascending order.

    Bounds are assumed valid (``0 <= start <= end``). Memory is O(end).
    """
    if end < 2:
        return []

    is_prime = bytearray([1]) * (end + 1)
    is_prime[0] = is_prime[1] = 0

    for x in range(2, math.isqrt(end) + 1):
        if is_prime[x]:
            is_prime[x * x :: x] = bytes(len(range(x * x, end + 1, x)))

    return [p for p in range(max(start, 2), end + 1) if is_prime[p]]
