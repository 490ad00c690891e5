"""Sieve of Eratosthenes and its segmented variant."""

from __future__ import annotations

from math import isqrt


def sieve(n: int) -> list[bool]:
    """Return a list of length ``n + 1`` whose entry ``i`` tells if ``i`` is prime."""
    if n < 0:
        raise ValueError("sieve bound must not be negative")
    flags = [True] * (n + 1)
    flags[0] = False
    if n >= 1:
        flags[1] = False
    for i in range(2, isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return flags


def base_primes(high: int) -> list[int]:
    """Return the primes up to the square root of ``high``."""
    if high < 0:
        raise ValueError("bound must not be negative")
    return [value for value, prime in enumerate(sieve(isqrt(high))) if prime]


def segmented_sieve(low: int, high: int) -> list[bool]:
    """Return primality flags for every number from ``low`` to ``high`` inclusive."""
    if low < 0:
        raise ValueError("lower bound must not be negative")
    if high < low:
        raise ValueError("upper bound must not be below the lower bound")
    flags = [True] * (high - low + 1)
    for value in (0, 1):
        if low <= value <= high:
            flags[value - low] = False
    for prime in base_primes(high):
        first_multiple = -(-low // prime) * prime
        start = max(first_multiple, prime * prime)
        flags[start - low :: prime] = [False] * len(range(start, high + 1, prime))
    return flags


def primes_in_range(low: int, high: int) -> list[int]:
    """Return the primes from ``low`` to ``high`` inclusive."""
    return [low + offset for offset, prime in enumerate(segmented_sieve(low, high)) if prime]