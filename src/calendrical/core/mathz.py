"""
calendrical.core.mathz
----------------------
Integer division helpers with Euclidean semantics.

Day counts and proleptic years may be negative; every helper here keeps the
remainder non-negative so that formulae written for positive inputs remain
valid on the whole line. For a positive divisor Euclidean division coincides
with Python's floor division.
"""

from __future__ import annotations

from typing import Tuple


def divmod_euclid(m: int, n: int) -> Tuple[int, int]:
    """Euclidean (q, r) with m = q n + r and 0 <= r < |n|."""
    q, r = divmod(m, n)
    if r < 0:
        # only reachable for n < 0
        q += 1
        r -= n
    return q, r


def divide(m: int, n: int) -> int:
    return divmod_euclid(m, n)[0]


def modulo(m: int, n: int) -> int:
    return divmod_euclid(m, n)[1]


def adjusted_divide(m: int, n: int) -> int:
    """Ceiling division, n > 0."""
    return -((-m) // n)


def adjusted_modulo(m: int, n: int) -> int:
    """Remainder in 1..n instead of 0..n-1, n > 0."""
    r = m % n
    return n if r == 0 else r


def augmented_divide(m: int, n: int) -> Tuple[int, int]:
    """
    (q + 1, r + 1) where (q, r) = divmod(m, n).

    Turns a 0-based offset into a 1-based pair, e.g. a day of the year into
    (month, day) for months of equal length n.
    """
    q, r = divmod(m, n)
    return q + 1, r + 1
