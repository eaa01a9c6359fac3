"""
Exact counting functions.

Counts grow faster than exponentially: 21! already exceeds the int64 range.
Python integers widen on demand, so results are always exact.
`is_bounded` tells whether a count also fits a machine integer.
"""

import math

import numpy as np

from unrank.errors import RangeError

MAX_BOUNDED = int(np.iinfo(np.int64).max)


def is_bounded(value: int) -> bool:
    """
    Checks whether `value` fits in a signed 64 bit integer.
    """
    return -MAX_BOUNDED - 1 <= value <= MAX_BOUNDED


def permutation(n: int, k: int) -> int:
    """
    Calculates `P(n, k)` = n * (n - 1) * ... * (n - k + 1).

    Returns 1 for k = 0 and 0 for k > n.
    """
    _check_non_negative(n=n, k=k)
    return math.perm(n, k)


def combination(n: int, k: int) -> int:
    """
    Calculates `C(n, k)` = P(n, k) / k!.

    Returns 0 for k > n.
    """
    _check_non_negative(n=n, k=k)
    return permutation(n, k) // factorial(k)


def factorial(n: int) -> int:
    """
    Calculates `n!` = P(n, n).
    """
    return permutation(n, n)


def _check_non_negative(**kwargs: int) -> None:
    for name, value in kwargs.items():
        if value < 0:
            raise RangeError(f"`{name}` must be non-negative. Got: {value}")
