"""
Numpy utilities.
"""

from typing import Any

import numpy as np

from unrank import arith
from unrank.errors import CapacityError


def item(value: Any) -> Any:
    """
    Meant to return the single value from a numpy array if it's defined.
    """
    try:
        return value.item()
    except AttributeError:
        pass
    return value


def bounded(value: int) -> np.int64:
    """
    Converts an exact count into a numpy int64.

    Raises:
        CapacityError: if the count is out of the int64 range.
    """
    if not arith.is_bounded(value):
        raise CapacityError(f"{value} exceeds {arith.MAX_BOUNDED}")
    return np.int64(value)


def random_integer(upper: int, rng: np.random.Generator) -> int:
    """
    Draws an integer uniformly from [0, upper).

    Bounded ranges are drawn with `rng.integers`.
    Larger ones use rejection sampling on random bytes.
    """
    if upper <= 0:
        raise ValueError(f"`upper` must be positive. Got: {upper}")
    if arith.is_bounded(upper):
        return int(rng.integers(0, bounded(upper)))

    num_bits = (upper - 1).bit_length()
    num_bytes = (num_bits + 7) // 8
    excess_bits = num_bytes * 8 - num_bits
    while True:
        value = int.from_bytes(rng.bytes(num_bytes), "little") >> excess_bits
        if value < upper:
            return value
