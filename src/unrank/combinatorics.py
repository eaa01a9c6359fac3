"""
Utils for positional numeral systems.

Digits are least significant first: the digit at position `i`
has place value `radices[0] * ... * radices[i - 1]`.
"""

from typing import Sequence, Tuple

from unrank.errors import RangeError


def sequence_to_integer(radices: Sequence[int], sequence: Sequence[int]) -> int:
    """
    Uses the positional system of integers to compute the unique
    integer represented by a sequence of digits.

    Args:
        radices: the number of possible digits at each position.
        sequence: the digits, least significant first.
    """
    if len(radices) != len(sequence):
        raise ValueError(
            f"Expected {len(radices)} digits. Got: {len(sequence)}"
        )
    index = 0
    for radix, digit in zip(reversed(radices), reversed(sequence)):
        if not 0 <= digit < radix:
            raise RangeError(f"Digit {digit} must be in [0, {radix})")
        index = index * radix + digit
    return index


def integer_to_sequence(radices: Sequence[int], index: int) -> Tuple[int, ...]:
    """
    Uses the positional system of integers to generate a unique
    sequence of digits given its representation integer - `index`.

    Based on https://2ality.com/2013/03/permutations.html.

    Args:
        radices: the number of possible digits at each position.
        index: the integer to decompose, in [0, prod(radices)).
    """
    if index < 0:
        raise RangeError(f"Index must be non-negative. Got: {index}")
    xs = []
    for radix in radices:
        index, digit = divmod(index, radix)
        xs.append(digit)
    if index != 0:
        raise RangeError(f"Index is too large for radices {tuple(radices)}")
    return tuple(xs)
