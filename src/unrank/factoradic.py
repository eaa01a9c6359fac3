"""
Factorial number system.
https://en.wikipedia.org/wiki/Factorial_number_system

Position `i` has place value `i!` and holds a digit in [0, i].
Digits are stored least significant first, starting at position 0,
whose digit is always zero.
"""

from typing import List, Sequence

from unrank import arith
from unrank.errors import RangeError


def factoradic(value: int, digit_count: int = 0) -> List[int]:
    """
    Returns the factoradic digits of `value`, least significant first.

    Args:
        value: a non-negative integer.
        digit_count: number of digit positions (besides position 0).
            Zero infers the minimal count, i.e. the largest `l` with `l! <= value`.

    Returns:
        A list of `digit_count + 1` digits, where `digits[i]` multiplies `i!`.

    Raises:
        RangeError: if value is negative, or doesn't fit in `digit_count` digits.
    """
    if value < 0:
        raise RangeError(f"Value must be non-negative. Got: {value}")
    if digit_count < 0:
        raise RangeError(f"Digit count must be non-negative. Got: {digit_count}")

    if digit_count == 0:
        place_value = 1
        while place_value * (digit_count + 1) <= value:
            digit_count += 1
            place_value *= digit_count
    else:
        if value >= arith.factorial(digit_count + 1):
            raise RangeError(
                f"Value {value} does not fit in {digit_count} factoradic digits"
            )
        place_value = arith.factorial(digit_count)

    digits = [0] * (digit_count + 1)
    for position in range(digit_count, 0, -1):
        digits[position], value = divmod(value, place_value)
        place_value //= position
    return digits


def from_factoradic(digits: Sequence[int]) -> int:
    """
    Inverse of `factoradic`: sum of `digits[i] * i!`.

    Raises:
        RangeError: if a digit is outside [0, i].
    """
    value = 0
    place_value = 1
    for position, digit in enumerate(digits):
        if not 0 <= digit <= position:
            raise RangeError(
                f"Digit {digit} at position {position} must be in [0, {position}]"
            )
        if position > 0:
            place_value *= position
        value += digit * place_value
    return value
