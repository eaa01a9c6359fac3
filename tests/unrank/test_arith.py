import math

import hypothesis
import hypothesis.strategies as st
import pytest

from unrank import arith
from unrank.errors import RangeError


def test_permutation():
    assert arith.permutation(5, 2) == 20
    assert arith.permutation(5, 0) == 1
    assert arith.permutation(5, 5) == 120
    assert arith.permutation(0, 0) == 1


def test_permutation_with_size_larger_than_elements():
    assert arith.permutation(3, 4) == 0
    assert arith.combination(3, 4) == 0


@pytest.mark.parametrize("n, k", [(-1, 0), (3, -1), (-2, -2)])
def test_permutation_with_negative_arguments(n: int, k: int):
    with pytest.raises(RangeError):
        arith.permutation(n, k)
    with pytest.raises(RangeError):
        arith.combination(n, k)


def test_combination():
    assert arith.combination(5, 2) == 10
    assert arith.combination(5, 0) == 1
    assert arith.combination(52, 5) == 2598960


def test_factorial():
    assert arith.factorial(0) == 1
    assert arith.factorial(1) == 1
    assert arith.factorial(10) == 3628800
    # beyond int64
    assert arith.factorial(21) == 51090942171709440000
    assert not arith.is_bounded(arith.factorial(21))
    assert arith.is_bounded(arith.factorial(20))


@hypothesis.given(n=st.integers(min_value=0, max_value=200))
def test_factorial_is_full_permutation(n: int):
    assert arith.factorial(n) == arith.permutation(n, n)
    assert arith.factorial(n) == math.factorial(n)


@hypothesis.given(
    n=st.integers(min_value=0, max_value=100), data=st.data()
)
def test_combination_symmetry(n: int, data: st.DataObject):
    k = data.draw(st.integers(min_value=0, max_value=n))
    assert arith.combination(n, k) == arith.combination(n, n - k)
    assert arith.combination(n, k) * arith.factorial(k) == arith.permutation(n, k)


def test_is_bounded():
    assert arith.is_bounded(0)
    assert arith.is_bounded(arith.MAX_BOUNDED)
    assert not arith.is_bounded(arith.MAX_BOUNDED + 1)
    assert arith.MAX_BOUNDED == 2**63 - 1
