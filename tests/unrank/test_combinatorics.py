import hypothesis
import hypothesis.strategies as st
import numpy as np
import pytest

from unrank import combinatorics
from unrank.errors import RangeError


def test_integer_to_sequence():
    assert combinatorics.integer_to_sequence((10, 10, 10), index=123) == (3, 2, 1)
    assert combinatorics.integer_to_sequence((2, 3), index=5) == (1, 2)
    assert combinatorics.integer_to_sequence((), index=0) == ()


def test_integer_to_sequence_with_out_of_range_index():
    with pytest.raises(RangeError):
        combinatorics.integer_to_sequence((2, 3), index=6)
    with pytest.raises(RangeError):
        combinatorics.integer_to_sequence((2, 3), index=-1)


@hypothesis.given(
    radices=st.lists(st.integers(min_value=1, max_value=10), min_size=1, max_size=10)
)
def test_integer_to_sequence_round_trip(radices):
    size = int(np.prod(radices))
    index = int(np.random.default_rng().integers(0, size))
    seq = combinatorics.integer_to_sequence(radices, index=index)
    assert len(seq) == len(radices)
    assert all([0 <= digit < radix for digit, radix in zip(seq, radices)])
    output = combinatorics.sequence_to_integer(radices, sequence=seq)
    assert output == index


@hypothesis.given(
    space_size=st.integers(min_value=1, max_value=10),
    sequence_length=st.integers(min_value=1, max_value=10),
    samples=st.integers(min_value=1, max_value=100),
)
@hypothesis.settings(deadline=None)
def test_sequence_to_integer(space_size: int, sequence_length: int, samples: int):
    radices = (space_size,) * sequence_length
    for _ in range(samples):
        sequence = tuple(
            np.random.default_rng()
            .integers(0, space_size, size=sequence_length)
            .tolist()
        )
        index = combinatorics.sequence_to_integer(radices, sequence=sequence)
        assert 0 <= index < space_size**sequence_length
        assert combinatorics.integer_to_sequence(radices, index=index) == sequence

    # largest sequence
    sequence = tuple([space_size - 1] * sequence_length)
    index = combinatorics.sequence_to_integer(radices, sequence=sequence)
    assert index == (space_size**sequence_length) - 1


def test_sequence_to_integer_with_invalid_digits():
    with pytest.raises(RangeError):
        combinatorics.sequence_to_integer((2, 3), sequence=(0, 3))
    with pytest.raises(ValueError):
        combinatorics.sequence_to_integer((2, 3), sequence=(0,))
