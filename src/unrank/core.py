"""
This module defines core abstractions.
"""

import abc
import operator
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from unrank import arith, npsci
from unrank.errors import CapacityError, RangeError

Element = Any
Selection = Tuple[Element, ...]


def as_rank(value: Any) -> int:
    """
    Converts python and numpy integers to a python `int`.
    Anything else is rejected with a `TypeError`.
    """
    return operator.index(npsci.item(value))


class Enumerable(abc.ABC):
    """
    A finite, ordered collection of combinatorial objects
    that are computed on demand from their rank.

    Subclasses define `length` and `nth`; iteration, sampling
    and indexing are derived from them.
    """

    length: int

    @abc.abstractmethod
    def nth(self, rank: int) -> Selection:
        """
        Returns the object at position `rank`.

        Raises:
            RangeError: if the rank is outside [0, length).
        """
        raise NotImplementedError

    @abc.abstractmethod
    def rank(self, selection: Selection) -> int:
        """
        Returns the position of `selection`; the inverse of `nth`.

        Raises:
            ValueError: if the selection isn't one of the objects.
        """
        raise NotImplementedError

    def check_rank(self, rank: Any) -> int:
        """
        Validates `rank` against [0, length) and returns it as an `int`.
        """
        rank = as_rank(rank)
        if rank < 0:
            raise RangeError(f"Rank {rank} is too small. Must be in [0, {self.length})")
        if rank >= self.length:
            raise RangeError(f"Rank {rank} is too large. Must be in [0, {self.length})")
        return rank

    def __iter__(self) -> Iterator[Selection]:
        rank = 0
        while rank < self.length:
            yield self.nth(rank)
            rank += 1

    def __len__(self) -> int:
        if not arith.is_bounded(self.length):
            raise CapacityError(
                f"Length {self.length} exceeds {arith.MAX_BOUNDED}. Use `length` instead."
            )
        return self.length

    def __bool__(self) -> bool:
        return self.length > 0

    def __getitem__(self, rank: Any) -> Selection:
        rank = as_rank(rank)
        if rank < 0:
            rank += self.length
        return self.nth(rank)

    def to_list(self) -> List[Selection]:
        """
        Returns every object, in rank order.
        """
        return list(self)

    def sample(self, rng: Optional[np.random.Generator] = None) -> Selection:
        """
        Returns an object chosen uniformly at random.
        """
        if self.length == 0:
            raise RangeError(f"Cannot sample from empty {type(self).__name__}")
        rng = rng if rng is not None else np.random.default_rng()
        return self.nth(npsci.random_integer(self.length, rng=rng))


def snapshot(seed: Any) -> Selection:
    """
    Copies an iterable of elements into a tuple.
    """
    return tuple(seed)


def seed_index(seed: Sequence[Element], element: Element, start: int = 0) -> int:
    """
    Position of `element` in `seed`, at or after `start`.
    """
    try:
        return seed.index(element, start)
    except ValueError as err:
        raise ValueError(f"Element {element!r} is not in the seed") from err
