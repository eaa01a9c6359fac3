"""
Enumerables decoded with positional numeral systems:
fixed radix (BaseN), mixed radix (CartesianProduct)
and binary (PowerSet).

Elements may repeat across positions, so unlike permutations
the pool never shrinks and each digit indexes a full seed.
"""

import dataclasses
import logging
import math
from typing import Any, Iterable, Tuple

from unrank import combinatorics, core
from unrank.core import Selection
from unrank.errors import RangeError


@dataclasses.dataclass(frozen=True)
class BaseN(core.Enumerable):
    """
    Tuples of `size` seed elements, with repetition.
    The first element is the least significant digit.
    """

    seed: Selection
    size: int = 1
    base: int = dataclasses.field(init=False)
    length: int = dataclasses.field(init=False)

    def __post_init__(self):
        seed = core.snapshot(self.seed)
        size = core.as_rank(self.size)
        if size < 1:
            raise RangeError(f"Size must be positive. Got: {size}")
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "base", len(seed))
        object.__setattr__(self, "length", len(seed) ** size)
        logging.debug("BaseN %d, size %d: %d objects", self.base, size, self.length)

    @property
    def radices(self) -> Tuple[int, ...]:
        return (self.base,) * self.size

    def nth(self, rank: Any) -> Selection:
        rank = self.check_rank(rank)
        digits = combinatorics.integer_to_sequence(self.radices, rank)
        return tuple(self.seed[digit] for digit in digits)

    def rank(self, selection: Selection) -> int:
        digits = [core.seed_index(self.seed, element) for element in selection]
        return combinatorics.sequence_to_integer(self.radices, digits)


@dataclasses.dataclass(frozen=True)
class PowerSet(core.Enumerable):
    """
    All subsets of the seed. Bit `i` of the rank selects `seed[i]`.
    """

    seed: Selection
    length: int = dataclasses.field(init=False)

    def __post_init__(self):
        seed = core.snapshot(self.seed)
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "length", 1 << len(seed))
        logging.debug("PowerSet of %d elements: %d objects", len(seed), self.length)

    def nth(self, rank: Any) -> Selection:
        rank = self.check_rank(rank)
        bits = combinatorics.integer_to_sequence((2,) * len(self.seed), rank)
        return tuple(element for element, bit in zip(self.seed, bits) if bit)

    def rank(self, selection: Selection) -> int:
        rank = 0
        start = 0
        for element in selection:
            index = core.seed_index(self.seed, element, start)
            rank |= 1 << index
            start = index + 1
        return rank


@dataclasses.dataclass(frozen=True, init=False)
class CartesianProduct(core.Enumerable):
    """
    One element from each seed, in mixed radix order:
    the first seed is the least significant digit, varying fastest.
    """

    seeds: Tuple[Selection, ...]
    length: int

    def __init__(self, *seeds: Iterable[Any]):
        object.__setattr__(self, "seeds", tuple(core.snapshot(seed) for seed in seeds))
        object.__setattr__(self, "length", math.prod(self.radices))
        logging.debug(
            "CartesianProduct of radices %s: %d objects", self.radices, self.length
        )

    @property
    def size(self) -> int:
        return len(self.seeds)

    @property
    def radices(self) -> Tuple[int, ...]:
        return tuple(len(seed) for seed in self.seeds)

    def nth(self, rank: Any) -> Selection:
        rank = self.check_rank(rank)
        digits = combinatorics.integer_to_sequence(self.radices, rank)
        return tuple(seed[digit] for seed, digit in zip(self.seeds, digits))

    def rank(self, selection: Selection) -> int:
        selection = tuple(selection)
        if len(selection) != self.size:
            raise ValueError(f"Expected {self.size} elements. Got: {len(selection)}")
        digits = [
            core.seed_index(seed, element) for seed, element in zip(self.seeds, selection)
        ]
        return combinatorics.sequence_to_integer(self.radices, digits)
