"""
Permutations and combinations, decoded from their rank.

A k-permutation of rank `r` is read off the factorial number system:
the digits of `r * (n - k)!` pick, one at a time, an element from the
shrinking pool of unused seed elements.

A combination is the k-permutation that presents its elements in their
seed order. Its rank is mapped to that permutation's rank through the
combinatorial number system.
https://en.wikipedia.org/wiki/Combinatorial_number_system
"""

import dataclasses
import logging
from typing import Any, Optional, Sequence, Tuple

from unrank import arith, core, factoradic
from unrank.core import Selection
from unrank.errors import RangeError


@dataclasses.dataclass(frozen=True)
class Permutation(core.Enumerable):
    """
    Ordered selections of `size` distinct seed positions,
    in lexicographic order of positions.
    """

    seed: Selection
    size: Optional[int] = None
    length: int = dataclasses.field(init=False)

    def __post_init__(self):
        seed = core.snapshot(self.seed)
        size = check_size(self.size, len(seed))
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "length", arith.permutation(len(seed), size))
        logging.debug(
            "Permutation of %d elements, size %d: %d objects",
            len(seed),
            size,
            self.length,
        )

    def nth(self, rank: Any) -> Selection:
        rank = self.check_rank(rank)
        num_elements = len(self.seed)
        offset = num_elements - self.size
        digits = factoradic.factoradic(
            rank * arith.factorial(offset), digit_count=num_elements
        )
        pool = list(self.seed)
        return tuple(
            pool.pop(digits[position])
            for position in range(num_elements - 1, offset - 1, -1)
        )

    def rank(self, selection: Selection) -> int:
        selection = tuple(selection)
        if len(selection) != self.size:
            raise ValueError(
                f"Expected a selection of size {self.size}. Got: {len(selection)}"
            )
        num_elements = len(self.seed)
        pool = list(self.seed)
        rank = 0
        for position, element in enumerate(selection):
            index = core.seed_index(pool, element)
            pool.pop(index)
            rank += index * arith.permutation(
                num_elements - 1 - position, self.size - 1 - position
            )
        return rank


@dataclasses.dataclass(frozen=True)
class Combination(core.Enumerable):
    """
    Subsets of `size` seed positions, in lexicographic order.
    Elements keep their relative seed order.
    """

    seed: Selection
    size: Optional[int] = None
    length: int = dataclasses.field(init=False)
    permutation: Permutation = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        permutation = Permutation(self.seed, self.size)
        object.__setattr__(self, "permutation", permutation)
        object.__setattr__(self, "seed", permutation.seed)
        object.__setattr__(self, "size", permutation.size)
        object.__setattr__(
            self, "length", arith.combination(len(permutation.seed), permutation.size)
        )
        logging.debug(
            "Combination of %d elements, size %d: %d objects",
            len(self.seed),
            self.size,
            self.length,
        )

    def nth(self, rank: Any) -> Selection:
        rank = self.check_rank(rank)
        num_elements = len(self.seed)
        indices = combinadic_indices(rank, num_elements, self.size)
        return self.permutation.nth(permutation_rank(indices, num_elements))

    def rank(self, selection: Selection) -> int:
        selection = tuple(selection)
        if len(selection) != self.size:
            raise ValueError(
                f"Expected a selection of size {self.size}. Got: {len(selection)}"
            )
        indices = []
        start = 0
        for element in selection:
            index = core.seed_index(self.seed, element, start)
            indices.append(index)
            start = index + 1
        return combination_rank(indices, len(self.seed))


def check_size(size: Optional[int], num_elements: int) -> int:
    """
    Defaults `size` to `num_elements`, and otherwise checks it's in [1, num_elements].
    """
    if size is None:
        return num_elements
    size = core.as_rank(size)
    if not 1 <= size <= num_elements:
        raise RangeError(f"Size must be in [1, {num_elements}]. Got: {size}")
    return size


def combinadic_indices(rank: int, n: int, k: int) -> Tuple[int, ...]:
    """
    Returns the sorted positions of the combination of rank `rank`,
    in lexicographic order, out of `n` choose `k`.

    The lexicographic rank `r` is the colexicographic rank
    `C(n, k) - 1 - r` of the mirrored positions `n - 1 - c`.
    Each mirrored position `d_i` is the largest `d` with `C(d, i) <= remainder`,
    found by binary search.
    """
    num_combinations = arith.combination(n, k)
    if not 0 <= rank < num_combinations:
        raise RangeError(f"Rank {rank} must be in [0, {num_combinations})")
    remainder = num_combinations - 1 - rank
    indices = []
    upper = n - 1
    for i in range(k, 0, -1):
        low, high = i - 1, upper
        while low < high:
            mid = (low + high + 1) // 2
            if arith.combination(mid, i) <= remainder:
                low = mid
            else:
                high = mid - 1
        remainder -= arith.combination(low, i)
        indices.append(n - 1 - low)
        upper = low - 1
    return tuple(indices)


def lexicographic_indices(rank: int, n: int, k: int) -> Tuple[int, ...]:
    """
    Same as `combinadic_indices`, by walking positions in increasing order
    and skipping the combinations that start with each smaller candidate.
    """
    num_combinations = arith.combination(n, k)
    if not 0 <= rank < num_combinations:
        raise RangeError(f"Rank {rank} must be in [0, {num_combinations})")
    indices = []
    candidate = 0
    for position in range(k):
        while True:
            count = arith.combination(n - 1 - candidate, k - 1 - position)
            if rank < count:
                break
            rank -= count
            candidate += 1
        indices.append(candidate)
        candidate += 1
    return tuple(indices)


def combination_rank(indices: Sequence[int], n: int) -> int:
    """
    Lexicographic rank of strictly increasing positions `indices` out of `n`.
    """
    k = len(indices)
    colex_rank = sum(
        arith.combination(n - 1 - index, k - position)
        for position, index in enumerate(indices)
    )
    return arith.combination(n, k) - 1 - colex_rank


def permutation_rank(indices: Sequence[int], n: int) -> int:
    """
    Rank of the k-permutation of `n` positions that picks `indices` in order,
    for strictly increasing `indices`.

    Every earlier pick is a smaller position, so `index - position` unused
    positions precede each pick.
    """
    k = len(indices)
    return sum(
        (index - position) * arith.permutation(n - 1 - position, k - 1 - position)
        for position, index in enumerate(indices)
    )
