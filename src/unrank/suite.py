"""
This module has utilities to load enumerables by name.
"""

from typing import Any, Callable, Mapping

from unrank import core, permutations, radix

PERMUTATION = "permutation"
COMBINATION = "combination"
BASE_N = "base_n"
POWER_SET = "power_set"
CARTESIAN_PRODUCT = "cartesian_product"

SUPPORTED_ENUMERABLES = frozenset(
    (PERMUTATION, COMBINATION, BASE_N, POWER_SET, CARTESIAN_PRODUCT)
)


def load(name: str, *args: Any, **kwargs: Any) -> core.Enumerable:
    """
    Creates an enumerable with the given arguments.

    Args:
        name: unique identifier.
        args: parameters that are passed to an enumerable constructor.
        kwargs: keyword parameters that are passed to an enumerable constructor.

    Returns:
        An instantiated enumerable.

    Raises:
        A ValueError is the enumerable is unsupported.

    """
    constructors = __enumerable_constructors()
    if name not in constructors:
        raise ValueError(f"Unsupported enumerable: {name}.")
    return constructors[name](*args, **kwargs)


def __enumerable_constructors() -> Mapping[str, Callable[..., core.Enumerable]]:
    """
    Creates a mapping of enumerable names to their constructors.

    Returns:
        A mapping from a unique string identifier to a constructor.

    """
    return {
        PERMUTATION: permutations.Permutation,
        COMBINATION: permutations.Combination,
        BASE_N: radix.BaseN,
        POWER_SET: radix.PowerSet,
        CARTESIAN_PRODUCT: radix.CartesianProduct,
    }
