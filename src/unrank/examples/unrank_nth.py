"""
Example on decoding objects from their rank, without
enumerating the ones before them.
"""

import argparse
import dataclasses
import logging
from typing import Optional, Sequence

import numpy as np

from unrank import suite


@dataclasses.dataclass(frozen=True)
class Args:
    """
    Example args.

    Args:
        kind: name of the enumerable.
        seed: elements, one character each. Repeat for cartesian products.
        size: selection size, where applicable.
        rank: rank of the object to decode.
        num_samples: number of random objects to draw.
    """

    kind: str
    seed: Sequence[str]
    size: Optional[int]
    rank: int
    num_samples: int


def parse_args() -> Args:
    """
    Parses std in arguments and returns an instanace of Args.
    """
    arg_parser = argparse.ArgumentParser(prog="Unrank - Nth Object Example")
    arg_parser.add_argument(
        "--kind", choices=sorted(suite.SUPPORTED_ENUMERABLES), default=suite.PERMUTATION
    )
    arg_parser.add_argument("--seed", action="append", default=[])
    arg_parser.add_argument("--size", type=int, default=None)
    arg_parser.add_argument("--rank", type=int, default=0)
    arg_parser.add_argument("--num-samples", type=int, default=0)
    args, _ = arg_parser.parse_known_args()
    return Args(**vars(args))


def main(args: Args):
    """
    Entry point.
    """
    seeds = args.seed or ["abcd"]
    if args.kind == suite.CARTESIAN_PRODUCT:
        enumerable = suite.load(args.kind, *seeds)
    elif args.kind == suite.POWER_SET:
        enumerable = suite.load(args.kind, seeds[0])
    elif args.size is None:
        enumerable = suite.load(args.kind, seeds[0])
    else:
        enumerable = suite.load(args.kind, seeds[0], args.size)

    logging.info("%s has %d objects", enumerable, enumerable.length)
    logging.info("Object %d: %s", args.rank, enumerable.nth(args.rank))

    rng = np.random.default_rng()
    for _ in range(args.num_samples):
        logging.info("Sample: %s", enumerable.sample(rng))


if __name__ == "__main__":
    main(args=parse_args())
