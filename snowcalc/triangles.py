"""Triangular numbers and their repeated prefix sums."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import accumulate


def triangle(base: int) -> int:
    """Triangular number with the given base width."""
    if base % 2 == 0:
        return (base + 1) * (base // 2)
    return base * (base // 2 + 1)


def prefix_sum(values: Sequence[int], index: int) -> int:
    """Sum of ``values`` from the start up to and including ``index``."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range")
    return sum(values[: index + 1])


def n_order_triangle(base: int, order: int) -> int:
    """Triangular number of the given order: order 1 is the plain triangle,
    each further order sums the previous sequence from 1 to ``base``."""
    if base < 1:
        raise ValueError("base must be at least 1")
    sequence = [triangle(n) for n in range(1, base + 1)]
    for _ in range(order - 1):
        sequence = list(accumulate(sequence))
    return sequence[base - 1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Higher-order triangular numbers.")
    parser.add_argument("--base", type=int, default=7)
    parser.add_argument("--order", type=int, default=4)
    args = parser.parse_args(argv)
    value = n_order_triangle(args.base, args.order)
    print(f"{args.order} & {args.base} = {value}")
    return 0