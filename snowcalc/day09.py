"""Sensor histories: extrapolating sequences by repeated differences."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import pairwise

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day9"


def parse_histories(lines: Iterable[str]) -> list[list[int]]:
    """Read each line as a list of whitespace-separated integers."""
    return [[int(token) for token in line.split()] for line in lines]


def _difference_rows(values: Sequence[int]) -> list[list[int]]:
    """The sequence and its difference rows, up to the last non-zero row."""
    if len(values) < 2:
        raise ValueError("a history needs at least two values")
    rows = [list(values)]
    while True:
        current = rows[-1]
        if len(current) < 2:
            raise ValueError("history never reaches a row of zeros")
        differences = [later - earlier for earlier, later in pairwise(current)]
        if all(value == 0 for value in differences):
            return rows
        rows.append(differences)


def predict_next(values: Sequence[int]) -> int:
    """The value that follows the history."""
    return sum(row[-1] for row in _difference_rows(values))


def predict_previous(values: Sequence[int]) -> int:
    """The value that comes before the history."""
    result = 0
    for row in reversed(_difference_rows(values)):
        result = row[0] - result
    return result


def part_one(lines: Iterable[str]) -> int:
    """Sum of the next value of every history."""
    return sum(predict_next(history) for history in parse_histories(lines))


def part_two(lines: Iterable[str]) -> int:
    """Sum of the previous value of every history."""
    return sum(predict_previous(history) for history in parse_histories(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    solver = part_one if args.part == 1 else part_two
    print(f"The number you are looking for: {solver(lines)}")
    return 0