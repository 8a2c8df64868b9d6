"""Calibration values: first and last digit of each line."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterable, Sequence

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day_1_1"

# Words whose last letter may start another number word get that letter
# doubled first, so overlapping words such as "eightwo" both survive.
_OVERLAP_GUARDS = (
    ("one", "onee"),
    ("two", "twoo"),
    ("three", "threee"),
    ("five", "fivee"),
    ("seven", "sevenn"),
    ("eight", "eightt"),
    ("nine", "ninee"),
)

_WORD_DIGITS = (
    ("one", "1"),
    ("two", "2"),
    ("three", "3"),
    ("four", "4"),
    ("five", "5"),
    ("six", "6"),
    ("seven", "7"),
    ("eight", "8"),
    ("nine", "9"),
)


def calibration_value(line: str) -> int:
    """Join the first and last digit of ``line`` into a two-digit number.

    A line without digits gives 0.
    """
    digits = [ch for ch in line if ch in string.digits]
    if not digits:
        return 0
    return int(digits[0] + digits[-1])


def translate_number_words(line: str) -> str:
    """Replace the spelled-out digits one to nine with their numerals."""
    for word, guarded in _OVERLAP_GUARDS:
        line = line.replace(word, guarded)
    for word, digit in _WORD_DIGITS:
        line = line.replace(word, digit)
    return line


def part_one(lines: Iterable[str]) -> int:
    """Sum the calibration values of all lines."""
    return sum(calibration_value(line) for line in lines)


def part_two(lines: Iterable[str]) -> int:
    """Sum the calibration values, counting spelled-out digits too."""
    return sum(calibration_value(translate_number_words(line)) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    solver = part_one if args.part == 1 else part_two
    print(solver(lines))
    return 0