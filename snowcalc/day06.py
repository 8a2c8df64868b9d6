"""Boat races: ways to beat the record distance."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day_6"


def distance(time: int, push_time: int) -> int:
    """Distance travelled when the button is held for ``push_time``."""
    if push_time < 0 or push_time > time:
        raise ValueError(f"push time {push_time} outside race of {time}")
    return push_time * (time - push_time)


def _values(line: str) -> list[str]:
    _, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"line has no ':' separator: {line!r}")
    return [token for token in rest.split(" ") if token]


def parse_races(lines: Sequence[str]) -> list[tuple[int, int]]:
    """Pair each race time with its record distance."""
    rows = [[int(token) for token in _values(line)] for line in lines]
    if len(rows) < 2:
        raise ValueError("expected a time line and a distance line")
    times, records = rows[0], rows[1]
    if len(records) < len(times):
        raise ValueError("fewer records than race times")
    return list(zip(times, records))


def parse_single_race(lines: Sequence[str]) -> tuple[int, int]:
    """Read each line as one number, ignoring the spaces between digits."""
    values = [int("".join(_values(line))) for line in lines]
    if len(values) < 2:
        raise ValueError("expected a time line and a distance line")
    return values[0], values[1]


def count_wins(time: int, record: int) -> int:
    """Number of push times in ``0..time`` that beat ``record``."""
    half = time // 2
    if distance(time, half) <= record:
        return 0
    low, high = 0, half
    while low < high:
        middle = (low + high) // 2
        if distance(time, middle) > record:
            high = middle
        else:
            low = middle + 1
    return time - 2 * low + 1


def part_one(lines: Sequence[str]) -> int:
    """Product of the ways to win each race."""
    return math.prod(count_wins(time, record) for time, record in parse_races(lines))


def part_two(lines: Sequence[str]) -> int:
    """Ways to win the single long race."""
    return count_wins(*parse_single_race(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count ways to win boat races.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    if args.part == 1:
        print(f"The answer is: {part_one(lines)}")
    else:
        print(part_two(lines))
    return 0