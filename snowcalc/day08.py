"""Desert map: following left/right instructions through a node network."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import cycle, islice

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day8"
DEFAULT_START = "VPA"
DEFAULT_END = "GGZ "

_MIN_NODE_LINE = 15


@dataclass(frozen=True)
class Guide:
    """The instruction string and each node's left and right neighbours."""

    directions: str
    nodes: dict[str, tuple[str, str]]


def parse_guide(lines: Iterable[str]) -> Guide:
    """Parse the instruction line, a blank line and ``AAA = (BBB, CCC)`` lines."""
    rows = list(lines)
    if not rows:
        raise ValueError("guide is empty")
    directions = rows[0]
    if not directions:
        raise ValueError("guide has no directions")
    nodes: dict[str, tuple[str, str]] = {}
    for line in rows[2:]:
        if len(line) < _MIN_NODE_LINE:
            raise ValueError(f"node line too short: {line!r}")
        nodes[line[0:3]] = (line[7:10], line[12:15])
    return Guide(directions, nodes)


def _walk(guide: Guide, start: str) -> Iterator[tuple[str, int]]:
    """Yield each position reached and the index of the next direction."""
    if not guide.directions:
        raise ValueError("guide has no directions")
    count = len(guide.directions)
    position = start
    for index, direction in cycle(enumerate(guide.directions)):
        try:
            left, right = guide.nodes[position]
        except KeyError:
            raise KeyError(f"unknown node: {position!r}") from None
        position = left if direction == "L" else right
        yield position, (index + 1) % count


def arrivals(guide: Guide, start: str, end: str) -> Iterator[tuple[int, int]]:
    """Endlessly yield ``(steps, steps_since_last)`` for each arrival at ``end``."""
    since = 0
    for steps, (position, _) in enumerate(_walk(guide, start), start=1):
        since += 1
        if position == end:
            yield steps, since
            since = 0


def starting_positions(guide: Guide) -> list[str]:
    """Nodes whose name ends in 'A'."""
    return [node for node in guide.nodes if node.endswith("A")]


def path_length(guide: Guide, start: str) -> int:
    """Steps from ``start`` until a node whose name ends in 'Z' is reached."""
    seen: set[tuple[str, int]] = set()
    for steps, (position, index) in enumerate(_walk(guide, start), start=1):
        if position.endswith("Z"):
            return steps
        state = (position, index)
        if state in seen:
            raise ValueError(f"no node ending in 'Z' is reachable from {start!r}")
        seen.add(state)
    raise ValueError("guide has no directions")


def prime_factors(number: int) -> list[int]:
    """Distinct prime factors of ``number``, smallest first."""
    if number < 1:
        raise ValueError("number must be at least 1")
    factors: list[int] = []
    if number % 2 == 0:
        factors.append(2)
        while number % 2 == 0:
            number //= 2
    divisor = 3
    while divisor * divisor <= number:
        if number % divisor == 0:
            factors.append(divisor)
            while number % divisor == 0:
                number //= divisor
        divisor += 2
    if number > 1:
        factors.append(number)
    return factors


def combined_cycle(lengths: Iterable[int]) -> int:
    """Product of every distinct prime factor of the given path lengths."""
    factors: set[int] = set()
    for length in lengths:
        factors.update(prime_factors(length))
    return math.prod(factors)


def part_two(lines: Iterable[str]) -> int:
    """Steps until every path from an 'A' node is on a 'Z' node at once."""
    guide = parse_guide(lines)
    return combined_cycle(path_length(guide, start) for start in starting_positions(guide))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk the desert map.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--start", default=DEFAULT_START)
    parser.add_argument("--end", default=DEFAULT_END)
    parser.add_argument("--count", type=int, default=None)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    if args.part == 1:
        guide = parse_guide(lines)
        for steps, since in islice(arrivals(guide, args.start, args.end), args.count):
            print(f"{steps}, {since}")
    else:
        began = time.perf_counter()
        solution = part_two(lines)
        elapsed = int((time.perf_counter() - began) * 1000)
        print(
            f"Your solution is: {solution}, and took {elapsed} milliseconds to complete"
        )
    return 0