"""Seed almanac: following seeds through a chain of range maps."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day_5"

MAP_NAMES = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)

MapEntry = tuple[int, int, int]


@dataclass(frozen=True)
class Almanac:
    """Seeds and the seven maps, each entry ``(destination, source, length)``.

    The entries of every map are sorted by their source start.
    """

    seeds: tuple[int, ...]
    maps: tuple[tuple[MapEntry, ...], ...]


def _parse_entry(line: str) -> MapEntry:
    parts = line.split()
    if len(parts) < 3:
        raise ValueError(f"map line needs three numbers: {line!r}")
    return int(parts[0]), int(parts[1]), int(parts[2])


def parse_almanac(lines: Iterable[str]) -> Almanac:
    """Parse the seeds line followed by blank-line separated maps.

    The first line of each map block is its title and is skipped.
    """
    rows = list(lines)
    if not rows:
        raise ValueError("almanac is empty")
    _, sep, rest = rows[0].partition(":")
    if not sep:
        raise ValueError(f"seeds line has no ':' separator: {rows[0]!r}")
    seeds = tuple(int(token) for token in rest.split())

    blocks: list[list[MapEntry]] = []
    current: list[MapEntry] | None = None
    for line in rows[1:]:
        if not line.strip():
            if current is not None:
                blocks.append(current)
                current = None
            continue
        if current is None:
            current = []
            continue
        current.append(_parse_entry(line))
    if current is not None:
        blocks.append(current)

    if len(blocks) > len(MAP_NAMES):
        raise ValueError(f"almanac holds {len(blocks)} maps, at most {len(MAP_NAMES)}")
    blocks.extend([] for _ in range(len(MAP_NAMES) - len(blocks)))
    maps = tuple(tuple(sorted(block, key=lambda entry: entry[1])) for block in blocks)
    return Almanac(seeds, maps)


def map_lookup(value: int, mapping: Iterable[MapEntry], inclusive_end: bool) -> int:
    """Translate ``value`` through one map; unmapped values stay as they are.

    With ``inclusive_end`` a range also covers the value just past its
    last source number.
    """
    for dest, source, length in mapping:
        last = source + length if inclusive_end else source + length - 1
        if source <= value <= last:
            return value + (dest - source)
    return value


def seed_ranges(seeds: Sequence[int]) -> list[tuple[int, int]]:
    """Pair the seed numbers up as ``(start, length)`` ranges."""
    if len(seeds) % 2:
        raise ValueError("seed list has an odd number of values")
    it = iter(seeds)
    return list(zip(it, it))


def _location(almanac: Almanac, seed: int, inclusive_end: bool) -> int:
    value = seed
    for mapping in almanac.maps:
        value = map_lookup(value, mapping, inclusive_end)
    return value


def lowest_location(almanac: Almanac) -> int:
    """Lowest location reached by any single seed."""
    if not almanac.seeds:
        raise ValueError("almanac lists no seeds")
    return min(_location(almanac, seed, True) for seed in almanac.seeds)


def _map_intervals(
    intervals: list[tuple[int, int]], mapping: Iterable[MapEntry]
) -> list[tuple[int, int]]:
    """Translate half-open intervals through a map, first matching entry wins."""
    mapped: list[tuple[int, int]] = []
    pending = intervals
    for dest, source, length in mapping:
        end = source + length
        shift = dest - source
        remaining: list[tuple[int, int]] = []
        for start, stop in pending:
            low, high = max(start, source), min(stop, end)
            if low < high:
                mapped.append((low + shift, high + shift))
                if start < low:
                    remaining.append((start, low))
                if high < stop:
                    remaining.append((high, stop))
            else:
                remaining.append((start, stop))
        pending = remaining
    return mapped + pending


def lowest_location_in_ranges(almanac: Almanac) -> int:
    """Lowest location reached by any seed of the seed ranges."""
    intervals = [
        (start, start + length)
        for start, length in seed_ranges(almanac.seeds)
        if length > 0
    ]
    if not intervals:
        raise ValueError("almanac lists no seeds")
    for mapping in almanac.maps:
        intervals = _map_intervals(intervals, mapping)
    return min(start for start, _ in intervals)


def part_one(lines: Iterable[str]) -> int:
    """Lowest location of the listed seeds."""
    return lowest_location(parse_almanac(lines))


def part_two(lines: Iterable[str]) -> int:
    """Lowest location of the seed ranges."""
    return lowest_location_in_ranges(parse_almanac(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the closest seed location.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    solver = part_one if args.part == 1 else part_two
    print(f"{solver(lines)} is the closest location!")
    return 0