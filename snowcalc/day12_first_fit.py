"""Spring records: a left-leaning first fit of the groups and a check for slack."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from snowcalc.day12_arrangements import parse_line
from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day12T"
_MAX_GROUPS = 10
_DIGITS = frozenset("0123456789")
_PLACEABLE = frozenset("?#")


@dataclass(frozen=True)
class PlacedGroup:
    """A group of damaged springs: its index, length and first cell."""

    id: int
    size: int
    start: int

    @property
    def end(self) -> int:
        """The cell just past the group."""
        return self.start + self.size


@dataclass(frozen=True)
class FirstFit:
    """A spring record with its groups put in the first spots that fit.

    ``arrangement`` is the record with each placed group's cells replaced
    by the group's index. Groups that found no spot are left out of
    ``groups``.
    """

    springs: str
    sizes: tuple[int, ...]
    arrangement: str
    groups: tuple[PlacedGroup, ...]


def _is_digit_at(cells: Sequence[str], index: int) -> bool:
    return 0 <= index < len(cells) and cells[index] in _DIGITS


def _fits(cells: Sequence[str], start: int, size: int) -> bool:
    end = start + size
    if not all(cell in _PLACEABLE for cell in cells[start:end]):
        return False
    if end < len(cells) and cells[end] == "#":
        return False
    if start == 0:
        return not _is_digit_at(cells, end)
    return not (_is_digit_at(cells, start - 1) or _is_digit_at(cells, start + 1))


def parse_maps(springs: str, sizes: Iterable[int]) -> tuple[str, list[PlacedGroup]]:
    """Place each group, in order, at the leftmost spot that passes the checks.

    A spot must hold only '?' or '#', must not be followed by '#', and must
    not sit next to a group already placed.
    """
    sizes = tuple(sizes)
    if len(sizes) > _MAX_GROUPS:
        raise ValueError(f"at most {_MAX_GROUPS} groups can be placed")
    cells = list(springs)
    bounds = len(cells)
    groups: list[PlacedGroup] = []
    for group_id, size in enumerate(sizes):
        if size < 1:
            raise ValueError(f"group sizes must be positive: {size}")
        if size > bounds:
            raise ValueError(f"group {group_id} of size {size} is longer than {springs!r}")
        for start in range(bounds - size + 1):
            if _fits(cells, start, size):
                cells[start:start + size] = str(group_id) * size
                groups.append(PlacedGroup(group_id, size, start))
                break
    return "".join(cells), groups


def build_first_fit(line: str) -> FirstFit:
    """The first fit of a record line such as ``???.### 1,1,3``."""
    springs, sizes = parse_line(line)
    arrangement, groups = parse_maps(springs, sizes)
    return FirstFit(springs, tuple(sizes), arrangement, tuple(groups))


def has_alternative(first_fit: FirstFit) -> bool:
    """Whether some free group could step one cell to the right.

    Groups whose first or last cell is a known damaged spring are locked
    and not considered. Groups are checked from the right.
    """
    springs = first_fit.springs
    arrangement = first_fit.arrangement
    bounds = len(springs)
    free = [
        group
        for group in reversed(first_fit.groups)
        if springs[group.start] != "#" and springs[group.end - 1] != "#"
    ]
    for group in free:
        if group.end < bounds:
            if arrangement[group.end] == "?" and not _is_digit_at(arrangement, group.end + 1):
                return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="First fit of spring groups.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    began = time.perf_counter()
    for line in read_lines(args.path):
        has_alternative(build_first_fit(line))
    print(f"program runtime: {int((time.perf_counter() - began) * 1_000_000)}")
    return 0