"""Spring records split into fragments, with a first placement of the groups."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from snowcalc.day12_arrangements import parse_line
from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day12TT"
_FOLDS = 5

Position = tuple[int, int]


@dataclass(frozen=True)
class Placement:
    """A group of damaged springs placed at ``(fragment, cell)``."""

    id: int
    size: int
    start: Position

    @property
    def cells(self) -> range:
        """Cells of its fragment that the group covers."""
        return range(self.start[1], self.start[1] + self.size)

    def covers(self, position: Position) -> bool:
        """Whether the group covers the given ``(fragment, cell)``."""
        fragment, cell = position
        return fragment == self.start[0] and cell in self.cells


@dataclass(frozen=True)
class Constellation:
    """One placement of every group within the fragments of a record."""

    fragments: tuple[str, ...]
    placements: tuple[Placement, ...]
    freedoms: int = 1


def fragments(springs: str) -> list[str]:
    """Runs of the record between operational springs ('.'), empty runs left out."""
    return [part for part in springs.split(".") if part]


def hash_positions(fragment_list: Sequence[str]) -> list[Position]:
    """``(fragment, cell)`` of every known damaged spring ('#')."""
    return [
        (index, cell)
        for index, fragment in enumerate(fragment_list)
        for cell, char in enumerate(fragment)
        if char == "#"
    ]


def expand(springs: str, sizes: Iterable[int]) -> tuple[str, tuple[int, ...]]:
    """Unfold a record: five copies joined by '?', and the sizes five times over."""
    sizes = tuple(sizes)
    return "?".join([springs] * _FOLDS), sizes * _FOLDS


def first_placement(fragment_list: Sequence[str], sizes: Iterable[int]) -> list[Placement]:
    """Put each group in the first spot that fits after the group before it.

    Groups in the same fragment keep one cell between them.
    """
    placements: list[Placement] = []
    fragment_index, cell = 0, 0
    for group_id, size in enumerate(sizes):
        if size < 1:
            raise ValueError(f"group sizes must be positive: {size}")
        if placements:
            last = placements[-1]
            fragment_index, cell = last.start[0], last.start[1] + last.size + 1
        while True:
            if fragment_index >= len(fragment_list):
                raise ValueError(f"group {group_id} of size {size} does not fit")
            if cell + size <= len(fragment_list[fragment_index]):
                break
            fragment_index, cell = fragment_index + 1, 0
        placements.append(Placement(group_id, size, (fragment_index, cell)))
    return placements


def open_hashes(
    fragment_list: Sequence[str], placements: Iterable[Placement]
) -> list[Position]:
    """Damaged springs that no group covers."""
    placements = list(placements)
    return [
        position
        for position in hash_positions(fragment_list)
        if not any(placement.covers(position) for placement in placements)
    ]


def render(fragment_list: Sequence[str], placements: Iterable[Placement]) -> list[str]:
    """The fragments with every covered cell drawn as 'X'."""
    cells = [list(fragment) for fragment in fragment_list]
    for placement in placements:
        fragment_index = placement.start[0]
        if not 0 <= fragment_index < len(cells):
            raise ValueError(f"group {placement.id} lies outside the fragments")
        row = cells[fragment_index]
        if placement.start[1] < 0 or placement.cells.stop > len(row):
            raise ValueError(f"group {placement.id} does not fit its fragment")
        for cell in placement.cells:
            row[cell] = "X"
    return ["".join(row) for row in cells]


def first_constellation(line: str) -> Constellation:
    """The first placement of the groups of a record line."""
    springs, sizes = parse_line(line)
    parts = tuple(fragments(springs))
    return Constellation(parts, tuple(first_placement(parts, sizes)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Place spring groups in fragments.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    began = time.perf_counter()
    total = 0
    for line in read_lines(args.path):
        constellation = first_constellation(line)
        for fragment in constellation.fragments:
            print(list(fragment))
        uncovered = open_hashes(constellation.fragments, constellation.placements)
        if uncovered:
            print("Not a valid constellation")
            print(uncovered)
        drawn = render(constellation.fragments, constellation.placements)
        print("".join(f"{fragment}  " for fragment in drawn))
        total += constellation.freedoms
    print(f"There are a total of {total} valid permutations in the data set")
    print(f"program runtime: {int((time.perf_counter() - began) * 1_000_000)}")
    return 0