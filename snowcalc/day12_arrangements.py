"""Spring records: counting arrangements by sliding groups left to right."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day12TT"
_MAX_GROUPS = 10


@dataclass(frozen=True)
class SpringGroup:
    """A run of damaged springs: its index, length and first cell."""

    id: int
    size: int
    start: int


def _render(springs: str, sizes: Sequence[int], starts: Sequence[int]) -> str:
    """Write each group's index into its cells of the spring record."""
    if len(sizes) > _MAX_GROUPS:
        raise ValueError(f"at most {_MAX_GROUPS} groups can be drawn")
    cells = list(springs)
    for group_id, (size, start) in enumerate(zip(sizes, starts)):
        end = start + size
        if start < 0 or end > len(cells):
            raise ValueError(f"group {group_id} does not fit in {springs!r}")
        cells[start:end] = str(group_id) * size
    return "".join(cells)


def _is_valid(springs: str, arrangement: str) -> bool:
    """No damaged spring left uncovered and no operational one covered."""
    if "#" in arrangement:
        return False
    return all(
        placed == "." for original, placed in zip(springs, arrangement) if original == "."
    )


@dataclass
class ConditionMap:
    """A spring record with a placement of its groups."""

    springs: str
    groups: list[SpringGroup]
    arrangement: str = field(init=False)

    def __post_init__(self) -> None:
        self.arrangement = self.build_arrangement()

    def build_arrangement(self) -> str:
        """The record with each group's cells replaced by its index."""
        return _render(
            self.springs,
            [group.size for group in self.groups],
            [group.start for group in self.groups],
        )

    def is_valid(self) -> bool:
        """Whether the current arrangement fits the record."""
        return _is_valid(self.springs, self.arrangement)

    def arrangements(self) -> Iterator[str]:
        """Yield every valid arrangement, starting from the current placement."""
        if not self.groups:
            raise ValueError("a record needs at least one group")
        sizes = [group.size for group in self.groups]
        starts = [group.start for group in self.groups]
        bounds = len(self.springs)
        last = len(sizes) - 1

        if self.is_valid():
            yield self.arrangement

        active = last
        active_start = starts[last]
        while True:
            # Slide the last group to the right end.
            head = active_start + sizes[active]
            active_start += 1
            while head < bounds:
                starts[active] = active_start
                arrangement = _render(self.springs, sizes, starts)
                if _is_valid(self.springs, arrangement):
                    yield arrangement
                active_start += 1
                head += 1

            # Find the nearest earlier group that can still step right.
            while True:
                if active == 0:
                    return
                active -= 1
                active_start = starts[active]
                limit = starts[active + 1] - 1
                if active_start + sizes[active] < limit:
                    active_start += 1
                    starts[active] = active_start
                    break

            # Pack the following groups up behind it.
            while True:
                tail = active_start + sizes[active] - 1
                active += 1
                if active == last:
                    active_start = tail + 1
                    starts[active] = active_start
                    break
                active_start = tail + 2
                starts[active] = active_start


def parse_line(line: str) -> tuple[str, tuple[int, ...]]:
    """Split a line such as ``???.### 1,1,3`` into the record and group sizes."""
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"line needs a record and group sizes: {line!r}")
    sizes = tuple(int(token) for token in parts[1].split(","))
    if any(size < 1 for size in sizes):
        raise ValueError(f"group sizes must be positive: {parts[1]!r}")
    return parts[0], sizes


def initial_groups(sizes: Iterable[int]) -> list[SpringGroup]:
    """Groups packed to the left with one cell between neighbours."""
    groups: list[SpringGroup] = []
    start = 0
    for group_id, size in enumerate(sizes):
        groups.append(SpringGroup(group_id, size, start))
        start += size + 1
    return groups


def _condition_map(line: str) -> ConditionMap:
    springs, sizes = parse_line(line)
    return ConditionMap(springs, initial_groups(sizes))


def count_arrangements(line: str) -> int:
    """Number of valid arrangements for one record line."""
    return sum(1 for _ in _condition_map(line).arrangements())


def part_one(lines: Iterable[str]) -> int:
    """Total number of valid arrangements over all lines."""
    return sum(count_arrangements(line) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count spring arrangements.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    began = time.perf_counter()
    total = 0
    for line in read_lines(args.path):
        for arrangement in _condition_map(line).arrangements():
            print(arrangement)
            total += 1
    print(f"There is a total of {total} valid permutation(s) in the data set")
    print(f"program runtime: {int((time.perf_counter() - began) * 1_000_000)}")
    return 0