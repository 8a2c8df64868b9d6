"""Engine schematic: part numbers next to symbols and gear ratios."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Iterable, Sequence

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day_3_1"

_DIGITS = frozenset("0123456789")
_NUMBER = re.compile(r"[0-9]+")
_GEAR = "*"

# Neighbour offsets in reading order: the row above, the same row, the row below.
_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def is_symbol(char: str) -> bool:
    """Tell whether a schematic cell holds a symbol (neither '.' nor a digit)."""
    return char != "." and char not in _DIGITS


def neighbours(index: int, row_len: int, size: int) -> list[int]:
    """Indices around ``index`` in a flattened grid, in reading order.

    Cells outside the grid are left out, so corners have three neighbours
    and edges five.
    """
    if row_len < 1:
        raise ValueError("row length must be at least 1")
    if not 0 <= index < size:
        raise ValueError(f"index {index} outside grid of {size} cells")
    row, col = divmod(index, row_len)
    result = []
    for d_row, d_col in _OFFSETS:
        r, c = row + d_row, col + d_col
        if r < 0 or not 0 <= c < row_len:
            continue
        candidate = r * row_len + c
        if candidate < size:
            result.append(candidate)
    return result


def number_span(cells: str, index: int, row_len: int) -> range:
    """Indices of the whole number that the digit at ``index`` belongs to.

    A number never continues past the end of its row.
    """
    if row_len < 1:
        raise ValueError("row length must be at least 1")
    if not 0 <= index < len(cells):
        raise IndexError(f"index {index} out of range")
    if cells[index] not in _DIGITS:
        raise ValueError(f"cell {index} is not a digit: {cells[index]!r}")
    row_start = index - index % row_len
    row_end = min(row_start + row_len, len(cells))
    start = index
    while start > row_start and cells[start - 1] in _DIGITS:
        start -= 1
    end = index + 1
    while end < row_end and cells[end] in _DIGITS:
        end += 1
    return range(start, end)


def _grid(lines: Iterable[str]) -> tuple[list[str], str, int]:
    rows = list(lines)
    if not rows:
        return rows, "", 0
    row_len = len(rows[0])
    if any(len(row) != row_len for row in rows):
        raise ValueError("schematic rows differ in length")
    return rows, "".join(rows), row_len


def part_numbers(lines: Iterable[str]) -> list[int]:
    """Numbers that touch a symbol, in reading order."""
    rows, cells, row_len = _grid(lines)
    if row_len == 0:
        return []
    size = len(cells)
    found = []
    for row_index, row in enumerate(rows):
        base = row_index * row_len
        for match in _NUMBER.finditer(row):
            span = range(base + match.start(), base + match.end())
            if any(
                is_symbol(cells[other])
                for cell in span
                for other in neighbours(cell, row_len, size)
            ):
                found.append(int(match.group()))
    return found


def gear_ratios(lines: Iterable[str]) -> list[int]:
    """Products of the two numbers next to each '*' that touches exactly two."""
    _, cells, row_len = _grid(lines)
    if row_len == 0:
        return []
    size = len(cells)
    ratios = []
    for index, char in enumerate(cells):
        if char != _GEAR:
            continue
        spans: list[range] = []
        for other in neighbours(index, row_len, size):
            if cells[other] not in _DIGITS:
                continue
            span = number_span(cells, other, row_len)
            if span not in spans:
                spans.append(span)
        if len(spans) == 2:
            ratios.append(math.prod(int(cells[s.start:s.stop]) for s in spans))
    return ratios


def part_one(lines: Iterable[str]) -> int:
    """Sum of all part numbers."""
    return sum(part_numbers(lines))


def part_two(lines: Iterable[str]) -> int:
    """Sum of all gear ratios."""
    return sum(gear_ratios(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read an engine schematic.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    if args.part == 1:
        print(f"The sum of all parts: {part_one(lines)}")
    else:
        print(f"The value accumulator got {part_two(lines)}")
    return 0