"""Cube games: which games are possible and how much power they need."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day_2_1"


def _parse_count(token: str) -> int | None:
    """Return the token as a non-negative integer, or None if it is not one."""
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def split_record(line: str) -> list[str]:
    """Split a game record into its words and numbers."""
    work = line.replace(" ", ",").replace(":", ",").replace(";", ",")
    work = work.replace(",,", ",")
    return work.split(",")


def is_possible(tokens: Sequence[str]) -> bool:
    """Tell whether a game fits a bag of 12 red, 13 green and 14 blue cubes."""
    for position, token in enumerate(tokens):
        count = _parse_count(token)
        if count is None or count <= 12 or position < 1:
            continue
        colour = tokens[position + 1]
        if colour == "red":
            return False
        if colour == "green" and count > 13:
            return False
        if colour == "blue" and count > 14:
            return False
    return True


def game_power(tokens: Sequence[str]) -> int:
    """Product of the largest red, green and blue counts seen in a game."""
    largest = {"red": 0, "green": 0, "blue": 0}
    for position, token in enumerate(tokens):
        count = _parse_count(token)
        if count is None or position < 2:
            continue
        colour = tokens[position + 1]
        if colour in largest and count > largest[colour]:
            largest[colour] = count
    return largest["red"] * largest["green"] * largest["blue"]


def part_one(lines: Iterable[str]) -> int:
    """Sum the ids of the games that are possible."""
    total = 0
    for line in lines:
        tokens = split_record(line)
        if is_possible(tokens):
            total += int(tokens[1])
    return total


def part_two(lines: Iterable[str]) -> int:
    """Sum the power of every game."""
    return sum(game_power(split_record(line)) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse cube games.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    solver = part_one if args.part == 1 else part_two
    print(solver(lines))
    return 0