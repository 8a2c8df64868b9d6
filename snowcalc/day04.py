"""Scratchcards: matching numbers, points and won copies."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day_4"
_MAX_NUMBER = 99


@dataclass(frozen=True)
class ScratchCard:
    """The winning numbers of a card and the numbers it holds."""

    winning: frozenset[int]
    numbers: tuple[int, ...]

    def wins(self) -> int:
        """Number of held numbers that are winning numbers."""
        return sum(1 for number in self.numbers if number in self.winning)


def _parse_numbers(text: str) -> list[int]:
    numbers = [int(token) for token in text.split(" ") if token]
    for number in numbers:
        if not 0 <= number <= _MAX_NUMBER:
            raise ValueError(f"card number out of range: {number}")
    return numbers


def parse_card(line: str) -> ScratchCard:
    """Parse a line such as ``Card 1: 41 48 | 83 86``."""
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"card line has no ':' separator: {line!r}")
    body = parts[1]
    if "|" not in body:
        raise ValueError(f"card line has no '|' separator: {line!r}")
    sections = body.split("|")
    winning = _parse_numbers(sections[0])
    numbers = _parse_numbers(sections[-1])
    return ScratchCard(frozenset(winning), tuple(numbers))


def card_points(wins: int) -> int:
    """Points for a card: 1 for the first match, doubled for each further one."""
    if wins <= 1:
        return wins
    return 1 << (wins - 1)


def count_cards(cards: Sequence[ScratchCard]) -> int:
    """Total cards held once every card has won copies of the cards after it."""
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        for offset in range(1, card.wins() + 1):
            copies[index + offset] += copies[index]
    return sum(copies)


def part_one(lines: Iterable[str]) -> int:
    """Sum the points of all cards."""
    return sum(card_points(parse_card(line).wins()) for line in lines)


def part_two(lines: Iterable[str]) -> int:
    """Count all cards, originals and copies."""
    return count_cards([parse_card(line) for line in lines])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    if args.part == 1:
        print(f"You win: {part_one(lines)} points!")
    else:
        print(f"total amount of scratchcards {part_two(lines)}")
    return 0