"""Camel cards: ranking hands and summing the winnings."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from snowcalc.inputs import read_lines

DEFAULT_PATH = "./data/day7"

JOKER = 1

# Hand types written as their card counts, weakest first.
_TYPE_ORDER = ("11111", "2111", "221", "311", "32", "41", "5")
_STRENGTH = {kind: rank for rank, kind in enumerate(_TYPE_ORDER)}

# How one or more jokers upgrade a hand, except for two pair.
_JOKER_UPGRADES = {
    "41": "5",
    "32": "5",
    "311": "41",
    "2111": "311",
    "11111": "2111",
    "5": "5",
}

_FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "T": 10}


@dataclass(frozen=True)
class Hand:
    """A hand of card values, its bid and its type as card counts."""

    cards: tuple[int, ...]
    bid: int
    kind: str


def _card_value(char: str, jokers: bool) -> int:
    if char in "0123456789":
        return int(char)
    if char == "J":
        return JOKER if jokers else 11
    try:
        return _FACE_VALUES[char]
    except KeyError:
        raise ValueError(f"unknown card: {char!r}") from None


def hand_type(cards: Sequence[int], jokers: bool) -> str:
    """Type of a hand as its card counts in descending order, e.g. ``"32"``.

    With ``jokers`` the cards valued 1 count as whatever makes the best hand.
    """
    counts = Counter(cards)
    kind = "".join(str(count) for count in sorted(counts.values(), reverse=True))
    if jokers and JOKER in counts:
        if kind == "221":
            kind = "32" if counts[JOKER] == 1 else "41"
        elif kind in _JOKER_UPGRADES:
            kind = _JOKER_UPGRADES[kind]
    if kind not in _STRENGTH:
        raise ValueError(f"not a five-card hand: {list(cards)}")
    return kind


def parse_hands(lines: Iterable[str], jokers: bool) -> list[Hand]:
    """Parse lines such as ``32T3K 765``."""
    hands = []
    for line in lines:
        text, sep, bid = line.partition(" ")
        if not sep:
            raise ValueError(f"hand line has no bid: {line!r}")
        cards = tuple(_card_value(char, jokers) for char in text)
        hands.append(Hand(cards, int(bid), hand_type(cards, jokers)))
    return hands


def rank_hands(hands: Iterable[Hand]) -> list[Hand]:
    """Hands from weakest to strongest: by type, then card by card."""
    return sorted(hands, key=lambda hand: (_STRENGTH[hand.kind], hand.cards))


def total_winnings(hands: Iterable[Hand]) -> int:
    """Sum of each bid times the rank of its hand."""
    return sum(rank * hand.bid for rank, hand in enumerate(rank_hands(hands), start=1))


def part_one(lines: Iterable[str]) -> int:
    """Total winnings with J as jack."""
    return total_winnings(parse_hands(lines, jokers=False))


def part_two(lines: Iterable[str]) -> int:
    """Total winnings with J as joker."""
    return total_winnings(parse_hands(lines, jokers=True))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank camel card hands.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    lines = read_lines(args.path)
    solver = part_one if args.part == 1 else part_two
    print(solver(lines))
    return 0