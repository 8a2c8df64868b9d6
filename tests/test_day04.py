import pytest

from snowcalc.day04 import (
    ScratchCard,
    card_points,
    count_cards,
    main,
    parse_card,
    part_one,
    part_two,
)

EXAMPLE = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


def test_parse_card_sections():
    card = parse_card("Card 9: 1 2 | 3  4 5")
    assert card.winning == frozenset({1, 2})
    assert sorted(card.numbers) == [3, 4, 5]


def test_wins_counts_matches():
    card = parse_card(EXAMPLE[0])
    assert card.wins() == 4


def test_no_matches():
    assert parse_card(EXAMPLE[4]).wins() == 0


@pytest.mark.parametrize("wins", [0, 1])
def test_points_for_few_wins(wins):
    assert card_points(wins) == wins


@pytest.mark.parametrize("wins", [1, 2, 3, 7])
def test_points_double(wins):
    assert card_points(wins + 1) == 2 * card_points(wins)


def test_cards_without_wins_keep_count():
    cards = [ScratchCard(frozenset({1}), (2, 3)) for _ in range(5)]
    assert count_cards(cards) == len(cards)


def test_part_one_example():
    assert part_one(EXAMPLE) == 13


def test_part_two_example():
    assert part_two(EXAMPLE) == 30


def test_missing_bar_raises():
    with pytest.raises(ValueError):
        parse_card("Card 1: 1 2 3")


def test_missing_colon_raises():
    with pytest.raises(ValueError):
        parse_card("Card 1 1 2 | 3")


def test_number_out_of_range_raises():
    with pytest.raises(ValueError):
        parse_card("Card 1: 100 | 3")


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "cards.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path), "--part", "2"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == f"total amount of scratchcards {part_two(EXAMPLE)}"