import pytest

from snowcalc.day03 import (
    gear_ratios,
    is_symbol,
    main,
    neighbours,
    number_span,
    part_numbers,
    part_one,
    part_two,
)

EXAMPLE = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


@pytest.mark.parametrize("char", ["*", "#", "+", "$", "/", "="])
def test_symbols(char):
    assert is_symbol(char) is True


@pytest.mark.parametrize("char", [".", "0", "5", "9"])
def test_not_symbols(char):
    assert is_symbol(char) is False


def test_neighbours_invariants():
    row_len, size = 4, 12
    for index in range(size):
        around = neighbours(index, row_len, size)
        assert index not in around
        assert around == sorted(around)
        row, col = divmod(index, row_len)
        for other in around:
            assert 0 <= other < size
            o_row, o_col = divmod(other, row_len)
            assert abs(o_row - row) <= 1 and abs(o_col - col) <= 1
            assert index in neighbours(other, row_len, size)


@pytest.mark.parametrize(
    "index, expected_count",
    [(0, 3), (3, 3), (8, 3), (11, 3), (1, 5), (4, 5), (7, 5), (9, 5), (5, 8)],
)
def test_neighbour_counts(index, expected_count):
    assert len(neighbours(index, 4, 12)) == expected_count


def test_neighbours_out_of_range():
    with pytest.raises(ValueError):
        neighbours(12, 4, 12)
    with pytest.raises(ValueError):
        neighbours(-1, 4, 12)


def test_number_span_whole_number():
    cells = "".join(EXAMPLE)
    assert number_span(cells, 1, 10) == range(0, 3)
    assert number_span(cells, 0, 10) == range(0, 3)
    assert number_span(cells, 2, 10) == range(0, 3)


def test_number_span_stops_at_row_end():
    cells = "1234"
    assert number_span(cells, 1, 2) == range(0, 2)
    assert number_span(cells, 2, 2) == range(2, 4)


def test_number_span_rejects_non_digit():
    with pytest.raises(ValueError):
        number_span("1.2", 1, 3)


def test_part_numbers_example():
    found = part_numbers(EXAMPLE)
    assert 114 not in found
    assert 58 not in found
    assert found[0] == 467
    assert 35 in found and 633 in found and 598 in found


def test_numbers_split_across_rows():
    assert part_numbers(["..12", "34*."]) == [12, 34]


def test_example_part_one():
    assert part_one(EXAMPLE) == 4361


def test_example_gear_ratios():
    assert sorted(gear_ratios(EXAMPLE)) == sorted([467 * 35, 755 * 598])


def test_example_part_two():
    assert part_two(EXAMPLE) == 467835


def test_gear_in_bottom_row_sees_both_diagonals():
    assert gear_ratios(["1.2", ".*."]) == [1 * 2]


def test_gear_touching_one_number_twice_is_not_a_gear():
    assert gear_ratios(["123", ".*."]) == []


def test_gear_touching_three_numbers_is_not_a_gear():
    assert gear_ratios(["1.2", ".*.", ".3."]) == []


def test_empty_schematic():
    assert part_one([]) == 0
    assert part_two([]) == 0


def test_ragged_schematic_rejected():
    with pytest.raises(ValueError):
        part_one(["...", ".."])


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "schematic.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert str(part_one(EXAMPLE)) in capsys.readouterr().out
    assert main([str(path), "--part", "2"]) == 0
    assert str(part_two(EXAMPLE)) in capsys.readouterr().out