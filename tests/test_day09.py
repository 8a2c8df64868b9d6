import pytest

from snowcalc.day09 import (
    main,
    parse_histories,
    part_one,
    part_two,
    predict_next,
    predict_previous,
)

HISTORIES = [
    [0, 3, 6, 9, 12, 15],
    [1, 3, 6, 10, 15, 21],
    [10, 13, 16, 21, 30, 45],
]
LINES = [" ".join(str(value) for value in history) for history in HISTORIES]


@pytest.mark.parametrize(
    "history, expected",
    [
        ([0, 3, 6, 9, 12, 15], 18),
        ([1, 3, 6, 10, 15, 21], 28),
        ([10, 13, 16, 21, 30, 45], 68),
    ],
)
def test_predict_next(history, expected):
    assert predict_next(history) == expected


@pytest.mark.parametrize(
    "history, expected",
    [
        ([0, 3, 6, 9, 12, 15], -3),
        ([1, 3, 6, 10, 15, 21], 0),
        ([10, 13, 16, 21, 30, 45], 5),
    ],
)
def test_predict_previous(history, expected):
    assert predict_previous(history) == expected


@pytest.mark.parametrize("history", HISTORIES + [[-4, -1, 7, 22, 46]])
def test_previous_is_next_of_reversed(history):
    assert predict_previous(history) == predict_next(history[::-1])


def test_constant_history():
    assert predict_next([5, 5, 5]) == 5
    assert predict_previous([5, 5, 5]) == 5
    assert predict_next([3, 3]) == 3


def test_parse_histories():
    assert parse_histories(LINES) == HISTORIES
    assert parse_histories(["-1  2 -3"]) == [[-1, 2, -3]]


def test_parse_histories_rejects_words():
    with pytest.raises(ValueError):
        parse_histories(["1 two 3"])


def test_too_short_history():
    with pytest.raises(ValueError):
        predict_next([7])


def test_history_that_never_settles():
    with pytest.raises(ValueError):
        predict_next([1, 2])


def test_parts():
    assert part_one(LINES) == 18 + 28 + 68
    assert part_two(LINES) == -3 + 0 + 5


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "histories.txt"
    path.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip().endswith(str(part_one(LINES)))
    assert main([str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out.strip().endswith(str(part_two(LINES)))