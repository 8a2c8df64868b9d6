import pytest

from snowcalc.inputs import read_lines


def test_reads_lines_without_endings(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("first\nsecond\nthird\n", encoding="utf-8")
    assert read_lines(path) == ["first", "second", "third"]


def test_missing_final_newline(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("alpha\nbeta", encoding="utf-8")
    assert read_lines(path) == ["alpha", "beta"]


def test_carriage_returns_are_stripped(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"one\r\ntwo\r\n")
    assert read_lines(path) == ["one", "two"]


def test_blank_lines_are_kept(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("seeds\n\nmap\n", encoding="utf-8")
    assert read_lines(path) == ["seeds", "", "map"]


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert read_lines(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.txt")