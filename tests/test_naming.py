from __future__ import annotations

from pathlib import Path

import pytest

from file_tools.naming import piece_index, piece_name


@pytest.mark.parametrize(
    ("source", "index", "expected"),
    [
        ("test.txt", 0, "test.000.txt"),
        ("test.txt", 1, "test.001.txt"),
        ("test.txt", 42, "test.042.txt"),
        ("test.txt", 999, "test.999.txt"),
        ("test.txt", 1000, "test.1000.txt"),
        ("archive.tar.gz", 3, "archive.tar.003.gz"),
        ("data", 0, "data.000"),
        ("data", 12345, "data.12345"),
        ("name.", 0, "name.000"),
        (".bashrc", 0, ".000.bashrc"),
        ("name..", 1, "name..001"),
    ],
)
def test_piece_name(source, index, expected):
    assert piece_name(source, index) == Path(expected)


def test_piece_name_keeps_directory():
    assert piece_name(Path("/data/in/report.csv"), 7) == Path("/data/in/report.007.csv")


def test_piece_name_ignores_dots_in_directories():
    assert piece_name(Path("/data/v1.2/blob"), 0) == Path("/data/v1.2/blob.000")


def test_piece_name_rejects_negative_index():
    with pytest.raises(ValueError):
        piece_name("test.txt", -1)


def test_piece_names_do_not_collide():
    names = {piece_name("test.txt", index) for index in range(2500)}
    assert len(names) == 2500


def test_piece_name_is_deterministic():
    assert piece_name("a/b.bin", 5) == piece_name("a/b.bin", 5)


@pytest.mark.parametrize(
    ("source", "candidate", "expected"),
    [
        ("test.txt", "test.000.txt", 0),
        ("test.txt", "test.017.txt", 17),
        ("test.txt", "test.1000.txt", 1000),
        ("data", "data.004", 4),
        (".bashrc", ".002.bashrc", 2),
        (".bashrc", ".bashrc", None),
        ("test.txt", "test.txt", None),
        ("test.txt", "test.01.txt", None),
        ("test.txt", "test.0001.txt", None),
        ("test.txt", "test.abc.txt", None),
        ("test.txt", "other.000.txt", None),
        ("test.txt", "test.000.csv", None),
        ("data", "data.000.bak", None),
    ],
)
def test_piece_index(source, candidate, expected):
    assert piece_index(source, candidate) == expected


def test_piece_index_inverts_piece_name():
    for index in (0, 9, 10, 999, 1000, 54321):
        assert piece_index("x/report.csv", piece_name("x/report.csv", index)) == index
