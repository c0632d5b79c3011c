import pytest
from inline_snapshot import snapshot

from bogglesolver.display import format_columns, format_grid, sort_words


def test_format_grid():
    assert format_grid("qadfetriihkriflv", 4, 4) == snapshot(
        """\
+---+---+---+---+
| Qu| A | D | F |
+---+---+---+---+
| E | T | R | I |
+---+---+---+---+
| I | H | K | R |
+---+---+---+---+
| I | F | L | V |
+---+---+---+---+\
"""
    )


def test_format_grid_not_square():
    assert format_grid("abcdef", 3, 2).splitlines() == [
        "+---+---+---+",
        "| A | B | C |",
        "+---+---+---+",
        "| D | E | F |",
        "+---+---+---+",
    ]


def test_sort_words():
    words = {"quad", "fir", "rif", "tea", "quilts"}
    assert sort_words(words) == ["fir", "quad", "quilts", "rif", "tea"]
    assert sort_words(words, "longest") == ["quilts", "quad", "fir", "rif", "tea"]
    assert sort_words(words, "shortest") == ["fir", "rif", "tea", "quad", "quilts"]
    with pytest.raises(ValueError):
        sort_words(words, "random")


def test_format_columns():
    assert format_columns(["a", "b", "c", "d", "e"], column_width=2) == "a  b  c  d\ne"
    assert format_columns([]) == ""
    lines = format_columns([f"word{i}" for i in range(6)], num_columns=3).splitlines()
    assert lines == [
        "word0" + " " * 14 + "word1" + " " * 14 + "word2",
        "word3" + " " * 14 + "word4" + " " * 14 + "word5",
    ]
