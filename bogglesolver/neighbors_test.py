import pytest
from inline_snapshot import snapshot

from bogglesolver.neighbors import get_neighbors, init_neighbors


def test_neighbors33():
    assert init_neighbors(3, 3) == snapshot(
        [
            [1, 3, 4],
            [0, 2, 3, 4, 5],
            [1, 4, 5],
            [0, 1, 4, 6, 7],
            [0, 1, 2, 3, 5, 6, 7, 8],
            [1, 2, 4, 7, 8],
            [3, 4, 7],
            [3, 4, 5, 6, 8],
            [4, 5, 7],
        ]
    )


# This tests proper orientation: 3 wide x 2 tall, row-major.
# A B C
# D E F
def test_neighbors32():
    assert init_neighbors(3, 2) == snapshot(
        [
            [1, 3, 4],
            [0, 2, 3, 4, 5],
            [1, 4, 5],
            [0, 1, 4],
            [0, 1, 2, 3, 5],
            [1, 2, 4],
        ]
    )


def test_neighbors22():
    assert init_neighbors(2, 2) == [[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]


@pytest.mark.parametrize("w, h", [(3, 3), (3, 4), (4, 3), (4, 4), (5, 5), (6, 4)])
def test_neighbor_counts(w, h):
    ns = init_neighbors(w, h)
    assert len(ns) == w * h
    for i, n in enumerate(ns):
        x, y = i % w, i // w
        on_x_edge = x in (0, w - 1)
        on_y_edge = y in (0, h - 1)
        if on_x_edge and on_y_edge:
            assert len(n) == 3, i
        elif on_x_edge or on_y_edge:
            assert len(n) == 5, i
        else:
            assert len(n) == 8, i


@pytest.mark.parametrize("w, h", [(2, 2), (3, 4), (5, 5)])
def test_neighbors_are_adjacent_and_symmetric(w, h):
    ns = init_neighbors(w, h)
    for i, n in enumerate(ns):
        assert n == sorted(n)
        assert i not in n
        for j in n:
            assert i in ns[j]
            assert abs(i % w - j % w) <= 1
            assert abs(i // w - j // w) <= 1


def test_get_neighbors_is_cached():
    ns = get_neighbors(4, 4)
    assert ns is get_neighbors(4, 4)
    assert [list(n) for n in ns] == init_neighbors(4, 4)
    assert ns[5] == (0, 1, 2, 4, 6, 8, 9, 10)
