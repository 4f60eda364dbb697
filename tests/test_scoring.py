from __future__ import annotations

import random

import pytest

from tictactoe.core.board import Board
from tictactoe.core.scoring import evaluate


def test_row_win_scores_both_ways():
    b = Board.from_rows(["XXX", "OO_", "___"])
    assert evaluate(b, "X") == 10
    assert evaluate(b, "O") == -10


def test_column_win_on_4x4():
    b = Board.from_rows(["_O__", "XO__", "XO__", "XO_X"])
    assert evaluate(b, "O") == 10
    assert evaluate(b, "X") == -10


def test_anti_diagonal_counts():
    b = Board.from_rows(["X_O", "XO_", "O_X"])
    assert evaluate(b, "O") == 10


@pytest.mark.parametrize("rows", [
    ["___", "___", "___"],
    ["XO_", "_X_", "O__"],
    ["XOX", "XOO", "OXX"],
])
def test_no_line_is_neutral(rows):
    b = Board.from_rows(rows)
    assert evaluate(b, "X") == 0
    assert evaluate(b, "O") == 0


@pytest.mark.parametrize("size", [3, 4])
def test_never_decisive_for_both_sides(size):
    rng = random.Random(7)
    for _ in range(50):
        b = Board(size)
        mark = "X"
        while not b.has_winner() and not b.is_full():
            m = rng.choice(b.empty_cells())
            b.set(m.row, m.col, mark)
            mark = "O" if mark == "X" else "X"

            x, o = evaluate(b, "X"), evaluate(b, "O")
            assert x == -o
            assert x in (-10, 0, 10)
