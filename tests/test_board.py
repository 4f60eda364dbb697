from __future__ import annotations

import pytest

from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner, check_winner_with_line, is_draw
from tictactoe.types import Move


def test_new_board_is_empty_square():
    b = Board(4)
    assert b.size == 4
    assert len(b.grid) == 4 and all(len(r) == 4 for r in b.grid)
    assert len(b.empty_cells()) == 16


@pytest.mark.parametrize("size", [0, 2, 5])
def test_only_3_and_4_are_allowed(size):
    with pytest.raises(ValueError):
        Board(size)


def test_grid_shape_is_checked():
    with pytest.raises(ValueError):
        Board(3, [[None, None], [None, None], [None, None]])


def test_set_legal_and_illegal():
    b = Board(3)
    assert b.set(1, 1, "X") is True
    assert b.get(1, 1) == "X"

    # Occupied
    assert b.set(1, 1, "O") is False
    assert b.get(1, 1) == "X"

    # Out of range never raises
    assert b.set(-1, 0, "O") is False
    assert b.set(0, 3, "O") is False
    assert b.set(3, 3, "O") is False
    assert len(b.empty_cells()) == 8


def test_unknown_mark_is_refused():
    b = Board(3)
    assert b.set(0, 0, "Z") is False
    assert b.set(0, 0, None) is False
    assert b.grid == [[None] * 3 for _ in range(3)]

    with pytest.raises(ValueError):
        with b.trial(1, 1, "Q"):
            pass
    assert b.is_empty(1, 1)


def test_grid_cells_are_checked():
    with pytest.raises(ValueError):
        Board(3, [["X", None, None], [None, "Z", None], [None, None, None]])


def test_clear_empties_a_cell():
    b = Board(3)
    b.set(0, 2, "O")
    b.clear(0, 2)
    assert b.is_empty(0, 2)


def test_lines():
    b = Board.from_rows(["XO_", "_X_", "O_X"])
    assert b.row(0) == ("X", "O", None)
    assert b.column(0) == ("X", None, "O")
    assert b.diagonal(0) == ("X", "X", "X")
    assert b.diagonal(1) == (None, "X", "O")
    assert len(b.lines()) == 8


def test_empty_cells_row_major():
    b = Board.from_rows(["X_O", "_O_", "X__"])
    assert b.empty_cells() == [Move(0, 1), Move(1, 0), Move(1, 2), Move(2, 1), Move(2, 2)]


def test_diagonal_win():
    b = Board.from_rows(["XO_", "_X_", "O_X"])
    assert b.has_winner()
    assert not b.is_full()
    assert check_winner_with_line(b) == ("X", [(0, 0), (1, 1), (2, 2)])


def test_anti_diagonal_win_on_4x4():
    b = Board.from_rows(["X__O", "X_O_", "_O__", "O_XX"])
    assert b.has_winner()
    assert check_winner(b) == "O"


def test_one_cell_left_is_not_full():
    b = Board.from_rows(["XOX", "XOO", "OX_"])
    assert not b.has_winner()
    assert not b.is_full()
    assert not is_draw(b)


def test_full_board_without_line_is_a_draw():
    b = Board.from_rows(["XOX", "XOO", "OXX"])
    assert not b.has_winner()
    assert b.is_full()
    assert is_draw(b)


def test_forced_draw_with_empty_cell_is_not_full():
    # Nobody can complete a line any more, but a cell is still empty.
    b = Board.from_rows(["_OX", "XOO", "OXX"])
    assert not b.has_winner()
    assert not b.is_full()


def test_trial_undoes_on_exception():
    b = Board(3)
    with pytest.raises(RuntimeError):
        with b.trial(0, 0, "X"):
            assert b.get(0, 0) == "X"
            raise RuntimeError("boom")
    assert b.is_empty(0, 0)


def test_trial_rejects_occupied_cell():
    b = Board.from_rows(["X__", "___", "___"])
    with pytest.raises(ValueError):
        with b.trial(0, 0, "O"):
            pass
    assert b.get(0, 0) == "X"


def test_copy_is_independent():
    b = Board.from_rows(["X__", "___", "___"])
    c = b.copy()
    c.set(1, 1, "O")
    assert b.is_empty(1, 1)
    assert str(b) == "X__\n___\n___"
