from __future__ import annotations

import pytest

from tictactoe.types import Move
from tictactoe.ui.prompts import HINT, QUIT, ask_choice, parse_move


@pytest.mark.parametrize("raw, expected", [
    ("12", Move(0, 1)),
    (" 33 ", Move(2, 2)),
    ("3 1", Move(2, 0)),
    ("2,3", Move(1, 2)),
])
def test_parse_packed_and_spaced_moves(raw, expected):
    assert parse_move(raw, 3) == expected


def test_parse_4x4_corner():
    assert parse_move("44", 4) == Move(3, 3)


@pytest.mark.parametrize("raw", ["s", "S", "hint"])
def test_parse_hint(raw):
    assert parse_move(raw, 3) == HINT


@pytest.mark.parametrize("raw", ["q", "QUIT", "exit"])
def test_parse_quit(raw):
    assert parse_move(raw, 3) == QUIT


@pytest.mark.parametrize("raw", ["", "abc", "1", "123", "1 2 3", "x1"])
def test_parse_rejects_malformed(raw):
    with pytest.raises(ValueError):
        parse_move(raw, 3)


@pytest.mark.parametrize("raw", ["44", "04", "30 "])
def test_parse_rejects_out_of_range(raw):
    with pytest.raises(ValueError):
        parse_move(raw, 3)


def test_ask_choice_reprompts(scripted):
    assert ask_choice("pick: ", 4, scripted(["x", "5", "0", " 2 "])) == 2
