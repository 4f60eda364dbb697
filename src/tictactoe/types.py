# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, NamedTuple, Optional

Player = Literal["X", "O"]
Cell = Optional[Player]
MARKS: tuple[Player, Player] = ("X", "O")


class Move(NamedTuple):
    row: int
    col: int


NO_MOVE = Move(-1, -1)  # returned when no empty cell is left


def check_mark(p: str) -> Player:
    if p not in MARKS:
        raise ValueError(f"Mark must be X or O, got {p!r}.")
    return p  # type: ignore[return-value]


def other(p: Player) -> Player:
    return "O" if check_mark(p) == "X" else "X"
