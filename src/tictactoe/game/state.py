from __future__ import annotations
from dataclasses import dataclass

from tictactoe.core.board import Board
from tictactoe.types import Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player = "X"
    last_status: str = "Player X starts."
