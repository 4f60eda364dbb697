from __future__ import annotations
from typing import Protocol

from tictactoe.core.board import Board
from tictactoe.types import Move, Player


class Agent(Protocol):
    name: str
    mark: Player

    def decide(self, board: Board) -> Move:
        """Pick a move for self.mark, apply it to board and return it."""
        ...
