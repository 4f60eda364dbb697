from __future__ import annotations

from dataclasses import dataclass, field
import random

from tictactoe.core.board import Board
from tictactoe.types import Move, NO_MOVE, Player, check_mark


@dataclass(slots=True)
class RandomAgent:
    mark: Player
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        check_mark(self.mark)

    def decide(self, board: Board) -> Move:
        moves = board.empty_cells()
        if not moves:
            return NO_MOVE
        move = self.rng.choice(moves)
        board.set(move.row, move.col, self.mark)
        return move
