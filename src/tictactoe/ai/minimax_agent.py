from __future__ import annotations

from dataclasses import dataclass, field
import logging

from tictactoe.ai.search import SearchEngine
from tictactoe.core.board import Board
from tictactoe.types import Move, NO_MOVE, Player, check_mark

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    mark: Player
    name: str = "Minimax AI"
    engine: SearchEngine = field(default_factory=SearchEngine)

    def __post_init__(self) -> None:
        check_mark(self.mark)

    @property
    def last_info(self) -> dict:
        return self.engine.last_info

    def decide(self, board: Board) -> Move:
        move = self.engine.best_move(board, self.mark)
        if move == NO_MOVE:
            logger.info("%s has no move left", self.name)
            return move

        if not board.set(move.row, move.col, self.mark):
            raise ValueError(f"Search returned an occupied cell: {move}")
        return move
