from __future__ import annotations

from dataclasses import dataclass, field

from tictactoe.ai.search import SearchEngine
from tictactoe.core.board import Board
from tictactoe.types import Move, Player, check_mark


@dataclass(slots=True)
class Suggester:
    """
    Best-move hints for an interactive player.
    Read-only: the board is left exactly as it was and no turn is consumed.
    """

    mark: Player
    engine: SearchEngine = field(default_factory=SearchEngine)

    def __post_init__(self) -> None:
        check_mark(self.mark)

    def suggest(self, board: Board) -> Move:
        return self.engine.best_move(board, self.mark)
