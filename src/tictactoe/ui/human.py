from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from tictactoe.ai.hints import Suggester
from tictactoe.core.board import Board
from tictactoe.types import Move, NO_MOVE, Player, check_mark
from tictactoe.ui.prompts import HINT, QUIT, QuitRequested, parse_move


@dataclass(slots=True)
class HumanAgent:
    """
    Console player. decide() keeps prompting until a legal move has been placed.
    A hint request prints the suggested move and asks again.
    """

    mark: Player
    name: str = "Human"
    suggester: Suggester | None = None
    input_fn: Callable[[str], str] = input
    output_fn: Callable[[str], None] = print
    last_hint: Move | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        check_mark(self.mark)

    def decide(self, board: Board) -> Move:
        prompt = f"Player {self.mark}, enter your move (e.g. 12 for row 1, column 2), or 's' for a suggestion: "
        while True:
            try:
                cmd = parse_move(self.input_fn(prompt), board.size)
            except ValueError as e:
                self.output_fn(str(e))
                continue

            if cmd == QUIT:
                raise QuitRequested(self.mark)

            if cmd == HINT:
                suggester = self.suggester or Suggester(self.mark)
                hint = suggester.suggest(board)
                self.last_hint = hint
                if hint == NO_MOVE:
                    self.output_fn("No moves left to suggest.")
                else:
                    self.output_fn(f"Suggested best move: {hint.row + 1}, {hint.col + 1}")
                continue

            if board.set(cmd.row, cmd.col, self.mark):
                return cmd
            self.output_fn(f"Cell {cmd.row + 1}, {cmd.col + 1} is already taken.")
