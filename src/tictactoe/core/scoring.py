from __future__ import annotations

from tictactoe.config import WIN_SCORE
from tictactoe.core.board import Board, Line
from tictactoe.types import Player, other


def _owned_by(line: Line, player: Player) -> bool:
    return all(cell == player for cell in line)


def _wins_at(board: Board, i: int, player: Player) -> bool:
    """Row i, column i, or (for i < 2) diagonal i is fully owned by player."""
    if _owned_by(board.row(i), player) or _owned_by(board.column(i), player):
        return True
    return i < 2 and _owned_by(board.diagonal(i), player)


def evaluate(board: Board, player: Player) -> int:
    """
    +WIN_SCORE if player owns a full line, -WIN_SCORE if the opponent does, else 0.
    Only completed lines score.
    """
    opp = other(player)
    for i in range(board.size):
        if _wins_at(board, i, player):
            return WIN_SCORE
        if _wins_at(board, i, opp):
            return -WIN_SCORE
    return 0
