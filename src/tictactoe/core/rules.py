from __future__ import annotations
from typing import Optional, List, Tuple

from tictactoe.types import Player
from tictactoe.core.board import Board

Coord = Tuple[int, int]  # (row, col)


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    n = board.size
    g = board.grid

    # Rows
    for r in range(n):
        p = g[r][0]
        if p and all(g[r][c] == p for c in range(n)):
            return p, [(r, c) for c in range(n)]

    # Columns
    for c in range(n):
        p = g[0][c]
        if p and all(g[r][c] == p for r in range(n)):
            return p, [(r, c) for r in range(n)]

    # Main diagonal
    p = g[0][0]
    if p and all(g[i][i] == p for i in range(n)):
        return p, [(i, i) for i in range(n)]

    # Anti-diagonal
    p = g[0][n - 1]
    if p and all(g[i][n - 1 - i] == p for i in range(n)):
        return p, [(i, n - 1 - i) for i in range(n)]

    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
