from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from tictactoe.config import CLEAR_SCREEN, USE_COLOR
from tictactoe.core.board import Board
from tictactoe.types import Cell

Coord = Tuple[int, int]

RESET = "\033[0m"
HIGHLIGHT = "\033[7m"

# ANSI style per board glyph and per screen element
STYLE = {
    "X": "\033[32m",
    "O": "\033[31m",
    None: "\033[90m",
    "title": "\033[1m",
    "status": "\033[36m",
    "hint": "\033[2m",
}


def paint(text: str, *codes: str) -> str:
    if not USE_COLOR or not codes:
        return text
    return "".join(codes) + text + RESET


def _piece(cell: Cell, highlighted: bool = False) -> str:
    codes = (HIGHLIGHT, STYLE[cell]) if highlighted else (STYLE[cell],)
    return paint(cell or "·", *codes)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()
    n = board.size

    out = [paint("    " + " ".join(str(i + 1) for i in range(n)), STYLE["hint"])]
    for r in range(n):
        parts = [_piece(board.get(r, col), (r, col) in hl) for col in range(n)]
        out.append(paint(f" {r + 1} ", STYLE["hint"]) + "|" + " ".join(parts) + "|")
    return out


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(paint(f"TIC TAC TOE {board.size}x{board.size}", STYLE["title"]))
    print(paint(status, STYLE["status"]) if status else "")

    for line in board_lines(board, highlight):
        print(line)

    print(paint("    Enter row+column (e.g. 12), s for a suggestion, q to quit.", STYLE["hint"]))
