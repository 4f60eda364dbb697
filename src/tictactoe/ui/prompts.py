from __future__ import annotations
from typing import Callable, Literal, Union

from tictactoe.types import Move

Command = Literal["hint", "quit"]
HINT: Command = "hint"
QUIT: Command = "quit"


class QuitRequested(Exception):
    """A human asked to leave the current game."""


def parse_move(raw: str, size: int) -> Union[Move, Command]:
    """
    Translate 1-based console input into a zero-based Move.

    Accepts packed digits ("12" = row 1, column 2) as well as "1 2" and "1,2".
    "s" asks for a suggestion, "q" quits. Anything else raises ValueError.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return QUIT
    if s in {"s", "hint", "suggest"}:
        return HINT

    parts = s.replace(",", " ").split()
    if len(parts) == 1 and len(parts[0]) == 2:
        parts = list(parts[0])
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter row and column as two digits (e.g. 12), s or q.")

    row, col = int(parts[0]) - 1, int(parts[1]) - 1
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Row and column must be between 1 and {size}.")
    return Move(row, col)


def ask_choice(prompt: str, max_option: int, input_fn: Callable[[str], str] = input) -> int:
    """Keep asking until the answer is a number in 1..max_option."""
    raw = input_fn(prompt)
    while True:
        s = raw.strip()
        if s.isdigit() and 1 <= int(s) <= max_option:
            return int(s)
        raw = input_fn(f"Invalid input. Enter a valid choice (1 - {max_option}): ")
