
# src/tictactoe/core/board.py

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from tictactoe.config import BOARD_SIZES, DEFAULT_SIZE
from tictactoe.types import Cell, Player, Move, MARKS

Line = Tuple[Cell, ...]


@dataclass(slots=True)
class Board:
    size: int = DEFAULT_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size not in BOARD_SIZES:
            raise ValueError(f"Board size must be one of {BOARD_SIZES}, got {self.size}.")
        if not self.grid:
            self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]
        elif len(self.grid) != self.size or any(len(r) != self.size for r in self.grid):
            raise ValueError(f"Grid must be {self.size}x{self.size}.")
        if any(cell is not None and cell not in MARKS for r in self.grid for cell in r):
            raise ValueError("Grid cells must be X, O or None.")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from strings like "XX_", one per row.
        Anything other than X or O is an empty cell.
        """
        grid: List[List[Cell]] = [
            [ch if ch in MARKS else None for ch in r.strip()]  # type: ignore[misc]
            for r in rows
        ]
        return cls(size=len(grid), grid=grid)

    def copy(self) -> "Board":
        return Board(self.size, [r[:] for r in self.grid])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.grid[row][col] is None

    def empty_cells(self) -> List[Move]:
        """Empty cells in row-major order."""
        return [
            Move(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.grid[r][c] is None
        ]

    def set(self, row: int, col: int, mark: Player) -> bool:
        if mark not in MARKS or not self.is_empty(row, col):
            return False
        self.grid[row][col] = mark
        return True

    def clear(self, row: int, col: int) -> None:
        self.grid[row][col] = None

    @contextmanager
    def trial(self, row: int, col: int, mark: Player) -> Iterator[None]:
        """
        Place a mark for the duration of the block.
        The cell is emptied again however the block exits.
        """
        if not self.set(row, col, mark):
            raise ValueError(f"Cannot place {mark} at ({row}, {col}).")
        try:
            yield
        finally:
            self.clear(row, col)

    # Lines

    def row(self, i: int) -> Line:
        return tuple(self.grid[i])

    def column(self, i: int) -> Line:
        return tuple(self.grid[r][i] for r in range(self.size))

    def diagonal(self, i: int) -> Line:
        # 0: top-left to bottom-right, 1: top-right to bottom-left
        n = self.size
        if i == 0:
            return tuple(self.grid[k][k] for k in range(n))
        return tuple(self.grid[k][n - 1 - k] for k in range(n))

    def lines(self) -> List[Line]:
        n = self.size
        return (
            [self.row(i) for i in range(n)]
            + [self.column(i) for i in range(n)]
            + [self.diagonal(0), self.diagonal(1)]
        )

    def has_winner(self) -> bool:
        return any(line[0] is not None and line.count(line[0]) == self.size for line in self.lines())

    def is_full(self) -> bool:
        # Only a saturated board counts, even if the game is already a forced draw.
        return all(None not in line for line in self.lines())

    def __str__(self) -> str:
        return "\n".join("".join(p or "_" for p in r) for r in self.grid)
