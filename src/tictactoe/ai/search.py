from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time

from tictactoe.config import MAX_DEPTH, WIN_SCORE
from tictactoe.core.board import Board
from tictactoe.core.scoring import evaluate
from tictactoe.types import Move, NO_MOVE, Player, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchEngine:
    """
    Depth-limited minimax with alpha-beta pruning.

    Candidates are tried in row-major order and a later candidate only replaces
    the current best on a strictly greater score, so ties go to the earliest cell.
    Every speculative placement goes through Board.trial, which empties the
    cell again on any exit path, including a pruning break.
    """

    max_depth: int = MAX_DEPTH
    prune: bool = True

    # Stats for the last best_move call
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0
    _deepest: int = 0

    def best_move(self, board: Board, me: Player) -> Move:
        self._nodes = 0
        self._cutoffs = 0
        self._deepest = 0

        start = time.perf_counter()

        best_move = NO_MOVE
        best_score = -inf
        alpha = -inf
        beta = inf

        for m in board.empty_cells():
            with board.trial(m.row, m.col, me):
                score = self.search(board, 0, False, alpha, beta, me)

            if score > best_score:
                best_move = m
                best_score = score
            if self.prune:
                alpha = max(alpha, best_score)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move": best_move,
            "score": int(best_score) if best_move != NO_MOVE else None,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "max_depth_reached": self._deepest,
            "depth_limit": self.max_depth,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "best_move %s for %s on %dx%d: score=%s nodes=%d cutoffs=%d depth=%d",
            best_move, me, board.size, board.size,
            self.last_info["score"], self._nodes, self._cutoffs, self._deepest,
        )
        return best_move

    def search(self, board: Board, depth: int, maximizing: bool, alpha: float, beta: float, me: Player) -> int:
        """
        Score the position from me's point of view.
        depth counts plies below the root candidate; the maximizing side places me.
        """
        self._nodes += 1
        self._deepest = max(self._deepest, depth)

        score = evaluate(board, me)
        if depth == self.max_depth or abs(score) == WIN_SCORE or board.is_full():
            return score

        mover = me if maximizing else other(me)
        best = -inf if maximizing else inf

        for m in board.empty_cells():
            with board.trial(m.row, m.col, mover):
                child = self.search(board, depth + 1, not maximizing, alpha, beta, me)

            if maximizing:
                best = max(best, child)
                alpha = max(alpha, best)
            else:
                best = min(best, child)
                beta = min(beta, best)

            if self.prune and beta <= alpha:
                self._cutoffs += 1
                break

        return int(best)
