from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from tictactoe.ai.base import Agent
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.ai.search import SearchEngine
from tictactoe.config import DEFAULT_SIZE, MAX_DEPTH, setup_logging
from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner
from tictactoe.types import NO_MOVE, Player, other

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "selfplay_results_"

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
]


@dataclass(frozen=True)
class Team:
    """make(mark, game_seed) builds a fresh agent for one game."""

    name: str
    make: Callable[[Player, int], Agent]


# Series points for a win, draw and loss
POINTS = {"W": 1.0, "D": 0.5, "L": 0.0}


@dataclass
class SideStats:
    """Search work done by one side during one game."""

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth: int = 0


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0

    def record(self, result: str) -> None:
        """result is "W", "D" or "L" from this team's side."""
        self.games += 1
        self.points += POINTS[result]
        if result == "W":
            self.wins += 1
        elif result == "D":
            self.draws += 1
        else:
            self.losses += 1

    def absorb(self, side: SideStats) -> None:
        self.moves += side.moves
        self.time_ms += side.time_ms
        self.nodes += side.nodes
        self.depth_sum += side.depth


def ppg(a: Agg) -> float:
    return (a.points / a.games) if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return (a.time_ms / a.moves) if a.moves else 0.0


def avg_depth(a: Agg) -> float:
    return (a.depth_sum / a.moves) if a.moves else 0.0


def _minimax(mark: Player, seed: int, depth: int) -> MinimaxAgent:
    return MinimaxAgent(mark=mark, name=f"Minimax d{depth}", engine=SearchEngine(max_depth=depth))


def _random(mark: Player, seed: int) -> RandomAgent:
    return RandomAgent(mark=mark, rng=random.Random(seed))


def build_roster(max_depth: int = MAX_DEPTH) -> List[Team]:
    roster = [Team(f"Minimax d{d}", partial(_minimax, depth=d)) for d in range(1, max_depth + 1)]
    roster.append(Team("Random", _random))
    return roster


def _play_openings(board: Board, plies: int, rng: random.Random) -> Player:
    """Random opening plies; returns the side to move afterwards."""
    current: Player = "X"
    for _ in range(plies):
        cells = board.empty_cells()
        if not cells:
            break
        board.set(*rng.choice(cells), current)
        current = other(current)
    return current


def play_headless(
    agent_x: Agent,
    agent_o: Agent,
    size: int = DEFAULT_SIZE,
    seed: int = 0,
    opening_moves: int = 1,
) -> Tuple[str, Dict[str, SideStats]]:
    """
    Play one game without rendering. A few random opening plies keep
    deterministic agents from replaying the same game every time.
    Returns ("X" | "O" | "D", per-side stats).
    """
    board = Board(size)
    stats = {"X": SideStats(), "O": SideStats()}
    current = _play_openings(board, opening_moves, random.Random(seed))

    while True:
        winner = check_winner(board)
        if winner is not None:
            return winner, stats
        if board.is_full():
            return "D", stats

        agent = agent_x if current == "X" else agent_o
        start = time.perf_counter()
        move = agent.decide(board)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        if move == NO_MOVE:
            return "D", stats

        info = getattr(agent, "last_info", None) or {}
        side = stats[current]
        side.moves += 1
        side.time_ms += max(1, int(info.get("time_ms", elapsed_ms)))
        side.nodes += int(info.get("nodes", 0))
        side.depth += int(info.get("max_depth_reached", 0))

        current = other(current)


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    """Credit one game. outcome is the winning mark or "D"."""
    if outcome == "D":
        agg_a.record("D")
        agg_b.record("D")
        return
    a_mark = "X" if a_is_x else "O"
    agg_a.record("W" if outcome == a_mark else "L")
    agg_b.record("L" if outcome == a_mark else "W")


def run_series(
    roster: List[Team],
    size: int = DEFAULT_SIZE,
    games_per_pair: int = 2,
    seed: int = 1234,
    opening_moves: int = 1,
) -> Dict[str, Agg]:
    """Round-robin: every pairing plays games_per_pair games, alternating colors."""
    agg = {t.name: Agg() for t in roster}
    pairings = [(a, b) for i, a in enumerate(roster) for b in roster[i + 1:]]

    for p_idx, (a, b) in enumerate(pairings):
        for g in range(games_per_pair):
            a_is_x = g % 2 == 0
            x_team, o_team = (a, b) if a_is_x else (b, a)
            game_seed = seed + 1000 * p_idx + g

            outcome, stats = play_headless(
                x_team.make("X", game_seed), o_team.make("O", game_seed),
                size=size, seed=game_seed, opening_moves=opening_moves,
            )
            add_result(agg[a.name], agg[b.name], outcome, a_is_x)
            agg[x_team.name].absorb(stats["X"])
            agg[o_team.name].absorb(stats["O"])

        logger.info("pairing %d/%d done: %s vs %s", p_idx + 1, len(pairings), a.name, b.name)

    return agg


def ranking(agg: Dict[str, Agg]) -> List[Tuple[str, Agg]]:
    return sorted(agg.items(), key=lambda kv: (-ppg(kv[1]), avg_ms_per_move(kv[1])))


def print_table(agg: Dict[str, Agg]) -> None:
    print(f"{'rk':>3}  {'name':<14} {'games':>5} {'W-D-L':>9} {'ppg':>6} {'ms/move':>8} {'nodes':>10}")
    for rk, (name, a) in enumerate(ranking(agg), start=1):
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(f"{rk:>3}  {name:<14} {a.games:>5} {wdl:>9} {ppg(a):>6.3f} {avg_ms_per_move(a):>8.1f} {a.nodes:>10}")


def export_csv(agg: Dict[str, Agg], out_path: Path) -> Path:
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in ranking(agg):
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.nodes, round(avg_depth(a), 3),
            ])
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run a computer-vs-computer Tic Tac Toe series.")
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, choices=[3, 4], help="Board size")
    ap.add_argument("--games", type=int, default=2, help="Games per pairing (colors alternate)")
    ap.add_argument("--max-depth", type=int, default=MAX_DEPTH, help="Deepest minimax agent in the roster")
    ap.add_argument("--openings", type=int, default=1, help="Random opening plies per game")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed; each game derives its own for openings and the random agent")
    ap.add_argument("--results-dir", type=str, default=".", help="Where to write selfplay_results_*.csv")
    ap.add_argument("--no-csv", action="store_true", help="Do not export a CSV")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level)

    roster = build_roster(max_depth=args.max_depth)
    print(f"Roster size: {len(roster)} teams, board {args.size}x{args.size}")

    start = time.perf_counter()
    agg = run_series(
        roster,
        size=args.size,
        games_per_pair=args.games,
        seed=args.seed,
        opening_moves=args.openings,
    )
    print_table(agg)

    out: Optional[Path] = None
    if not args.no_csv:
        results_dir = Path(args.results_dir)
        results_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y%m%d_%H%M%S")
        out = export_csv(agg, results_dir / f"{EXPORT_PREFIX}{ts}.csv")
        print(f"Wrote CSV: {out}")

    print(f"Total runtime: {time.perf_counter() - start:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
