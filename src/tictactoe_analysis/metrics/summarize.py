from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from tictactoe.scripts.selfplay import CSV_COLUMNS

RANKABLE = tuple(c for c in CSV_COLUMNS if c != "name")
# Smaller is better for these
COST_METRICS = frozenset({"losses", "avg_ms_per_move", "time_ms", "nodes"})
DEPTH_NAME = r"^Minimax d(\d+)$"


@dataclass(frozen=True)
class SummaryConfig:
    metric: str = "ppg"
    top_n: int = 20
    min_games: int = 0
    # Drop agents slower than this (ms per move)
    max_avg_ms_per_move: float | None = None

    def __post_init__(self) -> None:
        if self.metric not in RANKABLE:
            raise ValueError(f"Unknown metric {self.metric!r}. Choose from: {', '.join(RANKABLE)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    keep = df["games"] >= cfg.min_games
    if cfg.max_avg_ms_per_move is not None:
        keep &= df["avg_ms_per_move"] <= cfg.max_avg_ms_per_move
    return df[keep]


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """
    Best cfg.top_n rows by cfg.metric, with a 1-based "rk" column.
    Equal values keep the order the series ranked them in.
    """
    ranked = filter_rows(df, cfg).sort_values(
        cfg.metric, ascending=cfg.metric in COST_METRICS, kind="stable"
    )
    out = ranked.head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    return df.drop(columns="name").describe().T


def depth_strength(df: pd.DataFrame) -> pd.DataFrame:
    """ppg and search cost per depth limit, from the "Minimax dN" rows."""
    depth = df["name"].str.extract(DEPTH_NAME, expand=False)
    out = df.loc[depth.notna(), ["ppg", "avg_ms_per_move", "nodes", "avg_depth"]]
    out.insert(0, "search_depth", depth.dropna().astype(int))
    return out.sort_values("search_depth").reset_index(drop=True)
