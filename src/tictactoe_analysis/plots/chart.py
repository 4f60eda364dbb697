from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt

# Minimax rows vs the random baseline
TEAM_COLORS = {True: "tab:blue", False: "tab:gray"}


def _is_minimax(df: pd.DataFrame) -> pd.Series:
    return df["name"].str.startswith("Minimax")


def _finish(fig, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    out = outdir / filename
    fig.savefig(out, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    written: list[Path] = []
    for col in cols:
        fig, ax = plt.subplots()
        ax.hist(df[col], bins=max(1, min(10, len(df))))
        ax.set_title(f"{col} across {len(df)} teams")
        ax.set_xlabel(col)
        ax.set_ylabel("teams")

        out = _finish(fig, outdir, f"hist_{col}.png", show)
        if out is not None:
            written.append(out)
    return written


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    fig, ax = plt.subplots()
    ax.scatter(df[x], df[y], c=_is_minimax(df).map(TEAM_COLORS).tolist())
    for name, xv, yv in zip(df["name"], df[x], df[y]):
        ax.annotate(name, (xv, yv), fontsize=7)
    ax.set_title(f"{y} vs {x}")
    ax.set_xlabel(x)
    ax.set_ylabel(y)

    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show)


def plot_top_bar(table: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> Path | None:
    """Bar chart of a top_table() result, drawn in its ranking order."""
    if table.empty:
        return None

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(table["name"], table[metric], color=_is_minimax(table).map(TEAM_COLORS).tolist())
    ax.set_title(f"Top {len(table)} by {metric}")
    ax.set_ylabel(metric)
    ax.tick_params(axis="x", labelrotation=45)

    return _finish(fig, outdir, f"top_{len(table)}_{metric}.png", show)


def plot_depth_curve(depth_df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """ppg against the search depth limit (output of depth_strength)."""
    if depth_df.empty:
        return None

    fig, ax = plt.subplots()
    ax.plot(depth_df["search_depth"], depth_df["ppg"], marker="o")
    ax.set_xticks(depth_df["search_depth"])
    ax.set_title("ppg vs search depth")
    ax.set_xlabel("search depth")
    ax.set_ylabel("ppg")

    return _finish(fig, outdir, "ppg_vs_depth.png", show)
