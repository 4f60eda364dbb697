from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from ..io.load_results import EXPORT_GLOB, latest_results, read_results
from ..metrics.summarize import RANKABLE, SummaryConfig, depth_strength, filter_rows, numeric_summary, top_table
from ..plots.chart import plot_depth_curve, plot_histograms, plot_scatter, plot_top_bar

HISTOGRAM_COLS = ["ppg", "avg_ms_per_move", "nodes", "avg_depth"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize and chart a Tic Tac Toe self-play export.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--csv", type=Path, default=None, help="Export to read (default: newest in --results-dir)")
    src.add_argument("--results-dir", type=Path, default=Path("."), help="Where tictactoe-selfplay wrote its exports")
    ap.add_argument("--pattern", default=EXPORT_GLOB, help="Glob used to find the newest export")

    ap.add_argument("--metric", default="ppg", choices=RANKABLE, help="Column to rank by")
    ap.add_argument("--top", type=int, default=20, help="Rows in the top table and bar chart")
    ap.add_argument("--min-games", type=int, default=0, help="Skip teams with fewer games")
    ap.add_argument("--max-ms", type=float, default=None, help="Skip teams slower than this avg_ms_per_move")

    ap.add_argument("--outdir", type=Path, default=Path("figures"), help="Where to save charts")
    ap.add_argument("--show", action="store_true", help="Open charts in a window instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def _section(title: str, frame: pd.DataFrame, index: bool = False) -> None:
    if frame.empty:
        return
    print(f"\n=== {title} ===")
    print(frame.to_string(index=index))


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = args.csv or latest_results(args.results_dir, pattern=args.pattern)
    df = read_results(csv_path)
    print(f"\nLoaded {len(df)} teams from {csv_path}")

    cfg = SummaryConfig(
        metric=args.metric,
        top_n=args.top,
        min_games=args.min_games,
        max_avg_ms_per_move=args.max_ms,
    )
    table = top_table(df, cfg)
    by_depth = depth_strength(df)

    _section("Top table", table)
    _section("Numeric summary", numeric_summary(df), index=True)
    _section("Strength by search depth", by_depth)

    if args.no_plots:
        return 0

    shown = filter_rows(df, cfg)
    plot_histograms(shown, args.outdir, HISTOGRAM_COLS, show=args.show)
    plot_scatter(shown, args.outdir, x="avg_ms_per_move", y="ppg", show=args.show)
    plot_top_bar(table, args.outdir, metric=args.metric, show=args.show)
    plot_depth_curve(by_depth, args.outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {args.outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
