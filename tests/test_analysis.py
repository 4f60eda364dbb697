from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from tictactoe.scripts.selfplay import CSV_COLUMNS, Agg, export_csv
from tictactoe_analysis.__main__ import main as analysis_main
from tictactoe_analysis.io.load_results import COLUMN_TYPES, latest_results, read_results
from tictactoe_analysis.metrics.summarize import SummaryConfig, depth_strength, numeric_summary, top_table
from tictactoe_analysis.plots.chart import plot_depth_curve, plot_top_bar


ROWS = [
    # name, games, wins, draws, losses, points, ppg, avg_ms_per_move, moves, time_ms, nodes, avg_depth
    ("Minimax d3", 6, 3, 3, 0, 4.5, 0.75, 2.0, 20, 40, 3000, 3.0),
    ("Minimax d1", 6, 1, 2, 3, 2.0, 0.333333, 1.0, 20, 20, 200, 1.0),
    ("Random", 6, 0, 1, 5, 0.5, 0.083333, 1.0, 20, 20, 0, 0.0),
    ("Minimax d2", 6, 2, 4, 0, 4.0, 0.666667, 1.5, 20, 30, 900, 2.0),
]
COLS = [
    "name", "games", "wins", "draws", "losses", "points", "ppg",
    "avg_ms_per_move", "moves", "time_ms", "nodes", "avg_depth",
]


@pytest.fixture
def results_csv(tmp_path: Path) -> Path:
    path = tmp_path / "selfplay_results_20260101_120000.csv"
    pd.DataFrame(ROWS, columns=COLS).to_csv(path, index=False)
    return path


def test_load_results(results_csv):
    df = read_results(results_csv)
    assert len(df) == 4
    assert list(df.columns) == CSV_COLUMNS
    assert pd.api.types.is_integer_dtype(df["nodes"])
    assert pd.api.types.is_float_dtype(df["ppg"])


def test_column_types_cover_the_export_header():
    assert sorted(COLUMN_TYPES) == sorted(CSV_COLUMNS)


def test_reads_what_selfplay_writes(tmp_path):
    agg = {"Minimax d2": Agg(games=2, points=1.5, wins=1, draws=1, moves=6, time_ms=12, nodes=480, depth_sum=12)}
    path = export_csv(agg, tmp_path / "selfplay_results_20260101_000000.csv")

    row = read_results(path).iloc[0]

    assert row["name"] == "Minimax d2"
    assert row["ppg"] == 0.75
    assert row["avg_ms_per_move"] == 2.0
    assert row["avg_depth"] == 2.0


def test_extra_columns_are_dropped(tmp_path, results_csv):
    df = pd.read_csv(results_csv)
    df["note"] = "x"
    wider = tmp_path / "wider.csv"
    df.to_csv(wider, index=False)

    assert list(read_results(wider).columns) == CSV_COLUMNS


def test_missing_file_and_column(tmp_path, results_csv):
    with pytest.raises(FileNotFoundError):
        read_results(tmp_path / "nope.csv")

    bad = tmp_path / "bad.csv"
    bad.write_text("agent,games\nx,1\n")
    with pytest.raises(ValueError):
        read_results(bad)

    partial = tmp_path / "partial.csv"
    pd.read_csv(results_csv).drop(columns=["nodes"]).to_csv(partial, index=False)
    with pytest.raises(ValueError, match="nodes"):
        read_results(partial)


def test_latest_file_wins(tmp_path, results_csv):
    newer = tmp_path / "selfplay_results_20260102_090000.csv"
    newer.write_text(results_csv.read_text())
    assert latest_results(tmp_path) == newer

    with pytest.raises(FileNotFoundError):
        latest_results(tmp_path / "empty-missing")


def test_top_table_orders_by_metric(results_csv):
    df = read_results(results_csv)

    table = top_table(df, SummaryConfig(metric="ppg", top_n=2))
    assert list(table["name"]) == ["Minimax d3", "Minimax d2"]
    assert list(table["rk"]) == [1, 2]

    fastest = top_table(df, SummaryConfig(metric="avg_ms_per_move", max_avg_ms_per_move=1.5))
    # Cost metric: cheapest first, ties keep file order
    assert list(fastest["name"]) == ["Minimax d1", "Random", "Minimax d2"]


def test_unknown_metric_is_rejected():
    with pytest.raises(ValueError):
        SummaryConfig(metric="strength")


def test_depth_strength(results_csv):
    df = read_results(results_csv)
    by_depth = depth_strength(df)
    assert list(by_depth["search_depth"]) == [1, 2, 3]
    assert by_depth["ppg"].is_monotonic_increasing


def test_numeric_summary(results_csv):
    desc = numeric_summary(read_results(results_csv))
    assert "ppg" in desc.index
    assert desc.loc["games", "mean"] == 6


def test_plots_are_saved(results_csv, tmp_path):
    df = read_results(results_csv)
    outdir = tmp_path / "figs"

    table = top_table(df, SummaryConfig(metric="ppg", top_n=3))
    bar = plot_top_bar(table, outdir, metric="ppg", show=False)
    curve = plot_depth_curve(depth_strength(df), outdir, show=False)

    assert bar is not None and bar.name == "top_3_ppg.png" and bar.exists()
    assert curve is not None and curve.name == "ppg_vs_depth.png"


def test_cli(results_csv, tmp_path, capsys):
    outdir = tmp_path / "out"
    rc = analysis_main(["analyze", "--csv", str(results_csv), "--outdir", str(outdir)])
    assert rc == 0
    assert (outdir / "scatter_ppg_vs_avg_ms_per_move.png").exists()
    out = capsys.readouterr().out
    assert "=== Top table ===" in out
    assert "Strength by search depth" in out


def test_cli_unknown_command(capsys):
    assert analysis_main(["bogus"]) == 2
    assert "Unknown command: bogus" in capsys.readouterr().err


def test_cli_without_command_word(results_csv, capsys):
    assert analysis_main(["--csv", str(results_csv), "--no-plots"]) == 0
    assert "=== Top table ===" in capsys.readouterr().out
