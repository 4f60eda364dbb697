from __future__ import annotations

from pathlib import Path

import pandas as pd

from tictactoe.scripts.selfplay import CSV_COLUMNS, EXPORT_PREFIX

EXPORT_GLOB = f"{EXPORT_PREFIX}*.csv"

# Column types of a tictactoe-selfplay export, keyed by its header
COLUMN_TYPES = {
    "name": str,
    "games": "int64", "wins": "int64", "draws": "int64", "losses": "int64",
    "points": "float64", "ppg": "float64",
    "avg_ms_per_move": "float64",
    "moves": "int64", "time_ms": "int64", "nodes": "int64", "avg_depth": "float64",
}


def read_results(csv_path: Path) -> pd.DataFrame:
    """
    Read one self-play export. The header must carry every column the
    exporter writes; extra columns are dropped and the rest come back
    in export order with fixed dtypes.
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path.name} is not a self-play export, missing columns: {missing}")

    return df[CSV_COLUMNS].astype(COLUMN_TYPES)


def latest_results(results_dir: Path, pattern: str = EXPORT_GLOB) -> Path:
    """Newest export in results_dir. Export names end in a timestamp, so name order is time order."""
    files = sorted(results_dir.glob(pattern)) if results_dir.is_dir() else []
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")
    return files[-1]
