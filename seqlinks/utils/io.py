"""I/O helpers."""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def read_hits(path: str | Path) -> pd.DataFrame:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Hits file not found: {file_path}")
    sep = "\t" if file_path.suffix in {".tsv", ".tab"} else ","
    return pd.read_csv(file_path, sep=sep, dtype=str, keep_default_na=False)


def write_dataframe(df: pd.DataFrame, path: str | Path, index: bool = False) -> Path:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(file_path, index=index)
    return file_path
