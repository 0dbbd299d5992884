from __future__ import annotations

"""Parquet-backed log of graded attempts using pandas + pyarrow.

Unit of data: one row per ``check_answer`` call.
"""

from pathlib import Path

import pandas as pd

from .schema import DTYPES, AttemptRecord


DATA_FILE = "attempts.parquet"


def _empty_df() -> pd.DataFrame:
    return pd.DataFrame({k: pd.Series(dtype=v) for k, v in DTYPES.items()})


def _fix_dtypes(df: pd.DataFrame) -> pd.DataFrame:
    for col, dt in DTYPES.items():
        if col not in df.columns:
            df[col] = pd.NA
        df[col] = df[col].astype(dt)
    return df[list(DTYPES.keys())]


def init_store(data_dir: Path) -> None:
    """Ensure the data directory and an empty Parquet file with the right schema exist."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    f = data_dir / DATA_FILE
    if not f.exists():
        _empty_df().to_parquet(f, engine="pyarrow", index=False)


def validate_records(records: list[AttemptRecord]) -> pd.DataFrame:
    """Validate a list of AttemptRecord (or plain dicts) and return a typed DataFrame."""
    if not isinstance(records, list):
        raise TypeError("records must be a list[AttemptRecord]")
    rows = [r if isinstance(r, AttemptRecord) else AttemptRecord.model_validate(r) for r in records]
    if not rows:
        return _empty_df()
    df = pd.DataFrame([r.model_dump() for r in rows])
    return _fix_dtypes(df)


def append_attempts(df_new: pd.DataFrame, data_path: Path) -> None:
    """Append rows to the attempt log, creating it when needed."""
    data_path = Path(data_path)
    data_path.mkdir(parents=True, exist_ok=True)
    f = data_path / DATA_FILE
    if f.exists():
        df_old = _fix_dtypes(pd.read_parquet(f, engine="pyarrow"))
    else:
        df_old = _empty_df()
    frames = [d for d in (df_old, _fix_dtypes(df_new.copy())) if not d.empty]
    combined = pd.concat(frames, ignore_index=True) if frames else _empty_df()
    combined = _fix_dtypes(combined)
    combined.to_parquet(f, engine="pyarrow", index=False)


def load_all(data_path: Path) -> pd.DataFrame:
    """Load the full attempt log ordered by time; empty frame when nothing was logged."""
    f = Path(data_path) / DATA_FILE
    if not f.exists():
        return _empty_df()
    df = _fix_dtypes(pd.read_parquet(f, engine="pyarrow"))
    return df.sort_values("attempted_at", kind="stable").reset_index(drop=True)


def export_ndjson(df: pd.DataFrame, out_path: Path) -> None:
    """Export a DataFrame to line-delimited JSON (NDJSON) for quick inspection."""
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_json(out_path, orient="records", lines=True, date_format="iso")
