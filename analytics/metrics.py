from __future__ import annotations

"""Per-learner metrics over the attempt log."""

import numpy as np
import pandas as pd

from storage.schema import KINDS


def compute_metrics(df: pd.DataFrame) -> pd.DataFrame:
    """Summarize attempts per learner.

    Returns one row per learner with columns:
    - attempts, correct, acc
    - one count column per non-correct outcome kind (still_missing, keep_working, ...)
    """
    cols = ["learner", "attempts", "correct", "acc", *(k for k in KINDS if k != "correct")]
    if df.empty:
        return pd.DataFrame({c: pd.Series(dtype="float32" if c == "acc" else "object") for c in cols})

    counts = pd.crosstab(df["learner"].astype("string"), df["kind"].astype("string"))
    counts = counts.reindex(columns=list(KINDS), fill_value=0)
    counts.index.name = "learner"
    out = counts.reset_index()
    out.columns.name = None

    attempts = counts.sum(axis=1).to_numpy()
    correct = counts["correct"].to_numpy()
    out["attempts"] = attempts.astype("int64")
    out["correct"] = correct.astype("int64")
    # Avoid divide by zero; every learner in the log has at least one attempt
    out["acc"] = np.divide(correct, np.maximum(attempts, 1), dtype="float64").astype("float32")
    return out[cols].sort_values("learner", kind="stable").reset_index(drop=True)


def format_report(metrics: pd.DataFrame) -> str:
    """Return a human-readable summary, one line per learner."""
    if metrics.empty:
        return "No attempts logged yet."
    lines = []
    for row in metrics.itertuples(index=False):
        lines.append(
            f"{row.learner}: {row.correct}/{row.attempts} correct ({row.acc:.0%}), "
            f"partially correct {row.partially_correct}, keep working {row.keep_working}, "
            f"still missing {row.still_missing}"
        )
    return "\n".join(lines)
