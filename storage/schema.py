from __future__ import annotations

"""Schema constants and Pydantic model for the Parquet-backed attempt log."""

from datetime import datetime, timezone
from typing import Literal, Optional

import pandas as pd
from pandas.api.types import CategoricalDtype
from pydantic import BaseModel, Field, ValidationInfo, field_validator

# --- Constants ---

KINDS = ("still_missing", "keep_working", "partially_correct", "correct")


def _cat_dtype(categories) -> CategoricalDtype:
    return CategoricalDtype(categories=sorted(categories), ordered=False)


DTYPES = {
    "learner": "string",
    "email": "string",
    "question": "string",
    "kind": _cat_dtype(KINDS),
    # tracker counters right after the attempt
    "correct": "UInt32",
    "total": "UInt32",
    # timezone-aware UTC timestamps
    "attempted_at": pd.DatetimeTZDtype(tz="UTC"),
}


# --- Pydantic models ---

class AttemptRecord(BaseModel):
    """One graded call, with the tracker counters right after it."""

    learner: str
    email: str
    question: Optional[str] = None
    kind: Literal[KINDS]  # type: ignore[valid-type]
    correct: int = Field(ge=0, le=4294967295)
    total: int = Field(ge=1, le=4294967295)
    attempted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("total")
    @classmethod
    def _total_ge_correct(cls, v: int, info: ValidationInfo) -> int:
        c = int(info.data.get("correct", 0))
        if v < c:
            raise ValueError("total must be >= correct")
        return v

    @field_validator("attempted_at")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
