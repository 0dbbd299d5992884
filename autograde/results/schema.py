from __future__ import annotations

"""Pydantic model for a saved tracker snapshot."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class TrackerSnapshot(BaseModel):
    name: str
    email: str
    correct: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @field_validator("total")
    @classmethod
    def _total_ge_correct(cls, v: int, info: ValidationInfo) -> int:
        c = int(info.data.get("correct", 0))
        if v < c:
            raise ValueError("total must be >= correct")
        return v
