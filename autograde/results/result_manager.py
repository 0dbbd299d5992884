from __future__ import annotations

"""Results Manager.

Collects one ``AttemptRecord`` per graded call in memory. The records
feed the Parquet log in ``storage`` and the summaries in ``analytics``.
"""

from typing import Any, Dict, List, Optional

from ..grading.messages import Message
from ..grading.tracker import ProgressTracker
from storage.schema import AttemptRecord


class ResultManager:
    def __init__(self) -> None:
        self._records: List[AttemptRecord] = []

    def record(self, tracker: ProgressTracker, message: Message, question: Optional[str] = None) -> AttemptRecord:
        if not message.is_outcome:
            raise ValueError(f"Only grading outcomes can be recorded, got '{message.kind.value}'")
        rec = AttemptRecord(
            learner=tracker.name,
            email=tracker.email,
            question=question,
            kind=message.kind.value,
            correct=tracker.correct,
            total=tracker.total,
        )
        self._records.append(rec)
        return rec

    def records(self) -> List[AttemptRecord]:
        return list(self._records)

    def summarize(self) -> Dict[str, Dict[str, Any]]:
        # Minimal aggregate per learner: attempts/correct seen by this manager
        out: Dict[str, Dict[str, Any]] = {}
        for rec in self._records:
            bucket = out.setdefault(rec.learner, {"attempts": 0, "correct": 0})
            bucket["attempts"] += 1
            if rec.kind == "correct":
                bucket["correct"] += 1
        return out
